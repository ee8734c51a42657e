"""Application-wide constants."""

from pathlib import Path

APP_TITLE = "gwc"
APP_SUBTITLE = "Git Work Commit"

GITCONFIG_PATH = Path("~/.gitconfig").expanduser()

DEFAULT_COMMIT_MESSAGE = "Work in progress"

ALIAS_SECTION = "alias"
# Indentation used for key lines written under a section header.
ALIAS_INDENT = "    "

CREATE_ALIAS_LABEL = "+ Create new alias"
CREATE_ALIAS_DESCRIPTION = "Define a new Git identity alias"

INDICATOR_ON_TEXT = "Stop Work Commit"
INDICATOR_OFF_TEXT = "Start Work Commit ({count} aliases)"

TABLE_COLUMNS = ("#", "Alias", "Definition")

# (section title, [(keys, description), ...]) rendered by HelpScreen.
HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Work commit",
        (
            ("w", "Start or stop work commit"),
            ("ctrl+w", "Stop from inside a prompt"),
            ("r", "Reload aliases"),
        ),
    ),
    (
        "Prompts",
        (
            ("enter", "Accept"),
            ("escape", "Cancel the work commit"),
        ),
    ),
    (
        "Navigation",
        (
            ("j / ↓", "Move down"),
            ("k / ↑", "Move up"),
        ),
    ),
    (
        "General",
        (
            ("?", "Toggle this help"),
            ("q", "Quit"),
        ),
    ),
)

HELP_ACTIVE_NOTE = "A work commit is in progress. Press ctrl+w to stop it."
HELP_IDLE_NOTE = "Press w to pick an alias and create an empty commit."
