"""Settings file loading, validation, and persistence.

Schema on disk (~/.config/gwc/config.json):

    {
        "default_commit_message": "Work in progress",
        "gitconfig_path": "~/.gitconfig",
        "repository": "~/src/my-project"
    }

Every field is optional.  Keys prefixed with "_" are reserved (e.g.
"_comment") and are stripped on load.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from gwc.constants import DEFAULT_COMMIT_MESSAGE

CONFIG_PATH = Path("~/.config/gwc/config.json").expanduser()

_README_PATH = Path("~/.config/gwc/README.md").expanduser()

_README_CONTENT = """\
# gwc configuration

Edit `config.json` in this directory to change how gwc creates work commits.

## Schema

```json
{
    "default_commit_message": "Work in progress",
    "gitconfig_path": "~/.gitconfig",
    "repository": "~/src/my-project"
}
```

- `default_commit_message` pre-fills the commit message prompt.
- `gitconfig_path` is the Git config file whose `[alias]` section holds
  your identity aliases.  Defaults to `~/.gitconfig`.
- `repository` is where the empty commit is made.  Defaults to the
  directory gwc was started from.

Keys prefixed with `_` (e.g. `_comment`) are ignored by gwc.
"""


class Settings(BaseModel):
    """User-facing options."""

    default_commit_message: str = DEFAULT_COMMIT_MESSAGE
    gitconfig_path: Path | None = None
    repository: Path | None = None

    @field_validator("gitconfig_path", "repository")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None


class ConfigError(Exception):
    """Raised when config.json exists but cannot be parsed or validated."""


def load_settings() -> Settings:
    """Load and validate the settings file.

    Creates the config directory, an empty config.json, and a README on first
    run, returning the defaults.  Raises ConfigError if the file exists but is
    malformed.
    """
    if not CONFIG_PATH.exists():
        _bootstrap()
        return Settings()

    try:
        raw: object = json.loads(CONFIG_PATH.read_text() or "{}")
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("config.json must be a JSON object at the top level")

    # Strip reserved/comment keys.
    fields = {k: v for k, v in raw.items() if not k.startswith("_")}

    try:
        return Settings.model_validate(fields)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def save_settings(settings: Settings) -> None:
    """Persist settings to disk, creating directories as needed."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(settings.model_dump_json(indent=2, exclude_none=True))


def _bootstrap() -> None:
    """Create the config directory, an empty config.json, and a README."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text("{}\n")
    if not _README_PATH.exists():
        _README_PATH.write_text(_README_CONTENT)


# Kept apart from config.json; an unreadable theme file is ignored.
THEME_CONFIG_PATH = Path("~/.config/gwc/theme.json").expanduser()


class ThemePreference(BaseModel):
    theme: str | None = None


def load_theme() -> str | None:
    """Return the saved theme name, or None if unset or unreadable."""
    try:
        return ThemePreference.model_validate_json(THEME_CONFIG_PATH.read_text()).theme
    except (OSError, ValidationError):
        return None


def save_theme(theme: str) -> None:
    THEME_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    THEME_CONFIG_PATH.write_text(ThemePreference(theme=theme).model_dump_json(indent=2))
