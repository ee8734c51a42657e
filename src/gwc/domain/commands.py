"""Pure functions that build the work-commit shell command.

The command is handed to a shell as a single string, so user input is
escaped before interpolation: the commit message for a POSIX double-quoted
context and the alias name with ``shlex.quote``.  Ordinary input renders
unchanged, e.g. ``git proj1 commit --allow-empty -m "wip"``.
"""

import shlex

# Characters that keep their special meaning inside double quotes.
_DOUBLE_QUOTE_SPECIALS = ("\\", '"', "$", "`")


def escape_double_quoted(value: str) -> str:
    """Escape ``value`` so it is taken literally inside ``"..."``."""
    for ch in _DOUBLE_QUOTE_SPECIALS:
        value = value.replace(ch, f"\\{ch}")
    return value


def build_commit_command(message: str, alias: str | None = None) -> str:
    """Return the empty-commit command, optionally routed through a Git alias."""
    quoted_message = f'"{escape_double_quoted(message)}"'
    if alias:
        return f"git {shlex.quote(alias)} commit --allow-empty -m {quoted_message}"
    return f"git commit --allow-empty -m {quoted_message}"
