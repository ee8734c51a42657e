"""Read and extend the ``[alias]`` section of a Git configuration file.

Only the single-level alias section is modelled.  Every other section is
carried through untouched: ``load_aliases`` never writes, and
``create_alias`` inserts exactly one line, leaving every other byte of the
file as it was.

Raises ``AliasValidationError`` for bad input and ``AliasWriteError`` when
the file cannot be read or written during alias creation.
"""

import logging
import re
from pathlib import Path

from gwc.constants import ALIAS_INDENT, ALIAS_SECTION, GITCONFIG_PATH
from gwc.models import AliasEntry, AliasSet

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"^\[([^\[\]]+)\]$")
_QUALIFIED_PREFIX = f"{ALIAS_SECTION}."
_ALIAS_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
_UNSAFE_VALUE_CHARS = frozenset("#;\"\\'")


class AliasValidationError(ValueError):
    """Raised when an alias name, user name or email is rejected."""


class AliasWriteError(Exception):
    """Raised when the config file cannot be read or written while creating an alias."""


def validate_alias_name(name: str) -> str | None:
    """Return an error message for an unusable alias name, or None if it is fine.

    Git only accepts keys that start with a letter and continue with
    letters, digits and ``-``; anything else makes the whole file unreadable.
    """
    if not name:
        return "Alias name cannot be blank"
    if any(ch.isspace() for ch in name):
        return "Alias name cannot contain whitespace"
    if not _ALIAS_NAME_RE.match(name):
        return "Alias name must start with a letter and use only letters, digits and '-'"
    return None


def _unsafe_value_error(field: str, value: str) -> str | None:
    # The definition is stored as an unquoted config value inside single shell quotes.
    bad = sorted({ch for ch in value if ch in _UNSAFE_VALUE_CHARS or not ch.isprintable()})
    if bad:
        return f"{field} cannot contain {' '.join(repr(ch) for ch in bad)}"
    return None


def validate_user_name(user_name: str) -> str | None:
    if not user_name.strip():
        return "User name cannot be blank"
    return _unsafe_value_error("User name", user_name)


def validate_user_email(user_email: str) -> str | None:
    """Minimal check: the address must contain an ``@`` and no config-special characters."""
    if "@" not in user_email:
        return "Email must contain '@'"
    return _unsafe_value_error("Email", user_email)


def parse_config_entries(text: str) -> dict[str, str]:
    """Return every alias-section key as ``alias.<key> -> value``.

    Each line is stripped.  ``[name]`` opens a section (lower-cased); any
    other line containing ``=`` is split on the first ``=`` only, with key
    and value stripped.  Lines without ``=`` and lines before the first
    header are ignored.  Later duplicates of a key win.
    """
    entries: dict[str, str] = {}
    section: str | None = None
    for line in text.splitlines():
        stripped = line.strip()
        match = _SECTION_RE.match(stripped)
        if match:
            section = match.group(1).strip().lower()
            continue
        if section is None or "=" not in stripped:
            continue
        key, _, value = stripped.partition("=")
        if section == ALIAS_SECTION:
            entries[f"{_QUALIFIED_PREFIX}{key.strip()}"] = value.strip()
    return entries


def parse_aliases(text: str) -> AliasSet:
    """Parse config text into an AliasSet keyed by bare alias name."""
    return {
        key.removeprefix(_QUALIFIED_PREFIX): value
        for key, value in parse_config_entries(text).items()
    }


def insert_alias_line(text: str, line: str) -> str:
    """Return ``text`` with ``line`` added to its first ``[alias]`` section.

    The line goes directly after the last key line of that section, or
    directly after its header when the section is empty.  Without an alias
    section, a fresh header and the line are appended to the end.
    """
    lines = text.splitlines(keepends=True)
    header_index: int | None = None
    insert_at: int | None = None
    for index, raw in enumerate(lines):
        match = _SECTION_RE.match(raw.strip())
        if header_index is None:
            if match and match.group(1).strip().lower() == ALIAS_SECTION:
                header_index = index
                insert_at = index + 1
            continue
        if match:
            break
        if "=" in raw:
            insert_at = index + 1

    if insert_at is None:
        return f"{text}\n[{ALIAS_SECTION}]\n{line}\n"

    before = "".join(lines[:insert_at])
    if before and not before.endswith("\n"):
        before += "\n"
    return f"{before}{line}\n{''.join(lines[insert_at:])}"


class AliasStore:
    """Durable access to the alias section of one Git config file.

    Args:
        path: The config file; defaults to ``~/.gitconfig``.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else GITCONFIG_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load_aliases(self) -> AliasSet:
        """Return the aliases currently recorded in the file.

        Re-reads the file on every call.  A missing or unreadable file is
        treated as having no aliases.
        """
        try:
            text = self._path.read_text()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read git config %s: %s", self._path, exc)
            return {}
        return parse_aliases(text)

    def create_alias(self, name: str, user_name: str, user_email: str) -> AliasEntry:
        """Validate, then write a new alias into the file.

        Validation happens before any file access.  A file that does not
        exist yet is treated as empty; one that exists but cannot be read or
        written raises ``AliasWriteError``.
        """
        for error in (
            validate_alias_name(name),
            validate_user_name(user_name),
            validate_user_email(user_email),
        ):
            if error is not None:
                raise AliasValidationError(error)

        entry = AliasEntry(name=name, user_name=user_name, user_email=user_email)
        line = f"{ALIAS_INDENT}{entry.name} = {entry.definition}"

        # newline="" keeps CRLF files byte-identical outside the new line.
        try:
            text = ""
            if self._path.exists():
                with self._path.open(newline="") as f:
                    text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise AliasWriteError(f"Failed to create alias '{name}': {exc}") from exc

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", newline="") as f:
                f.write(insert_alias_line(text, line))
        except OSError as exc:
            raise AliasWriteError(f"Failed to create alias '{name}': {exc}") from exc

        logger.info("Created alias %s in %s", name, self._path)
        return entry
