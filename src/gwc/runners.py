"""Command runner protocol and implementations."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class CommandDispatchError(Exception):
    """Raised when a dispatched command cannot be started or exits non-zero."""


class CommandRunner(Protocol):
    """Protocol that every command backend must satisfy."""

    def run(self, command: str) -> None:
        """Execute a full shell command string."""
        ...


class ShellRunner:
    """Runs commands through the user's shell inside a repository.

    Args:
        cwd: Working directory for the command; defaults to the process cwd.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def run(self, command: str) -> None:
        """Run ``command`` and raise ``CommandDispatchError`` on failure."""
        logger.info("Running %s", command)
        try:
            result = subprocess.run(
                command, shell=True, cwd=self._cwd, capture_output=True, text=True
            )
        except OSError as exc:
            raise CommandDispatchError(f"Could not start command: {exc}") from exc
        if result.returncode != 0:
            raise CommandDispatchError(
                f"Command failed (exit {result.returncode}):\n"
                f"  {command}\n"
                f"  stderr: {result.stderr.strip()}"
            )


class DryRunRunner:
    """Records commands instead of executing them."""

    def __init__(self) -> None:
        self.commands: list[str] = []

    def run(self, command: str) -> None:
        logger.info("Dry run, not executing %s", command)
        self.commands.append(command)
