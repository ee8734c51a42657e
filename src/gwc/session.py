"""One end-to-end work-commit workflow.

A ``WorkCommitSession`` is a linear state machine with one state per user
prompt.  Each ``_step_*`` handler performs a single suspend point and returns
the next ``SessionStep``; cancelling any prompt moves straight to
``CANCELLED``.  The host UI is reached only through the ``Prompter``
protocol, so the whole flow runs the same under Textual or a test fake.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from gwc.constants import CREATE_ALIAS_DESCRIPTION, CREATE_ALIAS_LABEL, DEFAULT_COMMIT_MESSAGE
from gwc.domain.commands import build_commit_command
from gwc.git.aliases import (
    AliasStore,
    AliasValidationError,
    AliasWriteError,
    validate_alias_name,
    validate_user_email,
    validate_user_name,
)
from gwc.models import AliasSet, ChoiceItem, SessionOutcome, SessionState, SessionStep
from gwc.runners import CommandDispatchError, CommandRunner

logger = logging.getLogger(__name__)

# Returns an error message for invalid input, or None to accept it.
Validator = Callable[[str], str | None]


class Prompter(Protocol):
    """Host UI operations a session needs."""

    async def prompt_text(
        self,
        prompt: str,
        default: str | None = None,
        validate: Validator | None = None,
    ) -> str | None:
        """Ask for a line of text. Returns None when the user cancels."""
        ...

    async def prompt_choice(self, items: list[ChoiceItem]) -> ChoiceItem | None:
        """Ask the user to pick one item. Returns None when the user cancels."""
        ...

    def notify_info(self, text: str) -> None: ...

    def notify_error(self, text: str) -> None: ...


class WorkCommitSession:
    """Drives alias selection or creation, then commits under that alias.

    Args:
        store: Where aliases are read from and written to.
        runner: Receives the final shell command.
        prompter: The host UI.
        default_message: Pre-fills the commit message prompt.
    """

    def __init__(
        self,
        store: AliasStore,
        runner: CommandRunner,
        prompter: Prompter,
        default_message: str = DEFAULT_COMMIT_MESSAGE,
    ) -> None:
        self._store = store
        self._runner = runner
        self._prompter = prompter
        self._default_message = default_message
        self._aliases: AliasSet = {}
        self._aborted = False
        self._command: str | None = None
        self._error: str | None = None
        self.state = SessionState()
        self._handlers: dict[SessionStep, Callable[[], Awaitable[SessionStep]]] = {
            SessionStep.LOAD_ALIASES: self._step_load_aliases,
            SessionStep.CHOOSE_ALIAS: self._step_choose_alias,
            SessionStep.CREATE_ALIAS: self._step_create_alias,
            SessionStep.PROMPT_MESSAGE: self._step_prompt_message,
            SessionStep.EMIT_COMMAND: self._step_emit_command,
        }

    @property
    def aborted(self) -> bool:
        return self._aborted

    def abort(self) -> None:
        """Stop at the next transition; the outcome will be CANCELLED."""
        self._aborted = True

    async def run(self) -> SessionOutcome:
        """Run the session to a terminal step and report how it ended."""
        while not self.state.step.is_terminal:
            next_step = await self._handlers[self.state.step]()
            if self._aborted and not next_step.is_terminal:
                next_step = SessionStep.CANCELLED
            logger.debug("Session %s -> %s", self.state.step.name, next_step.name)
            self.state.step = next_step

        if self.state.step is SessionStep.CANCELLED:
            self._prompter.notify_info("Work commit cancelled")
        elif self.state.step is SessionStep.FAILED and self._error is not None:
            self._prompter.notify_error(self._error)

        return SessionOutcome(
            step=self.state.step,
            selected_alias=self.state.selected_alias,
            commit_message=self.state.commit_message,
            command=self._command,
            error=self._error,
        )

    async def _step_load_aliases(self) -> SessionStep:
        self._aliases = self._store.load_aliases()
        return SessionStep.CHOOSE_ALIAS

    async def _step_choose_alias(self) -> SessionStep:
        items = [
            ChoiceItem(label=name, description=definition)
            for name, definition in self._aliases.items()
        ]
        items.append(
            ChoiceItem(label=CREATE_ALIAS_LABEL, description=CREATE_ALIAS_DESCRIPTION, creates_alias=True)
        )
        choice = await self._prompter.prompt_choice(items)
        if choice is None:
            return SessionStep.CANCELLED
        if choice.creates_alias:
            return SessionStep.CREATE_ALIAS
        self.state.selected_alias = choice.label
        return SessionStep.PROMPT_MESSAGE

    async def _step_create_alias(self) -> SessionStep:
        name = await self._prompter.prompt_text("Alias name", validate=self._validate_new_alias_name)
        if name is None:
            return SessionStep.CANCELLED
        user_name = await self._prompter.prompt_text("User name", validate=validate_user_name)
        if user_name is None:
            return SessionStep.CANCELLED
        user_email = await self._prompter.prompt_text("User email", validate=validate_user_email)
        if user_email is None or self._aborted:
            return SessionStep.CANCELLED

        try:
            entry = self._store.create_alias(name, user_name, user_email)
        except (AliasValidationError, AliasWriteError) as exc:
            self._error = str(exc)
            return SessionStep.FAILED

        self._prompter.notify_info(f"Created alias {entry.name}")
        self.state.selected_alias = entry.name
        return SessionStep.PROMPT_MESSAGE

    def _validate_new_alias_name(self, name: str) -> str | None:
        error = validate_alias_name(name)
        if error is None and name in self._aliases:
            error = f"Alias '{name}' already exists"
        return error

    async def _step_prompt_message(self) -> SessionStep:
        message = await self._prompter.prompt_text("Commit message", default=self._default_message)
        if not message:
            return SessionStep.CANCELLED
        self.state.commit_message = message
        return SessionStep.EMIT_COMMAND

    async def _step_emit_command(self) -> SessionStep:
        command = build_commit_command(self.state.commit_message or "", self.state.selected_alias)
        self._command = command
        try:
            self._runner.run(command)
        except CommandDispatchError as exc:
            self._error = f"Work commit failed: {exc}"
            return SessionStep.FAILED
        self._prompter.notify_info(f"Work commit created: {command}")
        return SessionStep.DONE
