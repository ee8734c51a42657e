"""Work-commit mode: which session, if any, is currently active."""

import logging
from collections.abc import Callable

from gwc.domain.indicator import render_indicator
from gwc.git.aliases import AliasStore
from gwc.models import Indicator, SessionOutcome
from gwc.runners import CommandRunner
from gwc.session import Prompter, WorkCommitSession

logger = logging.getLogger(__name__)


class ModeController:
    """Owns the active session handle and the mode indicator.

    The mode is on exactly while ``active_session`` is set.  Whatever way a
    session ends, the handle is cleared and ``on_change`` is called so the
    host can redraw the indicator with a freshly read alias count.
    """

    def __init__(
        self,
        store: AliasStore,
        runner: CommandRunner,
        default_message: str,
        on_change: Callable[[Indicator], None] | None = None,
    ) -> None:
        self._store = store
        self._runner = runner
        self._default_message = default_message
        self._on_change = on_change
        self.active_session: WorkCommitSession | None = None

    @property
    def is_active(self) -> bool:
        return self.active_session is not None

    def indicator(self) -> Indicator:
        """Render the indicator, re-reading the alias count when off."""
        if self.is_active:
            return render_indicator(True, 0)
        return render_indicator(False, len(self._store.load_aliases()))

    def start(self, prompter: Prompter) -> WorkCommitSession:
        """Turn the mode on with a new session. The caller runs it via ``run_session``."""
        if self.active_session is not None:
            raise RuntimeError("A work commit session is already active")
        self.active_session = WorkCommitSession(
            self._store, self._runner, prompter, self._default_message
        )
        self._notify()
        return self.active_session

    def stop(self) -> None:
        """Ask the active session to abort. No-op when the mode is off."""
        if self.active_session is not None:
            logger.info("Aborting active work commit session")
            self.active_session.abort()

    def toggle(self, prompter: Prompter) -> WorkCommitSession | None:
        """Start a session when off; abort the active one when on.

        Returns the new session, or None when the toggle was an abort.
        """
        if self.is_active:
            self.stop()
            return None
        return self.start(prompter)

    async def run_session(self, session: WorkCommitSession) -> SessionOutcome:
        """Run ``session`` to completion, then turn the mode off."""
        try:
            outcome = await session.run()
        finally:
            if self.active_session is session:
                self.active_session = None
            self._notify()
        logger.info("Work commit session ended: %s", outcome.step.name)
        return outcome

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.indicator())
