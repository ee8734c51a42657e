"""Main application entry point."""

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from gwc.config import ConfigError, Settings, load_settings, load_theme, save_theme
from gwc.constants import APP_SUBTITLE, APP_TITLE
from gwc.git.aliases import AliasStore
from gwc.mode import ModeController
from gwc.models import ChoiceItem, Indicator
from gwc.runners import CommandRunner, ShellRunner
from gwc.screens.choice import ChoicePickerScreen
from gwc.screens.help import HelpScreen
from gwc.screens.prompt import TextPromptScreen
from gwc.session import Validator, WorkCommitSession
from gwc.widgets.alias_table import AliasTable
from gwc.widgets.mode_bar import ModeBar


class WorkCommitApp(App):
    """gwc — create empty work commits under a chosen Git identity.

    The app is the host UI for ``WorkCommitSession``: it implements the
    session's ``Prompter`` protocol with modal screens and toasts, and shows
    the mode indicator in the ``ModeBar``.
    """

    CSS_PATH = "app.tcss"
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "toggle_help", "Help"),
        Binding("w", "toggle_mode", "Work commit"),
        Binding("ctrl+w", "toggle_mode", show=False, priority=True),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(
        self,
        store: AliasStore | None = None,
        runner: CommandRunner | None = None,
        settings: Settings | None = None,
        _use_config: bool = False,
    ) -> None:
        super().__init__()
        self._config_error: str | None = None
        if settings is None:
            settings = Settings()
            if _use_config:
                try:
                    settings = load_settings()
                except ConfigError as exc:
                    self._config_error = str(exc)
        self._settings = settings
        self._store = store or AliasStore(settings.gitconfig_path)
        self._runner = runner or ShellRunner(settings.repository)
        self.controller = ModeController(
            self._store,
            self._runner,
            settings.default_commit_message,
            on_change=self._show_indicator,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        yield ModeBar(id="mode-bar")
        yield AliasTable(id="alias-table")
        yield Footer()

    def on_mount(self) -> None:
        saved_theme = load_theme()
        if saved_theme:
            self.theme = saved_theme
        if self._config_error is not None:
            self.notify(self._config_error, severity="error", timeout=8)
        self._reload()
        self._get_table().focus()

    def watch_theme(self, theme: str) -> None:
        """Persist theme changes whenever the theme is changed."""
        save_theme(theme)

    def _get_table(self) -> AliasTable:
        return self.query_one("#alias-table", AliasTable)

    def _show_indicator(self, indicator: Indicator) -> None:
        self.query_one("#mode-bar", ModeBar).show_indicator(indicator)

    def _reload(self) -> None:
        """Re-read the git config into the table and the indicator."""
        self._get_table().load(self._store.load_aliases())
        self._show_indicator(self.controller.indicator())

    def on_mode_bar_clicked(self, event: ModeBar.Clicked) -> None:
        event.stop()
        self.action_toggle_mode()

    def action_toggle_help(self) -> None:
        self.push_screen(HelpScreen(session_active=self.controller.is_active))

    def action_reload(self) -> None:
        self._reload()
        self.notify(f"Reloaded {self._store.path}", timeout=2)

    def action_toggle_mode(self) -> None:
        """Start a work commit session, or abort the one in progress."""
        session = self.controller.toggle(self)
        if session is not None:
            self._run_session(session)
        else:
            # Cancelling the open prompt lets the aborted session finish,
            # even when an overlay such as help sits on top of it.
            self._dismiss_session_prompt()

    def _dismiss_session_prompt(self) -> None:
        prompts = [
            screen
            for screen in self.screen_stack
            if isinstance(screen, (ChoicePickerScreen, TextPromptScreen))
        ]
        if not prompts:
            return
        while self.screen is not prompts[-1]:
            self.pop_screen()
        prompts[-1].dismiss(None)

    @work
    async def _run_session(self, session: WorkCommitSession) -> None:
        await self.controller.run_session(session)
        self._reload()
        self._get_table().focus()

    async def prompt_text(
        self,
        prompt: str,
        default: str | None = None,
        validate: Validator | None = None,
    ) -> str | None:
        return await self.push_screen_wait(TextPromptScreen(prompt, default, validate))

    async def prompt_choice(self, items: list[ChoiceItem]) -> ChoiceItem | None:
        return await self.push_screen_wait(ChoicePickerScreen(items))

    def notify_info(self, text: str) -> None:
        self.notify(text, timeout=4)

    def notify_error(self, text: str) -> None:
        self.notify(text, severity="error", timeout=8)


def main() -> None:
    WorkCommitApp(_use_config=True).run()


if __name__ == "__main__":
    main()
