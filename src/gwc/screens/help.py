"""Key reference overlay, aware of whether a work commit is running."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from gwc.constants import HELP_ACTIVE_NOTE, HELP_IDLE_NOTE, HELP_SECTIONS

_KEY_WIDTH = 12


def render_help(session_active: bool) -> Text:
    """Build the help body: a status note followed by the key sections."""
    text = Text()
    if session_active:
        text.append(HELP_ACTIVE_NOTE, style="bold yellow")
    else:
        text.append(HELP_IDLE_NOTE, style="dim")
    for title, keys in HELP_SECTIONS:
        text.append("\n\n")
        text.append(title, style="bold")
        for key, description in keys:
            text.append("\n ")
            text.append(key.ljust(_KEY_WIDTH), style="cyan")
            text.append(description)
    return text


class HelpScreen(ModalScreen):
    """Lists the shortcuts; any key below or a click closes it.

    Closing the overlay never touches the session underneath, so a prompt
    that was open before ``?`` is still waiting afterwards.
    """

    BINDINGS = [
        Binding("escape", "dismiss", show=False),
        Binding("?", "dismiss", show=False),
        Binding("q", "dismiss", show=False),
    ]

    def __init__(self, session_active: bool = False) -> None:
        super().__init__()
        self.session_active = session_active

    def compose(self) -> ComposeResult:
        with Vertical(id="help-container"):
            yield Static(render_help(self.session_active), id="help-text")

    def on_click(self) -> None:
        self.dismiss()
