"""Text prompt screen — modal input box with inline validation."""

from collections.abc import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label

_HINT = "Enter to submit · Escape to cancel"


class TextPromptScreen(ModalScreen[str | None]):
    """Modal that asks for a single line of text.

    Dismisses with the stripped value on submit, or None on cancel.  When a
    ``validate`` callable is given, a value it rejects is reported inline
    and the prompt stays open so the user can correct it.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(
        self,
        prompt: str,
        default: str | None = None,
        validate: Callable[[str], str | None] | None = None,
    ) -> None:
        super().__init__()
        self._prompt = prompt
        self._default = default or ""
        self._validate = validate

    def compose(self) -> ComposeResult:
        with Vertical(id="prompt-container"):
            yield Label(self._prompt, id="prompt-title")
            yield Input(value=self._default, placeholder=self._prompt, id="prompt-value")
            yield Label("", id="prompt-error")
            yield Label(_HINT, id="prompt-hint")

    def on_mount(self) -> None:
        input_widget = self.query_one("#prompt-value", Input)
        input_widget.focus()
        input_widget.cursor_position = len(self._default)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        if self._validate is not None:
            error = self._validate(value)
            if error is not None:
                self.query_one("#prompt-error", Label).update(Text(error, style="red"))
                return
        self.dismiss(value)

    def action_cancel(self) -> None:
        self.dismiss(None)
