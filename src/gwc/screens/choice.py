"""Choice picker modal — select an existing alias or create a new one."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import ListItem, ListView, Static

from gwc.models import ChoiceItem


class ChoicePickerScreen(ModalScreen[ChoiceItem | None]):
    """Modal that lets the user pick one of a list of items.

    Each item renders as its label with the optional description dimmed
    beside it.  Dismisses with the chosen ``ChoiceItem`` on Enter or
    ``None`` on Escape/q.
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
        Binding("q", "cancel", show=False),
        Binding("j", "cursor_down", show=False),
        Binding("k", "cursor_up", show=False),
    ]

    DEFAULT_CSS = """
    ChoicePickerScreen {
        align: center middle;
    }
    """

    def __init__(self, items: list[ChoiceItem], title: str = "Select an alias") -> None:
        super().__init__()
        self._items = items
        self._title = title

    def compose(self) -> ComposeResult:
        rows: list[ListItem] = []
        for item in self._items:
            label = Text(f"  {item.label}")
            if item.description:
                label.append(f"  {item.description}", style="dim")
            classes = "choice-item choice-create" if item.creates_alias else "choice-item"
            rows.append(ListItem(Static(label), classes=classes))

        with Vertical(id="choice-container"):
            yield Static(f"  {self._title}", id="choice-title")
            yield ListView(*rows, id="choice-list")
            yield Static("  Enter to select · Esc/q to cancel", id="choice-hint")

    def on_mount(self) -> None:
        self.query_one("#choice-list", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        index = event.list_view.index
        if index is None or not 0 <= index < len(self._items):
            return
        self.dismiss(self._items[index])

    def action_cursor_down(self) -> None:
        self.query_one("#choice-list", ListView).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#choice-list", ListView).action_cursor_up()

    def action_cancel(self) -> None:
        self.dismiss(None)
