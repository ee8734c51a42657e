"""Alias table widget."""

from textual.binding import Binding
from textual.widgets import DataTable

from gwc.constants import TABLE_COLUMNS
from gwc.models import AliasSet


class AliasTable(DataTable):
    """Scrollable table of the aliases in the Git config, with vim-style navigation.

    Rows are keyed by alias name so repopulating after a new alias is
    created keeps the table consistent with the file.
    """

    BINDINGS = [
        Binding("j", "cursor_down", show=False),
        Binding("k", "cursor_up", show=False),
    ]

    def on_mount(self) -> None:
        self.cursor_type = "row"
        self.zebra_stripes = True
        self.add_columns(*TABLE_COLUMNS)

    def load(self, aliases: AliasSet) -> None:
        """Replace table contents with the given aliases."""
        self.clear()
        for i, (name, definition) in enumerate(aliases.items(), start=1):
            self.add_row(str(i), name, definition, key=name)
