"""Work-commit mode indicator bar."""

from textual.events import Click
from textual.message import Message
from textual.widgets import Static

from gwc.models import Indicator, IndicatorStyle


class ModeBar(Static):
    """A one-line status bar showing the current mode indicator.

    Renders ``Start Work Commit (N aliases)`` while the mode is off and
    ``Stop Work Commit`` with the ``warning`` class while it is on.
    Clicking the bar posts ``ModeBar.Clicked`` for the app to toggle.
    """

    class Clicked(Message):
        """Posted when the user clicks the indicator."""

    can_focus = False

    indicator: Indicator | None = None

    def show_indicator(self, indicator: Indicator) -> None:
        self.indicator = indicator
        self.update(indicator.text)
        self.set_class(indicator.style is IndicatorStyle.WARNING, "warning")

    def on_click(self, event: Click) -> None:
        self.post_message(ModeBar.Clicked())
