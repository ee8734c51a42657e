"""Mode indicator rendering."""

from gwc.constants import INDICATOR_OFF_TEXT, INDICATOR_ON_TEXT
from gwc.models import Indicator, IndicatorStyle


def render_indicator(is_active: bool, alias_count: int) -> Indicator:
    """Return the indicator for the current mode.

    The alias count is only shown while the mode is off.
    """
    if is_active:
        return Indicator(text=INDICATOR_ON_TEXT, style=IndicatorStyle.WARNING)
    return Indicator(text=INDICATOR_OFF_TEXT.format(count=alias_count), style=IndicatorStyle.DEFAULT)
