"""Monetary display format shared by answers, detail views and tables.

Every textual output goes through these helpers so that a value reads the
same everywhere: two decimals, currency symbol prefix, scale suffix
(e.g. "£12.30m").
"""

from ..core.config import DisplayConfig
from ..core.types import Money

RANGE_SEPARATOR = "–"  # en dash

_DEFAULT_DISPLAY = DisplayConfig()


def format_money(value: Money, display: DisplayConfig | None = None) -> str:
    """Format a monetary value, e.g. 12.3 -> "£12.30m"."""
    display = display or _DEFAULT_DISPLAY
    return f"{display.currency_symbol}{float(value):.2f}{display.scale_suffix}"


def format_range(lo: Money, hi: Money, display: DisplayConfig | None = None) -> str:
    """Format a closed range, e.g. "£14.00m–£15.00m"."""
    return f"{format_money(lo, display)}{RANGE_SEPARATOR}{format_money(hi, display)}"


def format_number(value: float) -> str:
    """Plain number without a trailing ".0" (4.0 -> "4", 4.5 -> "4.5")."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
