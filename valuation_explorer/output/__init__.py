"""Output formatting module."""

from .money import format_money, format_range
from .formatters import (
    JSONFormatter,
    TableFormatter,
    format_detail,
    format_overlap_label,
)

__all__ = [
    "format_money",
    "format_range",
    "JSONFormatter",
    "TableFormatter",
    "format_detail",
    "format_overlap_label",
]
