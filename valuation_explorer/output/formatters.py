"""Output formatters for valuation records.

Provides:
- Detail: text block for the selected investor
- JSON: machine-readable summary of the record set and its analysis
- Table: human-readable CLI table of every investor's range
"""

import json
import logging
from typing import Any, Sequence

from ..calculator.overlap import compute_overlap
from ..calculator.winner import select_winner
from ..core.config import DisplayConfig
from ..core.models import ValuationRecord
from .money import format_money, format_number, format_range

logger = logging.getLogger(__name__)

EMPTY_DETAIL_TEXT = "Select an investor to see the profile and reasoning."


def format_detail(
    record: ValuationRecord | None,
    display: DisplayConfig | None = None,
) -> str:
    """
    Format the detail view for one investor.

    Args:
        record: The selected record, or None when nothing is selected
        display: Currency/scale decoration

    Returns:
        Multi-line detail text
    """
    if record is None:
        return EMPTY_DETAIL_TEXT

    lines = [record.investor]
    lines.append(
        f"Base: {format_money(record.base, display)} · "
        f"Range: {format_range(record.low, record.high, display)}"
    )

    extra = []
    if record.discount_rate is not None:
        extra.append(f"Discount: {format_number(record.discount_rate)}%")
    if record.exit_yield is not None:
        extra.append(f"Exit yield: {format_number(record.exit_yield)}%")
    if record.hold_years is not None:
        extra.append(f"Hold: {format_number(record.hold_years)}y")
    if extra:
        lines.append(" · ".join(extra))

    if record.profile:
        lines.append(f"\nMandate lens: {record.profile}")
    if record.why:
        lines.append(f"\nKey driver: {record.why}")

    return "\n".join(lines)


def format_overlap_label(
    records: Sequence[ValuationRecord],
    display: DisplayConfig | None = None,
) -> str:
    """Short overlap label, e.g. "Overlap band: £14.00m–£15.00m"."""
    band = compute_overlap(records)
    if band is None:
        return "Overlap band: none"
    return f"Overlap band: {format_range(band.lo, band.hi, display)}"


class JSONFormatter:
    """Formats the record set and its derived analysis as JSON."""

    def __init__(self, indent: int = 2, display: DisplayConfig | None = None):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level
            display: Currency/scale decoration for the "display" strings
        """
        self.indent = indent
        self.display = display or DisplayConfig()

    def to_dict(self, records: Sequence[ValuationRecord]) -> dict[str, Any]:
        """Build the summary payload."""
        band = compute_overlap(records)
        winner = select_winner(records, band)
        return {
            "records": [record.model_dump() for record in records],
            "overlap_band": (
                {
                    "lo": band.lo,
                    "hi": band.hi,
                    "display": format_range(band.lo, band.hi, self.display),
                }
                if band
                else None
            ),
            "winner": winner.investor if winner else None,
            "currency_symbol": self.display.currency_symbol,
            "scale_suffix": self.display.scale_suffix,
        }

    def format(self, records: Sequence[ValuationRecord]) -> str:
        """Format the summary as a JSON string."""
        return json.dumps(self.to_dict(records), indent=self.indent, ensure_ascii=False)


class TableFormatter:
    """Formats the record set as a human-readable table for CLI output."""

    def __init__(
        self,
        use_rich: bool = True,
        width: int = 100,
        display: DisplayConfig | None = None,
    ):
        """
        Initialize table formatter.

        Args:
            use_rich: Use rich for colored output
            width: Maximum table width
            display: Currency/scale decoration
        """
        self.use_rich = use_rich
        self.width = width
        self.display = display or DisplayConfig()

    def format(
        self,
        records: Sequence[ValuationRecord],
        selected: ValuationRecord | None = None,
    ) -> str:
        """Format records as a table, marking band members and the selection."""
        if self.use_rich:
            return self._format_rich(records, selected)
        return self._format_plain(records, selected)

    def _money(self, value: float) -> str:
        return format_money(value, self.display)

    def _optional_pct(self, value: float | None) -> str:
        return f"{format_number(value)}%" if value is not None else "-"

    def _format_plain(
        self,
        records: Sequence[ValuationRecord],
        selected: ValuationRecord | None,
    ) -> str:
        """Plain text formatting without rich."""
        band = compute_overlap(records)
        winner = select_winner(records, band)

        lines = []
        sep = "=" * 78
        lines.append(sep)
        lines.append(f"  INVESTOR VALUATIONS ({len(records)})")
        lines.append(f"  {format_overlap_label(records, self.display)}")
        lines.append(sep)
        lines.append(
            f"  {'Investor':<24} {'Low':>9} {'Base':>9} {'High':>9} {'Disc.':>6} {'Exit':>6}"
        )
        lines.append("  " + "-" * 70)

        for record in records:
            marker = ">" if record is selected else " "
            flag = " *" if winner is not None and record is winner else ""
            lines.append(
                f"{marker} {record.investor:<24} "
                f"{self._money(record.low):>9} {self._money(record.base):>9} "
                f"{self._money(record.high):>9} "
                f"{self._optional_pct(record.discount_rate):>6} "
                f"{self._optional_pct(record.exit_yield):>6}{flag}"
            )

        lines.append(sep)
        if winner is not None:
            lines.append("  * most likely winner (heuristic)")
        return "\n".join(lines)

    def _format_rich(
        self,
        records: Sequence[ValuationRecord],
        selected: ValuationRecord | None,
    ) -> str:
        """Rich library formatting with colors."""
        from io import StringIO

        from rich.console import Console
        from rich.table import Table

        band = compute_overlap(records)
        winner = select_winner(records, band)

        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self.width)

        table = Table(title=format_overlap_label(records, self.display))
        table.add_column("Investor", style="cyan")
        table.add_column("Low", justify="right")
        table.add_column("Base", justify="right", style="red")
        table.add_column("High", justify="right")
        table.add_column("Discount", justify="right", style="dim")
        table.add_column("Exit yield", justify="right", style="dim")
        table.add_column("Hold", justify="right", style="dim")

        for record in records:
            name = record.investor
            if winner is not None and record is winner:
                name = f"[bold green]{name}[/] (winner?)"
            if record is selected:
                name = f"> {name}"
            base = self._money(record.base)
            if band is not None and band.contains(record.base):
                base = f"[bold]{base}[/]"
            table.add_row(
                name,
                self._money(record.low),
                base,
                self._money(record.high),
                self._optional_pct(record.discount_rate),
                self._optional_pct(record.exit_yield),
                f"{format_number(record.hold_years)}y" if record.hold_years is not None else "-",
            )

        console.print(table)
        return output.getvalue()
