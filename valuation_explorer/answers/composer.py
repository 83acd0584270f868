"""Natural-language answers to the fixed question set.

The composer is pure: it derives everything from the records it is given
and returns text. Writing the text somewhere is the caller's job.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..calculator.overlap import compute_overlap
from ..calculator.winner import select_winner
from ..core.config import DisplayConfig
from ..core.models import ValuationRecord
from ..core.types import QuestionKind
from ..output.money import format_money, format_range

if TYPE_CHECKING:
    from ..state.selection import SelectionState

logger = logging.getLogger(__name__)

# Fallback sentences for records without authored profile/why text
HIGHEST_FALLBACK = "Lower cost of capital / greater willingness to pay for durability & scarcity."
LOWEST_FALLBACK = "Higher required returns / more aggressive risk pricing."
WINNER_FALLBACK = "Patient capital / lower cost of capital in the overlap band."

NO_OVERLAP_TEXT = "No full overlap band (ranges don't all intersect)."
UNCLEAR_WINNER_TEXT = (
    "Winner: unclear (no overlap band).\n"
    "Try narrowing the investor set or re-check ranges."
)


@dataclass(frozen=True)
class FallbackTexts:
    """Replaceable fallback sentences (e.g. for localization)."""

    highest: str = HIGHEST_FALLBACK
    lowest: str = LOWEST_FALLBACK
    winner: str = WINNER_FALLBACK


def highest_base(records: Sequence[ValuationRecord]) -> ValuationRecord:
    """First record, in source order, with the maximal base value."""
    return sorted(records, key=lambda r: r.base, reverse=True)[0]


def lowest_base(records: Sequence[ValuationRecord]) -> ValuationRecord:
    """Last record of the stable descending base ordering."""
    return sorted(records, key=lambda r: r.base, reverse=True)[-1]


class AnswerComposer:
    """Formats answers for the overlap / highest / lowest / winner questions."""

    def __init__(
        self,
        display: DisplayConfig | None = None,
        fallbacks: FallbackTexts | None = None,
    ):
        """
        Initialize the composer.

        Args:
            display: Currency/scale decoration for monetary values
            fallbacks: Sentences used when a record has no authored text
        """
        self.display = display or DisplayConfig()
        self.fallbacks = fallbacks or FallbackTexts()

    def compose(
        self,
        kind: QuestionKind | str,
        records: Sequence[ValuationRecord],
        selection: "SelectionState | None" = None,
    ) -> str:
        """
        Compose the answer text for one question.

        Args:
            kind: One of the QuestionKind values (enum or its string value)
            records: The loaded, non-empty record set
            selection: The presentation layer's selection state; the four
                answers are about the whole set and do not depend on it

        Returns:
            Answer text, or "" for a question outside the fixed set
        """
        try:
            question = QuestionKind(kind)
        except ValueError:
            logger.debug(f"Ignoring unknown question kind: {kind!r}")
            return ""

        if question is QuestionKind.OVERLAP:
            return self._overlap(records)
        if question is QuestionKind.HIGHEST:
            record = highest_base(records)
            return (
                f"Highest base value: {record.investor} at {self._money(record.base)}.\n"
                f"Why: {record.why or self.fallbacks.highest}"
            )
        if question is QuestionKind.LOWEST:
            record = lowest_base(records)
            return (
                f"Lowest base value: {record.investor} at {self._money(record.base)}.\n"
                f"Why: {record.why or self.fallbacks.lowest}"
            )
        return self._winner(records)

    def _overlap(self, records: Sequence[ValuationRecord]) -> str:
        band = compute_overlap(records)
        if band is None:
            return f"Overlap band: {NO_OVERLAP_TEXT}"
        return f"Overlap band: {format_range(band.lo, band.hi, self.display)}"

    def _winner(self, records: Sequence[ValuationRecord]) -> str:
        winner = select_winner(records, compute_overlap(records))
        if winner is None:
            return UNCLEAR_WINNER_TEXT
        return (
            f"Most likely winner (heuristic): {winner.investor}.\n"
            f"Rationale: {winner.profile or self.fallbacks.winner}"
        )

    def _money(self, value: float) -> str:
        return format_money(value, self.display)


_default_composer = AnswerComposer()


def compose(
    kind: QuestionKind | str,
    records: Sequence[ValuationRecord],
    selection: "SelectionState | None" = None,
) -> str:
    """Compose an answer with the default display and fallback texts."""
    return _default_composer.compose(kind, records, selection)
