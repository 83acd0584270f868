"""
Valuation Explorer session

One session per loaded record set. Workflow:
1. Load the record set once (file or URL); failure is terminal
2. Derive the overlap band and heuristic winner
3. Answer questions and render the selected investor's detail

Usage:
    from valuation_explorer.explorer import ValuationExplorer

    explorer = ValuationExplorer.load("data/valuations.json")
    print(explorer.ask("overlap"))

    explorer.selection.select_investor("Harbour Pension Fund")
    print(explorer.detail())
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from .answers.composer import AnswerComposer, FallbackTexts
from .calculator.overlap import compute_overlap
from .calculator.winner import select_winner
from .core.config import ExplorerConfig, get_config
from .core.models import OverlapBand, ValuationRecord
from .core.types import QuestionKind
from .output.formatters import JSONFormatter, format_detail, format_overlap_label
from .state.selection import SelectionState
from .storage.record_source import load_records

logger = logging.getLogger(__name__)


class ValuationExplorer:
    """Read-only analysis of one record set plus the user's selection."""

    def __init__(
        self,
        records: Sequence[ValuationRecord],
        config: Optional[ExplorerConfig] = None,
        fallbacks: Optional[FallbackTexts] = None,
    ):
        """Initialize the session from an already-loaded record set."""
        if not records:
            raise ValueError("records must not be empty")

        self.config = config or get_config()
        self.records: tuple[ValuationRecord, ...] = tuple(records)
        self.band: OverlapBand | None = compute_overlap(self.records)
        self.winner: ValuationRecord | None = select_winner(self.records, self.band)
        self.selection = SelectionState(self.records)
        self.composer = AnswerComposer(display=self.config.display, fallbacks=fallbacks)

        logger.info(
            f"Session ready: {len(self.records)} investors, "
            f"{format_overlap_label(self.records, self.config.display)}, "
            f"winner={self.winner.investor if self.winner else 'unclear'}"
        )

    @classmethod
    def load(
        cls,
        source: str | Path | None = None,
        config: Optional[ExplorerConfig] = None,
    ) -> "ValuationExplorer":
        """
        Load a record set and start a session.

        Args:
            source: File path or URL; defaults to the configured source
            config: Configuration; defaults to the global configuration

        Raises:
            RecordLoadError: If the source is unreachable or malformed
        """
        config = config or get_config()
        records = load_records(source or config.source, timeout=config.http_timeout)
        return cls(records, config=config)

    def ask(self, kind: QuestionKind | str) -> str:
        """Answer one of the fixed questions ("" for anything else)."""
        return self.composer.compose(kind, self.records, self.selection)

    def detail(self) -> str:
        """Detail text for the currently selected investor."""
        return format_detail(self.selection.current(), self.config.display)

    def overlap_label(self) -> str:
        """Short overlap label for headers."""
        return format_overlap_label(self.records, self.config.display)

    def summary(self) -> dict[str, Any]:
        """Summary payload for JSON output."""
        data = JSONFormatter(display=self.config.display).to_dict(self.records)
        selected = self.selection.current()
        data["selected"] = selected.investor if selected else None
        return data
