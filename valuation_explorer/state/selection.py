"""Selected-investor state owned by the presentation layer.

The presentation layer creates one SelectionState per loaded record set
and passes it by reference to whatever needs to read it (the answer
composer, the detail view). Selection is the only mutable state in the
explorer.
"""

import logging
from typing import Callable, Sequence

from ..core.models import ValuationRecord

logger = logging.getLogger(__name__)

SelectionListener = Callable[[ValuationRecord | None], None]


class SelectionState:
    """
    Holds at most one selected record of a record set.

    Usage:
        selection = SelectionState(records)
        selection.select(records[2])
        selection.current()  # -> records[2]
    """

    def __init__(self, records: Sequence[ValuationRecord]):
        """Bind the state to the record set it selects from."""
        self._records = tuple(records)
        self._selected: ValuationRecord | None = None
        self._listeners: list[SelectionListener] = []

    def current(self) -> ValuationRecord | None:
        """Return the selected record, or None."""
        return self._selected

    def select(self, record: ValuationRecord | None) -> bool:
        """
        Select a record (None clears the selection).

        Re-selecting the current record is a no-op.

        Returns:
            True if the selection changed
        """
        if record is not None and not any(r is record for r in self._records):
            raise ValueError(f"{record.investor!r} is not part of this record set")

        if record is self._selected:
            return False

        self._selected = record
        logger.debug(
            f"Selection changed: {record.investor if record else 'none'}"
        )
        for listener in list(self._listeners):
            listener(record)
        return True

    def select_index(self, index: int) -> bool:
        """Select by position in the record set (display order)."""
        if not 0 <= index < len(self._records):
            raise IndexError(f"record index {index} out of range")
        return self.select(self._records[index])

    def select_investor(self, investor: str) -> bool:
        """Select by investor name (case-insensitive)."""
        wanted = investor.strip().lower()
        for record in self._records:
            if record.investor.lower() == wanted:
                return self.select(record)
        raise KeyError(investor)

    def clear(self) -> bool:
        """Clear the selection."""
        return self.select(None)

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Register a callback fired on every actual selection change.

        Returns:
            A function that unsubscribes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def selected_index(self) -> int | None:
        """Position of the selected record, or None."""
        for i, record in enumerate(self._records):
            if record is self._selected:
                return i
        return None
