"""Heuristic selection of the most likely winning investor.

This is a stated heuristic, not a prediction:
1. No overlap band -> no winner can be inferred.
2. Candidates are the records whose base value sits inside the band
   (inclusive); if none do, every record is a candidate.
3. Candidates are ranked by discount rate, lowest first. A lower discount
   rate is read as a lower cost of capital, i.e. a more competitive bidder.
   A record without a stated discount rate ranks after every record that
   has one.
4. The first-ranked candidate wins. Ties keep their source order.
"""

import logging
from functools import cmp_to_key
from typing import Sequence

from ..core.models import OverlapBand, ValuationRecord

logger = logging.getLogger(__name__)


def compare_discount_rates(a: ValuationRecord, b: ValuationRecord) -> int:
    """
    Order two records by discount rate, treating absence as worst.

    Returns:
        Negative if a ranks first, positive if b ranks first, 0 if tied
        (both absent, or equal rates)
    """
    if a.discount_rate is None and b.discount_rate is None:
        return 0
    if a.discount_rate is None:
        return 1
    if b.discount_rate is None:
        return -1
    if a.discount_rate < b.discount_rate:
        return -1
    if a.discount_rate > b.discount_rate:
        return 1
    return 0


def rank_candidates(
    records: Sequence[ValuationRecord],
    band: OverlapBand,
) -> list[ValuationRecord]:
    """
    Build the ranked candidate pool for a band.

    Args:
        records: The full record set
        band: The overlap band of that record set

    Returns:
        New list of candidates, best first; the input is never reordered
    """
    in_band = [record for record in records if band.contains(record.base)]
    if in_band:
        pool = in_band
    else:
        logger.debug("No base value inside the overlap band, ranking all records")
        pool = list(records)

    # sorted() is stable, so equal discount rates keep source order
    return sorted(pool, key=cmp_to_key(compare_discount_rates))


def select_winner(
    records: Sequence[ValuationRecord],
    band: OverlapBand | None,
) -> ValuationRecord | None:
    """
    Select the heuristic most likely winner.

    Args:
        records: The full record set
        band: Result of compute_overlap on the same records

    Returns:
        The winning record, or None when there is no overlap band
    """
    if band is None:
        return None

    ranked = rank_candidates(records, band)
    if not ranked:
        return None

    winner = ranked[0]
    logger.debug(
        f"Heuristic winner: {winner.investor} "
        f"(discount_rate={winner.discount_rate}, base={winner.base})"
    )
    return winner
