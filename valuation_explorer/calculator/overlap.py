"""Overlap band calculation across investor valuation ranges.

The band is the intersection of closed intervals, not their union:
- lo = max(low) over all records
- hi = min(high) over all records
- band exists iff lo < hi

A single wide outlier can eliminate the band entirely. That is intended:
the band is the price range every investor's stated range would accept.
"""

import logging
from typing import Sequence

from ..core.models import OverlapBand, ValuationRecord

logger = logging.getLogger(__name__)


def compute_overlap(records: Sequence[ValuationRecord]) -> OverlapBand | None:
    """
    Calculate the overlap band of all valuation ranges.

    Formula: [max(low), min(high)], kept only when max(low) < min(high)

    Args:
        records: Non-empty sequence of valuation records (order is irrelevant)

    Returns:
        OverlapBand, or None when the ranges do not all intersect
        (including zero-width intersections)
    """
    if not records:
        raise ValueError("records must not be empty")

    lo = max(record.low for record in records)
    hi = min(record.high for record in records)

    if lo < hi:
        return OverlapBand(lo=lo, hi=hi)

    logger.debug(f"No overlap band: max(low)={lo} >= min(high)={hi}")
    return None
