"""Overlap and winner calculation module."""

from .overlap import compute_overlap
from .winner import compare_discount_rates, rank_candidates, select_winner

__all__ = [
    "compute_overlap",
    "compare_discount_rates",
    "rank_candidates",
    "select_winner",
]
