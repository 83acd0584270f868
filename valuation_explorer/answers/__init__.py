"""Answer composition module."""

from .composer import (
    AnswerComposer,
    FallbackTexts,
    HIGHEST_FALLBACK,
    LOWEST_FALLBACK,
    WINNER_FALLBACK,
    compose,
)

__all__ = [
    "AnswerComposer",
    "FallbackTexts",
    "HIGHEST_FALLBACK",
    "LOWEST_FALLBACK",
    "WINNER_FALLBACK",
    "compose",
]
