"""Investor Valuation Explorer.

Derives the overlap band of a set of investor valuation ranges, picks a
heuristic most likely winner, and answers a fixed set of questions about
them in plain language.
"""

__version__ = "0.1.0"
