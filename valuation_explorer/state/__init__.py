"""Selection state module."""

from .selection import SelectionState

__all__ = ["SelectionState"]
