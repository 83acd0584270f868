"""Type definitions and enums for the valuation explorer."""

from enum import Enum


class QuestionKind(str, Enum):
    """The closed set of questions the answer composer can respond to."""

    OVERLAP = "overlap"     # Price band every investor's range accepts
    HIGHEST = "highest"     # Investor with the highest base value
    LOWEST = "lowest"       # Investor with the lowest base value
    WINNER = "winner"       # Heuristic most likely winner

    @property
    def display_name(self) -> str:
        """Human-readable prompt shown by presentation surfaces."""
        names = {
            self.OVERLAP: "Where do the ranges overlap?",
            self.HIGHEST: "Who values it highest?",
            self.LOWEST: "Who values it lowest?",
            self.WINNER: "Who is most likely to win?",
        }
        return names.get(self, self.value)


# Type aliases for common patterns
Money = float       # Monetary units, already in display scale (e.g. millions)
Percentage = float  # 0-100 scale, as stated by the investor
Years = float
