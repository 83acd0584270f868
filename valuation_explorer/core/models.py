"""Pydantic data models for the valuation explorer.

All data structures are immutable (frozen) after creation: a record set is
built once per load and never mutated for the rest of the session.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from .types import Money, Percentage, Years


class ValuationRecord(BaseModel):
    """One investor's valuation view of the asset."""

    investor: str
    low: Money = Field(allow_inf_nan=False)
    base: Money = Field(allow_inf_nan=False)
    high: Money = Field(allow_inf_nan=False)
    discount_rate: Percentage | None = Field(default=None, allow_inf_nan=False)
    exit_yield: Percentage | None = Field(default=None, allow_inf_nan=False)
    hold_years: Years | None = Field(default=None, allow_inf_nan=False)
    profile: str | None = None  # Mandate lens, used as the winner rationale
    why: str | None = None      # Key driver behind the valuation

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("investor")
    @classmethod
    def _investor_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("investor must be a non-empty name")
        return value

    @field_validator("discount_rate", "exit_yield", "hold_years", mode="before")
    @classmethod
    def _blank_number_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("profile", "why", mode="before")
    @classmethod
    def _blank_text_is_absent(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @model_validator(mode="after")
    def _check_range_order(self) -> "ValuationRecord":
        if not self.low <= self.base <= self.high:
            raise ValueError(
                f"expected low <= base <= high, got "
                f"low={self.low}, base={self.base}, high={self.high}"
            )
        return self

    @property
    def rationale(self) -> str | None:
        """Driver explanation for this valuation (alias of ``why``)."""
        return self.why


class OverlapBand(BaseModel):
    """Intersection of every investor's [low, high] range.

    Only non-degenerate bands exist: ``lo < hi`` is enforced. "No overlap"
    is represented by ``None`` wherever a band is expected.
    """

    lo: Money
    hi: Money

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_width(self) -> "OverlapBand":
        if not self.lo < self.hi:
            raise ValueError(f"overlap band needs lo < hi, got [{self.lo}, {self.hi}]")
        return self

    def contains(self, value: Money) -> bool:
        """Inclusive membership test."""
        return self.lo <= value <= self.hi
