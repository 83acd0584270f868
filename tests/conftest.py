"""Pytest configuration and fixtures for valuation explorer tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from valuation_explorer.core.config import DisplayConfig, ExplorerConfig
from valuation_explorer.core.models import ValuationRecord


def make_record(
    investor: str,
    low: float,
    base: float,
    high: float,
    **optional: Any,
) -> ValuationRecord:
    """Build a record with only the fields a test cares about."""
    return ValuationRecord(investor=investor, low=low, base=base, high=high, **optional)


@pytest.fixture
def data_file() -> Path:
    """Path to the bundled sample dataset."""
    return Path(__file__).parent.parent / "data" / "valuations.json"


@pytest.fixture
def explorer_config(data_file: Path) -> ExplorerConfig:
    """Configuration pointing at the sample dataset with default decoration."""
    return ExplorerConfig(source=str(data_file), http_timeout=5.0, display=DisplayConfig())


@pytest.fixture
def overlapping_records() -> list[ValuationRecord]:
    """Two investors whose ranges overlap on [14, 15]."""
    return [
        make_record(
            "Harbour Pension Fund",
            low=10.0,
            base=14.5,
            high=15.0,
            discount_rate=4.0,
            profile="Long-dated liability matching.",
        ),
        make_record(
            "Northgate Private Equity",
            low=14.0,
            base=18.0,
            high=20.0,
            discount_rate=2.0,
            why="Aggressive refurbishment thesis.",
        ),
    ]


@pytest.fixture
def disjoint_records() -> list[ValuationRecord]:
    """Two investors whose ranges never meet."""
    return [
        make_record("Meridian REIT", low=10.0, base=11.0, high=12.0, discount_rate=7.0),
        make_record("Kestrel Opportunity Fund", low=14.0, base=16.0, high=20.0),
    ]


@pytest.fixture
def raw_records() -> list[dict[str, Any]]:
    """Source-shaped records, including string numbers and blank optionals."""
    return [
        {
            "investor": "Harbour Pension Fund",
            "low": "13.8",
            "base": 14.6,
            "high": 16,
            "discount_rate": "6.0",
            "exit_yield": 4.75,
            "hold_years": 15,
            "profile": "Liability matching.",
            "why": "",
        },
        {
            "investor": "Kestrel Opportunity Fund",
            "low": 11.9,
            "base": 13.4,
            "high": 14.8,
            "discount_rate": None,
            "notes": "ignored",
        },
    ]


@pytest.fixture
def records_file(tmp_path: Path, raw_records: list[dict[str, Any]]) -> Path:
    """Write the raw records to a JSON file."""
    path = tmp_path / "valuations.json"
    path.write_text(json.dumps(raw_records), encoding="utf-8")
    return path
