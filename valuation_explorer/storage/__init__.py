"""Storage module for loading valuation records."""

from .record_source import load_records, parse_records

__all__ = ["load_records", "parse_records"]
