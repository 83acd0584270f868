"""Record source: loads the investor valuation set once per session.

Accepts a local JSON/YAML file or an http(s) URL serving JSON. Loading is
all-or-nothing: any problem with the source or with a single record fails
the whole set with RecordLoadError.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from ..core.exceptions import RecordLoadError
from ..core.models import ValuationRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("investor", "low", "base", "high")
OPTIONAL_FIELDS = ("discount_rate", "exit_yield", "hold_years", "profile", "why")


def is_remote(source: str | Path) -> bool:
    """Check if a source is an http(s) URL."""
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _fetch_remote(url: str, timeout: float) -> Any:
    """Fetch and decode a JSON document over HTTP."""
    start_time = time.time()
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise RecordLoadError(
            url, f"HTTP {e.response.status_code} while loading records"
        ) from e
    except httpx.RequestError as e:
        raise RecordLoadError(url, f"Request failed: {e}") from e

    duration_ms = int((time.time() - start_time) * 1000)
    logger.debug(f"Fetched {url} in {duration_ms}ms")

    try:
        return response.json()
    except ValueError as e:
        raise RecordLoadError(url, f"Invalid JSON: {e}") from e


def _read_file(path: Path) -> Any:
    """Load a YAML or JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError as e:
        raise RecordLoadError(str(path), "File not found") from e
    except OSError as e:
        raise RecordLoadError(str(path), f"Could not read file: {e}") from e
    except yaml.YAMLError as e:
        raise RecordLoadError(str(path), f"Invalid YAML: {e}") from e
    except UnicodeDecodeError as e:
        raise RecordLoadError(str(path), f"Invalid encoding: {e}") from e
    except json.JSONDecodeError as e:
        raise RecordLoadError(str(path), f"Invalid JSON: {e}") from e


def parse_records(document: Any, source: str = "<memory>") -> list[ValuationRecord]:
    """
    Validate a decoded document into an ordered record set.

    Args:
        document: A list of record objects, or a mapping holding such a
            list under "valuations"
        source: Source name used in error messages

    Returns:
        Records in source order

    Raises:
        RecordLoadError: On any structural or per-record problem
    """
    if isinstance(document, dict) and "valuations" in document:
        document = document["valuations"]

    if not isinstance(document, list):
        raise RecordLoadError(
            source, f"Expected a list of records, got {type(document).__name__}"
        )
    if not document:
        raise RecordLoadError(source, "Record set is empty")

    records: list[ValuationRecord] = []
    seen: dict[str, int] = {}

    for index, raw in enumerate(document):
        if not isinstance(raw, dict):
            raise RecordLoadError(
                source, f"Expected an object, got {type(raw).__name__}", record_index=index
            )

        missing = [name for name in REQUIRED_FIELDS if raw.get(name) is None]
        if missing:
            raise RecordLoadError(
                source, "Missing required field", record_index=index, field=missing[0]
            )

        try:
            record = ValuationRecord.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise RecordLoadError(
                source, first["msg"], record_index=index, field=field
            ) from e

        key = record.investor.lower()
        if key in seen:
            raise RecordLoadError(
                source,
                f"Duplicate investor {record.investor!r} (first seen at record {seen[key]})",
                record_index=index,
                field="investor",
            )
        seen[key] = index
        records.append(record)

    return records


def load_records(source: str | Path, timeout: float = 10.0) -> list[ValuationRecord]:
    """
    Load the record set from a file path or URL.

    Args:
        source: Path to a .json/.yaml/.yml file, or an http(s) URL
        timeout: HTTP timeout in seconds (URL sources only)

    Returns:
        Non-empty list of records in source order

    Raises:
        RecordLoadError: If the source is unreachable or malformed
    """
    if is_remote(source):
        name = str(source)
        document = _fetch_remote(name, timeout)
    else:
        path = Path(source)
        name = str(path)
        document = _read_file(path)

    records = parse_records(document, source=name)
    logger.info(f"Loaded {len(records)} valuation records from {name}")
    return records
