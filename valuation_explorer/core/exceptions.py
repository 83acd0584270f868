"""Custom exceptions for the valuation explorer."""


class ValuationExplorerError(Exception):
    """Base exception for all valuation explorer errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RecordLoadError(ValuationExplorerError):
    """Raised when the record source is unreachable or malformed.

    A load failure is terminal for the session: no partial record set is
    ever returned.
    """

    def __init__(
        self,
        source: str,
        message: str,
        record_index: int | None = None,
        field: str | None = None,
    ):
        location = ""
        if record_index is not None:
            location = f" (record {record_index}"
            location += f", field '{field}')" if field else ")"
        full_message = f"[{source}] {message}{location}"
        super().__init__(
            full_message,
            {
                "source": source,
                "record_index": record_index,
                "field": field,
            },
        )
        self.source = source
        self.record_index = record_index
        self.field = field


class ConfigurationError(ValuationExplorerError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
