"""Core module - data models, types, configuration, and exceptions."""

from .models import (
    ValuationRecord,
    OverlapBand,
)
from .types import (
    QuestionKind,
)
from .config import (
    DisplayConfig,
    ExplorerConfig,
    get_config,
    reload_config,
)
from .exceptions import (
    ValuationExplorerError,
    RecordLoadError,
    ConfigurationError,
)

__all__ = [
    # Models
    "ValuationRecord",
    "OverlapBand",
    # Types
    "QuestionKind",
    # Config
    "DisplayConfig",
    "ExplorerConfig",
    "get_config",
    "reload_config",
    # Exceptions
    "ValuationExplorerError",
    "RecordLoadError",
    "ConfigurationError",
]
