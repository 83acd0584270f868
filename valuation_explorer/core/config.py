"""Configuration management for display and record-source settings.

Loads configuration from environment variables or .env file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_SOURCE = "data/valuations.json"


@dataclass(frozen=True)
class DisplayConfig:
    """Monetary display decoration shared by every textual output."""

    currency_symbol: str = "£"
    scale_suffix: str = "m"  # Values are already in millions


@dataclass
class ExplorerConfig:
    """Configuration for the record source and presentation."""

    # Path (.json/.yaml/.yml) or http(s) URL of the valuation records
    source: str = DEFAULT_SOURCE

    # Timeout for the one-time HTTP load, in seconds
    http_timeout: float = 10.0

    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def from_env(cls) -> "ExplorerConfig":
        """Load configuration from environment variables."""
        timeout_raw = os.getenv("VALUATION_HTTP_TIMEOUT", "10")
        try:
            http_timeout = float(timeout_raw)
        except ValueError:
            raise ConfigurationError(
                "VALUATION_HTTP_TIMEOUT", f"expected seconds, got {timeout_raw!r}"
            )
        if http_timeout <= 0:
            raise ConfigurationError(
                "VALUATION_HTTP_TIMEOUT", "timeout must be positive"
            )

        return cls(
            source=os.getenv("VALUATION_SOURCE", DEFAULT_SOURCE),
            http_timeout=http_timeout,
            display=DisplayConfig(
                currency_symbol=os.getenv("VALUATION_CURRENCY_SYMBOL", "£"),
                scale_suffix=os.getenv("VALUATION_SCALE_SUFFIX", "m"),
            ),
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "ExplorerConfig":
        """
        Load configuration from .env file and environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the project root.

        Returns:
            ExplorerConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        return cls.from_env()


# Global config instance (lazy loaded)
_config: Optional[ExplorerConfig] = None


def get_config() -> ExplorerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ExplorerConfig.load()
    return _config


def reload_config(env_file: Optional[Path] = None) -> ExplorerConfig:
    """Reload configuration from environment."""
    global _config
    _config = ExplorerConfig.load(env_file)
    return _config
