"""Application configuration for the rule engine."""

import os
from enum import Enum
from typing import Mapping, Optional


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogFormat(Enum):
    """Log renderer selection."""

    JSON = "json"
    KEY_VALUE = "keyvalue"


class Config:
    """Application configuration read from an environment-like mapping."""

    def __init__(self, source: Optional[Mapping[str, str]] = None):
        """Initialize configuration from ``source`` (defaults to ``os.environ``)."""
        self.source = source if source is not None else os.environ
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration values."""
        # Environment
        self.ENVIRONMENT = Environment(self.source.get("ENVIRONMENT", "development").lower())

        # Logging
        self.LOG_LEVEL = self.source.get("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT = LogFormat(self.source.get("LOG_FORMAT", "json").lower())

        # Rule kinds; None selects the packaged rules_engine.yml
        self.RULES_CONFIG_PATH = self.source.get("RULES_CONFIG_PATH") or None

        # Rule cache
        self.CACHE_TTL_SECONDS = int(self.source.get("CACHE_TTL_SECONDS", "3600"))

    @property
    def json_logs(self) -> bool:
        return self.LOG_FORMAT == LogFormat.JSON

    def validate(self) -> None:
        """Validate critical configuration values."""
        if self.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL {self.LOG_LEVEL} is not a valid level")

        if self.CACHE_TTL_SECONDS < 0:
            raise ValueError("CACHE_TTL_SECONDS must be non-negative")

        if self.ENVIRONMENT == Environment.PRODUCTION and not self.json_logs:
            raise ValueError("Production logs must use the json format")

        if self.RULES_CONFIG_PATH and not os.path.isfile(self.RULES_CONFIG_PATH):
            raise ValueError(f"RULES_CONFIG_PATH {self.RULES_CONFIG_PATH} does not exist")

    def reload(self) -> None:
        """Reload configuration from the source."""
        self._load_config()
        self.validate()


# Global configuration instance
_config: Config | None = None


def get_config(source: Optional[Mapping[str, str]] = None) -> Config:
    """
    Get or create the global configuration instance.

    Args:
        source: Settings mapping used when the configuration is first created

    Returns:
        Configuration instance
    """
    global _config
    if _config is None:
        config = Config(source)
        config.validate()
        _config = config
    return _config


def reset_config() -> None:
    """Forget the global configuration so the next call reloads it."""
    global _config
    _config = None
