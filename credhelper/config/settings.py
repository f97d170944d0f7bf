"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)
    log_timezone: str = field(default="UTC")

    # Parsing
    strict_parsing: bool = field(default=True)

    # URI synthesis
    use_http_path: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from CREDHELPER_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=cls._get_log_level("CREDHELPER_LOG_LEVEL", "WARNING"),
            log_colors=cls._get_bool("CREDHELPER_LOG_COLORS", True),
            log_timezone=cls._get_timezone("CREDHELPER_LOG_TIMEZONE", "UTC"),
            strict_parsing=cls._get_bool("CREDHELPER_STRICT_PARSING", True),
            use_http_path=cls._get_bool("CREDHELPER_USE_HTTP_PATH", False),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        value = value.strip().lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off"):
            return False

        logger.warning("Invalid bool for %s: %s, using default %s", key, value, default)
        return default

    @staticmethod
    def _get_log_level(key: str, default: str) -> str:
        """Get a logging level name from environment with validation."""
        value = os.getenv(key)
        if value is None:
            return default

        level = value.strip().upper()
        if level in LOG_LEVELS:
            return level

        logger.warning("Invalid log level for %s: %s, using default %s", key, value, default)
        return default

    @staticmethod
    def _get_timezone(key: str, default: str) -> str:
        """Get an IANA timezone name from environment with validation."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Invalid timezone for %s: %s, using default %s", key, value, default)
            return default
        return value


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next call reloads the environment."""
    global _settings
    _settings = None


def set_settings(settings: Settings) -> None:
    """Set the process-wide settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings
