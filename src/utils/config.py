"""
Configuration management for the unicon application.

This module handles:
- Application metadata
- Default rounding places
- Log level

There are no configuration files; defaults can be overridden through the
UNICON_ROUND_PLACES and UNICON_LOG_LEVEL environment variables.
"""

import logging
import os
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_ROUND_PLACES,
    ENV_LOG_LEVEL,
    ENV_ROUND_PLACES,
)
from .validators import validate_round_places

logger = logging.getLogger("unicon.config")


class Config:
    """
    Application configuration.

    Resolved once from the environment when constructed; read-only afterwards.
    """

    def __init__(self, environ: Optional[dict] = None):
        """
        Initialize configuration.

        Args:
            environ: Mapping to read overrides from (defaults to os.environ)
        """
        if environ is None:
            environ = os.environ

        self._app_name = APP_NAME
        self._app_version = APP_VERSION
        self._default_round_places = self._resolve_round_places(environ.get(ENV_ROUND_PLACES))
        self._log_level = self._resolve_log_level(environ.get(ENV_LOG_LEVEL))

    @staticmethod
    def _resolve_round_places(raw: Optional[str]) -> int:
        """Parse the rounding override, falling back to the default."""
        if raw is None:
            return DEFAULT_ROUND_PLACES

        is_valid, error = validate_round_places(raw.strip())
        if not is_valid:
            logger.warning(
                f"Ignoring {ENV_ROUND_PLACES}='{raw}': {error} "
                f"Using {DEFAULT_ROUND_PLACES}."
            )
            return DEFAULT_ROUND_PLACES
        return int(raw.strip())

    @staticmethod
    def _resolve_log_level(raw: Optional[str]) -> int:
        """Parse the log level override, falling back to the default."""
        name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Ignoring {ENV_LOG_LEVEL}='{raw}': unknown log level")
            level = logging.getLevelName(DEFAULT_LOG_LEVEL)
        return level

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def default_round_places(self) -> int:
        """Decimal places used when --round is not given."""
        return self._default_round_places

    @property
    def log_level(self) -> int:
        """Numeric logging level for the unicon logger."""
        return self._log_level

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(default_round_places={self._default_round_places}, "
            f"log_level='{logging.getLevelName(self._log_level)}')"
        )


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    The environment is read on first call only.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config()

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None
