"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_flag, read_env_str
from .errors import ConfigFileError, ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .settings import APP_NAME, DEFAULT_CONFIG_FILENAME, Settings, get_settings

__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG_FILENAME",
    "ConfigFileError",
    "ConfigurationError",
    "MissingConfigurationError",
    "Settings",
    "configure_logging",
    "get_settings",
    "read_env_flag",
    "read_env_str",
]
