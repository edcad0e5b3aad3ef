"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values or files are absent."""


class ConfigFileError(ConfigurationError):
    """Raised when a configuration file cannot be read or parsed."""
