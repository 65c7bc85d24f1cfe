"""Application-level exception types for tinysh."""

from __future__ import annotations


class TinyshError(Exception):
    """Base exception for tinysh."""


class ConfigurationError(TinyshError):
    """Raised for configuration and startup validation errors."""


class StartDirectoryError(ConfigurationError):
    """Raised when the configured start directory cannot be entered."""


class SinkError(TinyshError):
    """Raised when a redirection target cannot be opened."""
