"""Core primitives shared by the naming package: errors, logging, settings."""

from .errors import (
    ErrorCategory,
    MetricNameError,
    NameConstructionError,
    ObjectNameSyntaxError,
)
from .logging import configure_from_settings, configure_logging, get_logger
from .settings import NamingSettings, clear_settings_cache, get_settings

__all__ = [
    # Errors
    "ErrorCategory",
    "MetricNameError",
    "ObjectNameSyntaxError",
    "NameConstructionError",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    # Settings
    "NamingSettings",
    "get_settings",
    "clear_settings_cache",
]
