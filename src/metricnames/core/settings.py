"""Settings for metricnames.

Configuration is read from ``METRICNAMES_*`` environment variables or a
``.env`` file through pydantic-settings. Marker and key constants live in
:mod:`metricnames.naming.constants` and are not configurable.

Fields
──────
default_domain : Domain used by :func:`metricnames.metric_object_name` when
                 the caller does not pass one
log_level      : structlog log level
log_format     : ``json`` or ``console``
service_name   : ``service.name`` attached to every log record

Examples:
    >>> from metricnames.core.settings import NamingSettings
    >>> NamingSettings(default_domain="myapp").default_domain
    'myapp'
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NamingSettings(BaseSettings):
    """metricnames configuration, overridable via ``METRICNAMES_*`` env vars."""

    model_config = SettingsConfigDict(
        env_prefix="METRICNAMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Naming ───────────────────────────────────────────────────
    default_domain: str = Field(
        default="metrics",
        description="Object name domain used when none is given",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")
    service_name: str = Field(default="metricnames")

    @field_validator("default_domain")
    @classmethod
    def _domain_has_no_separator(cls, value: str) -> str:
        if ":" in value or "\n" in value:
            raise ValueError("default_domain must not contain ':' or a newline")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, NamingSettings] = {}


def get_settings(*, _force_reload: bool = False) -> NamingSettings:
    """Load, validate, and cache a :class:`NamingSettings` instance.

    Parameters
    ----------
    _force_reload:
        Bypass cache and re-read the environment.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = NamingSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (used by tests)."""
    _settings_cache.clear()


__all__ = ["NamingSettings", "get_settings", "clear_settings_cache"]
