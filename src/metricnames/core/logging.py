"""
Structured logging for metricnames.

The factory logs two events: ``object_name_quoted`` (debug) when it falls
back to the quoted metric name, and ``object_name_rejected`` (warning) right
before raising :class:`~metricnames.core.errors.NameConstructionError`. This
module configures where those events go.

Examples:
    >>> from metricnames.core.logging import configure_logging, get_logger
    >>> configure_logging(level="WARNING", json_format=True, service="reporter")
    >>> logger = get_logger(__name__)

Tags:
    logging, structlog, ecs, json-logging
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# structlog key -> ECS field name
_ECS_RENAMES = {"timestamp": "@timestamp", "level": "log.level"}


def _ecs_fields(service: str, rename: bool) -> Processor:
    """Processor stamping ``service.name`` and, for JSON, ECS field names."""

    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service.name", service)
        if rename:
            for key, ecs_key in _ECS_RENAMES.items():
                if key in event_dict:
                    event_dict[ecs_key] = event_dict.pop(key)
        return event_dict

    return processor


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "metricnames",
) -> None:
    """Route structlog events through the stdlib ``logging`` tree.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True for JSON, False for console, None for JSON unless stdout is a tty
        service: Value of ``service.name`` on every event
    """
    numeric_level = getattr(logging, level.upper())
    if json_format is None:
        json_format = not sys.stdout.isatty()

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.dev.set_exc_info,
            _ecs_fields(service, rename=json_format),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)


def configure_from_settings(settings: Any = None) -> None:
    """Configure logging from :class:`~metricnames.core.settings.NamingSettings`."""
    if settings is None:
        from metricnames.core.settings import get_settings

        settings = get_settings()

    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
        service=settings.service_name,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
