"""
Structured error types for metric name construction.

Every error raised by metricnames extends MetricNameError so callers (the
metrics reporter that asks for names, or the registry that registers them)
can catch a single base class and still get typed metadata for logging.

Manifesto:
    - **Typed Error Hierarchy:** Syntax rejections and construction failures
      are different types
    - **Rich Context:** Errors carry the inputs that produced them
    - **Error Chaining:** The grammar's rejection is preserved as the cause

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                    MetricNameError                        │
        │              (category, context, cause)                   │
        ├──────────────────────────────────────────────────────────┤
        │                                                           │
        │  ObjectNameSyntaxError         NameConstructionError      │
        │  (VALIDATION)                  (VALIDATION)               │
        │  raised by the grammar         raised by the factory      │
        │                                after the quoted retry     │
        └──────────────────────────────────────────────────────────┘

Examples:
    Wrapping a grammar rejection:

    >>> cause = ObjectNameSyntaxError("Invalid character ':' in domain")
    >>> error = NameConstructionError("Unable to create object name", cause=cause)
    >>> error.cause is cause
    True
    >>> error.to_dict()["category"]
    'VALIDATION'

Tags:
    error-handling, exception-hierarchy, error-context, object-name
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


class MetricNameError(Exception):
    """
    Base exception for all metricnames errors.

    All instances carry:
    - **category:** ErrorCategory for classification
    - **context:** dict of structured metadata for logging
    - **cause:** optional underlying exception, also set as ``__cause__``

    Subclasses set ``default_category`` to provide a sensible default.

    Examples:
        >>> error = MetricNameError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(domain="myapp").context
        {'domain': 'myapp'}
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> MetricNameError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ObjectNameSyntaxError("Invalid key").with_context(key="1abc")
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ObjectNameSyntaxError(MetricNameError):
    """The object name grammar rejected a domain, key or value."""

    default_category = ErrorCategory.VALIDATION


class NameConstructionError(MetricNameError):
    """
    Neither the raw nor the quoted metric name produced a usable object name.

    Raised by the factory after its single quoted retry. ``cause`` holds the
    rejection from the second attempt; ``context`` holds the ``type``,
    ``domain`` and ``name`` that were passed in.
    """

    default_category = ErrorCategory.VALIDATION


__all__ = [
    "ErrorCategory",
    "MetricNameError",
    "ObjectNameSyntaxError",
    "NameConstructionError",
]
