"""Factory of metric object names.

A metrics reporter asks the factory for the object name under which a metric
is registered. The name is built from the metric type, a domain and the metric
name; the job and operator ids embedded in the metric name by the job runtime
become ``jobId`` and ``opId`` key properties.

Example:
    >>> from metricnames.naming.factory import MetricObjectNameFactory
    >>> factory = MetricObjectNameFactory()
    >>> str(factory.create_name("gauge", "myapp", "foo.JOB_42.OP_7.bar"))
    'myapp:jobId=JOB_42,name=foo.JOB_42.OP_7.bar,opId=OP_7,type=metric.gauge'

If the metric name is a pattern, or does not form a valid object name, the
quoted metric name is tried once instead:

    >>> factory.create_name("counter", "myapp", "hits*").get_key_property("name")
    '"hits\\\\*"'
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Protocol

from metricnames.core.errors import NameConstructionError, ObjectNameSyntaxError
from metricnames.core.logging import get_logger

from . import object_name as grammar
from .constants import KEY_NAME, KEY_TYPE, TYPE_PREFIX
from .object_name import ObjectName
from .tokens import add_id_properties

logger = get_logger(__name__)

Validator = Callable[[str, Mapping[str, str]], ObjectName]
PatternCheck = Callable[[ObjectName], bool]
Quoter = Callable[[str], str]


class ObjectNameFactory(Protocol):
    """Anything that can name a metric for registration."""

    def create_name(self, metric_type: str, domain: str, name: str) -> ObjectName: ...


class MetricObjectNameFactory:
    """Creates object names for metrics, parsing job and operator ids.

    The registry grammar is injected. By default the grammar in
    :mod:`metricnames.naming.object_name` is used; a registry with its own
    rules passes its ``validator``, ``is_pattern`` and ``quote`` callables and
    the exception types its validator raises in ``syntax_errors``.

    Instances hold no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        validator: Validator = grammar.validate,
        is_pattern: PatternCheck = grammar.is_pattern,
        quote: Quoter = grammar.quote,
        syntax_errors: tuple[type[Exception], ...] = (ObjectNameSyntaxError,),
    ):
        self._validator = validator
        self._is_pattern = is_pattern
        self._quote = quote
        self._syntax_errors = syntax_errors

    def create_name(self, metric_type: str, domain: str, name: str) -> ObjectName:
        """Create an object name from the metric type, domain and metric name.

        Args:
            metric_type: Type of metric; the ``type`` key becomes
                ``"metric." + metric_type``.
            domain: Domain part of the object name.
            name: Metric name; the value of the ``name`` key.

        Raises:
            NameConstructionError: if the validator rejects both the metric
                name and its quoted form. A quoted name that is still a
                pattern (wildcards in the domain) is returned as is.
        """
        properties: dict[str, str] = {
            KEY_TYPE: f"{TYPE_PREFIX}.{metric_type}",
            KEY_NAME: name,
        }
        self.add_key_properties(name, properties)

        try:
            object_name = self._validator(domain, properties)
            pattern = self._is_pattern(object_name)
        except self._syntax_errors as e:
            reason = "malformed"
            detail = str(e)
        else:
            if not pattern:
                return object_name
            reason = "pattern"
            detail = str(object_name)

        logger.debug(
            "object_name_quoted",
            metric_type=metric_type,
            domain=domain,
            metric_name=name,
            reason=reason,
            detail=detail,
        )
        properties[KEY_NAME] = self._quote(name)

        try:
            return self._validator(domain, properties)
        except self._syntax_errors as e:
            raise self._construction_error(metric_type, domain, name, e) from e

    # Name used in the data model.
    build = create_name

    def add_key_properties(self, buffer: str, properties: MutableMapping[str, str]) -> None:
        """Add key properties parsed from the metric name.

        Adds ``jobId`` and ``opId`` when the job and operator tokens are
        present. Subclasses may override to add further keys.
        """
        add_id_properties(buffer, properties)

    def _construction_error(
        self, metric_type: str, domain: str, name: str, cause: Exception
    ) -> NameConstructionError:
        logger.warning(
            "object_name_rejected",
            metric_type=metric_type,
            domain=domain,
            metric_name=name,
            error=str(cause),
        )
        return NameConstructionError(
            f"Unable to create object name for metric {name!r} in domain {domain!r}: {cause}",
            context={"type": metric_type, "domain": domain, "name": name},
            cause=cause,
        )


# Global factory
_default_factory = MetricObjectNameFactory()


def get_object_name_factory() -> MetricObjectNameFactory:
    """Get the default object name factory."""
    return _default_factory


def metric_object_name(metric_type: str, name: str, domain: str | None = None) -> ObjectName:
    """Name a metric with the default factory.

    ``domain`` defaults to ``default_domain`` from the settings.
    """
    if domain is None:
        from metricnames.core.settings import get_settings

        domain = get_settings().default_domain
    return _default_factory.create_name(metric_type, domain, name)


__all__ = [
    "ObjectNameFactory",
    "MetricObjectNameFactory",
    "Validator",
    "PatternCheck",
    "Quoter",
    "get_object_name_factory",
    "metric_object_name",
]
