"""
metricnames - object names for metrics registered with a management registry.

Builds ``domain:type=metric.<type>,name=<name>[,jobId=...][,opId=...]``
names from a metric type, domain and metric name, falling back to the
quoted metric name when the raw one is not a valid, literal object name.
"""

__version__ = "0.1.0"

from metricnames.core.errors import MetricNameError, NameConstructionError, ObjectNameSyntaxError
from metricnames.naming import *  # noqa: F401,F403
from metricnames.naming import __all__ as _naming_all

__all__ = [
    "__version__",
    "MetricNameError",
    "NameConstructionError",
    "ObjectNameSyntaxError",
    *_naming_all,
]
