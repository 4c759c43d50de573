"""Object naming for metrics.

Key components:
- constants: key names and the job/operator token markers
- tokens: extraction of ``JOB_``/``OP_`` tokens from metric names
- object_name: ObjectName and the default registry grammar
- factory: MetricObjectNameFactory with raw-then-quoted fallback
"""

from .constants import (
    KEY_JOBID,
    KEY_NAME,
    KEY_OPID,
    KEY_TYPE,
    MARKER_CONTRACT_VERSION,
    PREFIX_JOBID,
    PREFIX_OPID,
    SEPARATOR,
    TYPE_PREFIX,
)
from .factory import (
    MetricObjectNameFactory,
    ObjectNameFactory,
    get_object_name_factory,
    metric_object_name,
)
from .object_name import ObjectName, is_pattern, new_object_name, quote, unquote, validate
from .tokens import extract_token, token_starting_with

__all__ = [
    # Constants
    "TYPE_PREFIX",
    "KEY_NAME",
    "KEY_TYPE",
    "KEY_JOBID",
    "KEY_OPID",
    "PREFIX_JOBID",
    "PREFIX_OPID",
    "SEPARATOR",
    "MARKER_CONTRACT_VERSION",
    # Object names
    "ObjectName",
    "validate",
    "new_object_name",
    "is_pattern",
    "quote",
    "unquote",
    # Tokens
    "token_starting_with",
    "extract_token",
    # Factory
    "ObjectNameFactory",
    "MetricObjectNameFactory",
    "get_object_name_factory",
    "metric_object_name",
]
