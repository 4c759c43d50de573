"""Key names and token markers for metric object names.

The two ``PREFIX_*`` markers must be equal to the prefixes the job runtime
uses when it serializes job and operator ids into metric names. Nothing here
can detect a mismatch: if the runtime changes a prefix, extraction returns
``None`` and the ``jobId``/``opId`` keys are silently omitted. Bump
``MARKER_CONTRACT_VERSION`` together with any change to the markers.
"""

# Prefix of all metric types.
TYPE_PREFIX = "metric"

# Key property names.
KEY_NAME = "name"
KEY_TYPE = "type"
KEY_JOBID = "jobId"
KEY_OPID = "opId"

# Job id prefix as serialized in the metric name.
PREFIX_JOBID = "JOB_"
# Operator id prefix as serialized in the metric name.
PREFIX_OPID = "OP_"

# Separator between tokens of a metric name.
SEPARATOR = "."

MARKER_CONTRACT_VERSION = 1

__all__ = [
    "TYPE_PREFIX",
    "KEY_NAME",
    "KEY_TYPE",
    "KEY_JOBID",
    "KEY_OPID",
    "PREFIX_JOBID",
    "PREFIX_OPID",
    "SEPARATOR",
    "MARKER_CONTRACT_VERSION",
]
