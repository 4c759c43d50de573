"""Extraction of identifier tokens embedded in metric names.

A metric name such as ``"sensor.JOB_42.OP_7.rate"`` carries job and operator
ids as ``.``-separated tokens. A token starts at its marker and runs to the
next separator or the end of the string.

Example:
    >>> token_starting_with("sensor.JOB_42.OP_7.rate", "JOB_")
    'JOB_42'
    >>> token_starting_with("sensor.OP_7", "OP_")
    'OP_7'
    >>> token_starting_with("JOB_42.sensor", "JOB_") is None
    True
"""

from __future__ import annotations

from collections.abc import MutableMapping

from .constants import KEY_JOBID, KEY_OPID, PREFIX_JOBID, PREFIX_OPID, SEPARATOR


def token_starting_with(buffer: str, marker: str, separator: str = SEPARATOR) -> str | None:
    """Return the first token of ``buffer`` that starts with ``marker``.

    The marker must be preceded by ``separator``, so a marker at the very
    start of the buffer is not matched. Only the first occurrence is used.
    The returned token includes the marker.
    """
    start = buffer.find(separator + marker)
    if start == -1:
        return None
    start += len(separator)
    end = buffer.find(separator, start)
    if end == -1:
        end = len(buffer)
    return buffer[start:end]


# Name used in the data model.
extract_token = token_starting_with


def add_key_property(
    buffer: str,
    marker: str,
    key: str,
    properties: MutableMapping[str, str],
) -> None:
    """Set ``properties[key]`` to the token starting with ``marker``, if any."""
    value = token_starting_with(buffer, marker)
    if value is not None:
        properties[key] = value


def add_id_properties(buffer: str, properties: MutableMapping[str, str]) -> None:
    """Add the ``jobId`` and ``opId`` key properties found in ``buffer``."""
    add_key_property(buffer, PREFIX_JOBID, KEY_JOBID, properties)
    add_key_property(buffer, PREFIX_OPID, KEY_OPID, properties)


__all__ = [
    "token_starting_with",
    "extract_token",
    "add_key_property",
    "add_id_properties",
]
