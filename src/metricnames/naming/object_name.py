r"""Object names and the grammar they must satisfy.

An object name is a domain plus an unordered set of ``key=value`` key
properties, written canonically as ``domain:k1=v1,k2=v2`` with the keys
sorted. This module is the default registry grammar used by
:class:`~metricnames.naming.factory.MetricObjectNameFactory`; any registry
can supply its own ``validate``/``is_pattern``/``quote`` triple instead.

Grammar:
    - **Domain:** any string without ``:`` or a newline. Empty means the
      registry's default domain. ``*`` and ``?`` make it a domain pattern.
    - **Keys:** ``[a-zA-Z_][a-zA-Z0-9_]*``. At least one key is required.
    - **Unquoted values:** non-empty, no ``:`` ``,`` ``=`` ``"`` or newline.
      ``*`` and ``?`` make the name a value pattern.
    - **Quoted values:** ``"..."`` where ``\\``, ``\"``, ``\*``, ``\?`` and
      ``\n`` are the only escapes and no bare ``"`` or newline appears.
      An unescaped ``*`` or ``?`` inside makes the name a value pattern.

Examples:
    >>> name = validate("myapp", {"type": "metric.gauge", "name": "depth"})
    >>> name.canonical_name
    'myapp:name=depth,type=metric.gauge'
    >>> is_pattern(validate("myapp", {"name": "a*"}))
    True
    >>> quote('a*"b')
    '"a\\*\\"b"'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from metricnames.core.errors import ObjectNameSyntaxError

_KEY_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
_QUOTE = '"'
_WILDCARDS = frozenset("*?")
_UNQUOTED_FORBIDDEN = frozenset(':,="\n')
_DOMAIN_FORBIDDEN = frozenset(":\n")

# character -> escape sequence used inside a quoted value
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "*": "\\*",
    "?": "\\?",
    "\n": "\\n",
}
# escape code -> decoded character
_UNESCAPES = {"\\": "\\", '"': '"', "*": "*", "?": "?", "n": "\n"}


@dataclass(frozen=True)
class ObjectName:
    """Immutable object name: a domain and sorted key properties.

    Instances are normally obtained from :func:`validate`; constructing one
    directly skips the grammar checks.
    """

    domain: str
    _properties: tuple[tuple[str, str], ...]

    @classmethod
    def from_dict(cls, domain: str, properties: Mapping[str, str]) -> ObjectName:
        """Create from a domain and key property mapping (no validation)."""
        return cls(domain, tuple(sorted(properties.items())))

    @property
    def key_properties(self) -> dict[str, str]:
        """Key properties as a new dictionary."""
        return dict(self._properties)

    def get_key_property(self, key: str) -> str | None:
        """Value of ``key``, or ``None`` if the key is not present."""
        for k, v in self._properties:
            if k == key:
                return v
        return None

    @property
    def canonical_name(self) -> str:
        """``domain:key=value,...`` with keys in lexical order."""
        props = ",".join(f"{k}={v}" for k, v in self._properties)
        return f"{self.domain}:{props}"

    @property
    def is_pattern(self) -> bool:
        """Whether the name contains wildcards (see :func:`is_pattern`)."""
        return is_pattern(self)

    def __str__(self) -> str:
        return self.canonical_name


def _scan_quoted(value: str) -> tuple[str, bool]:
    """Decode a quoted value, returning ``(text, has_unescaped_wildcard)``."""
    if len(value) < 2 or value[0] != _QUOTE or value[-1] != _QUOTE:
        raise ObjectNameSyntaxError(f"Quoted value is not enclosed in quotes: {value!r}")

    chars: list[str] = []
    wildcard = False
    body = value[1:-1]
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            if i + 1 >= len(body):
                raise ObjectNameSyntaxError(f"Missing closing quote in value: {value!r}")
            code = body[i + 1]
            if code not in _UNESCAPES:
                raise ObjectNameSyntaxError(f"Invalid escape '\\{code}' in quoted value: {value!r}")
            chars.append(_UNESCAPES[code])
            i += 2
            continue
        if ch == _QUOTE:
            raise ObjectNameSyntaxError(f"Unescaped quote in quoted value: {value!r}")
        if ch == "\n":
            raise ObjectNameSyntaxError("Newline in quoted value must be escaped")
        if ch in _WILDCARDS:
            wildcard = True
        chars.append(ch)
        i += 1
    return "".join(chars), wildcard


def _check_key(key: str) -> None:
    if not isinstance(key, str) or _KEY_PATTERN.fullmatch(key) is None:
        raise ObjectNameSyntaxError(f"Invalid key {key!r}").with_context(key=key)


def _check_value(key: str, value: str) -> None:
    if not isinstance(value, str):
        raise ObjectNameSyntaxError(f"Value of key {key!r} is not a string")
    if value == "":
        raise ObjectNameSyntaxError(f"Invalid value (empty) for key {key!r}").with_context(key=key)
    if value.startswith(_QUOTE):
        _scan_quoted(value)
        return
    bad = _UNQUOTED_FORBIDDEN.intersection(value)
    if bad:
        chars = "".join(sorted(bad))
        raise ObjectNameSyntaxError(
            f"Invalid character(s) {chars!r} in value of key {key!r}"
        ).with_context(key=key, value=value)


def validate(domain: str, properties: Mapping[str, str]) -> ObjectName:
    """Build an :class:`ObjectName`, enforcing the grammar.

    Raises:
        ObjectNameSyntaxError: if the domain, a key or a value is malformed,
            or no key properties are given.
    """
    bad = _DOMAIN_FORBIDDEN.intersection(domain)
    if bad:
        raise ObjectNameSyntaxError(
            f"Invalid character(s) {''.join(sorted(bad))!r} in domain"
        ).with_context(domain=domain)
    if not properties:
        raise ObjectNameSyntaxError("Key properties cannot be empty").with_context(domain=domain)

    for key, value in properties.items():
        _check_key(key)
        _check_value(key, value)

    return ObjectName.from_dict(domain, properties)


# Name used in the data model.
new_object_name = validate


def _value_is_pattern(value: str) -> bool:
    if value.startswith(_QUOTE):
        return _scan_quoted(value)[1]
    return not _WILDCARDS.isdisjoint(value)


def is_pattern(name: ObjectName) -> bool:
    """True if the domain or any value contains an unescaped ``*`` or ``?``."""
    if not _WILDCARDS.isdisjoint(name.domain):
        return True
    return any(_value_is_pattern(v) for _, v in name._properties)


def quote(text: str) -> str:
    """Quote ``text`` so it is accepted as a literal (non-pattern) value."""
    return _QUOTE + "".join(_ESCAPES.get(ch, ch) for ch in text) + _QUOTE


def unquote(value: str) -> str:
    """Inverse of :func:`quote`.

    Raises:
        ObjectNameSyntaxError: if ``value`` is not a well-formed quoted value.
    """
    return _scan_quoted(value)[0]


__all__ = [
    "ObjectName",
    "validate",
    "new_object_name",
    "is_pattern",
    "quote",
    "unquote",
]
