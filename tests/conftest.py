"""
Shared pytest fixtures for metricnames tests.

Provides:
- structlog and settings reset between tests
- fake registry grammar for exercising the factory without the default one
"""

import sys
from pathlib import Path

import pytest
import structlog

# Ensure metricnames package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from metricnames.core.errors import ObjectNameSyntaxError
from metricnames.core.settings import clear_settings_cache
from metricnames.naming.object_name import ObjectName


@pytest.fixture(autouse=True)
def _reset_ambient_state():
    """Restore structlog defaults and drop cached settings after each test."""
    yield
    structlog.reset_defaults()
    clear_settings_cache()


class FakeRegistry:
    """Minimal stand-in for a registry grammar.

    Rejects any value listed in ``reject``; treats any value listed in
    ``patterns`` as a pattern. Quotes by wrapping in angle brackets. Records
    every call so tests can assert on the attempts made.
    """

    def __init__(self, reject=(), patterns=()):
        self.reject = set(reject)
        self.patterns = set(patterns)
        self.calls: list[tuple[str, dict[str, str]]] = []

    def validate(self, domain, properties):
        self.calls.append((domain, dict(properties)))
        for value in properties.values():
            if value in self.reject:
                raise ObjectNameSyntaxError(f"rejected {value!r}")
        return ObjectName.from_dict(domain, properties)

    def is_pattern(self, name):
        return any(v in self.patterns for v in name.key_properties.values())

    @staticmethod
    def quote(text):
        return f"<{text}>"


@pytest.fixture
def fake_registry():
    return FakeRegistry()
