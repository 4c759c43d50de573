"""Tests for ObjectName and the default grammar."""

import pytest

from metricnames.core.errors import ErrorCategory, ObjectNameSyntaxError
from metricnames.naming.object_name import (
    ObjectName,
    is_pattern,
    new_object_name,
    quote,
    unquote,
    validate,
)


class TestObjectName:
    """Tests for the ObjectName value type."""

    def test_key_order_irrelevant(self):
        """Names with the same properties are equal whatever the insertion order."""
        a = ObjectName.from_dict("d", {"type": "t", "name": "n"})
        b = ObjectName.from_dict("d", {"name": "n", "type": "t"})
        assert a == b
        assert hash(a) == hash(b)

    def test_canonical_name_sorts_keys(self):
        name = ObjectName.from_dict("d", {"type": "t", "name": "n", "jobId": "JOB_1"})
        assert name.canonical_name == "d:jobId=JOB_1,name=n,type=t"
        assert str(name) == name.canonical_name

    def test_get_key_property(self):
        name = ObjectName.from_dict("d", {"name": "n"})
        assert name.get_key_property("name") == "n"
        assert name.get_key_property("opId") is None

    def test_key_properties_is_a_copy(self):
        name = ObjectName.from_dict("d", {"name": "n"})
        props = name.key_properties
        props["name"] = "changed"
        assert name.get_key_property("name") == "n"

    def test_is_frozen(self):
        name = ObjectName.from_dict("d", {"name": "n"})
        with pytest.raises(AttributeError):
            name.domain = "other"


class TestValidate:
    """Tests for validate."""

    def test_valid_name(self):
        name = validate("myapp", {"type": "metric.gauge", "name": "queue.depth"})
        assert name.domain == "myapp"
        assert name.key_properties == {"type": "metric.gauge", "name": "queue.depth"}

    def test_alias(self):
        assert new_object_name is validate

    def test_empty_domain_allowed(self):
        assert validate("", {"name": "n"}).domain == ""

    @pytest.mark.parametrize("domain", ["my:app", "my\napp"])
    def test_invalid_domain(self, domain):
        with pytest.raises(ObjectNameSyntaxError, match="domain"):
            validate(domain, {"name": "n"})

    def test_no_properties(self):
        with pytest.raises(ObjectNameSyntaxError, match="empty"):
            validate("d", {})

    @pytest.mark.parametrize("key", ["", "1abc", "has space", "a-b", "a.b", "a*"])
    def test_invalid_key(self, key):
        with pytest.raises(ObjectNameSyntaxError, match="Invalid key"):
            validate("d", {key: "v"})

    @pytest.mark.parametrize("key", ["name", "_x", "jobId", "a1_B2"])
    def test_valid_key(self, key):
        validate("d", {key: "v"})

    @pytest.mark.parametrize("value", ["a:b", "a,b", "a=b", 'a"b', "a\nb"])
    def test_invalid_unquoted_value(self, value):
        with pytest.raises(ObjectNameSyntaxError, match="Invalid character"):
            validate("d", {"name": value})

    def test_empty_value_rejected(self):
        with pytest.raises(ObjectNameSyntaxError, match="empty"):
            validate("d", {"name": ""})

    def test_wildcards_allowed_unquoted(self):
        """Wildcards are legal, they just make the name a pattern."""
        assert validate("d", {"name": "a*b?"}).is_pattern

    @pytest.mark.parametrize("value", ['"a:b,c=d"', '"a\\"b"', '"a\\nb"', '""'])
    def test_valid_quoted_value(self, value):
        validate("d", {"name": value})

    @pytest.mark.parametrize(
        "value",
        ['"abc', '"a"b"', '"a\\x"', '"abc\\"', '"a\nb"', '"'],
    )
    def test_invalid_quoted_value(self, value):
        with pytest.raises(ObjectNameSyntaxError):
            validate("d", {"name": value})

    def test_error_category_and_context(self):
        with pytest.raises(ObjectNameSyntaxError) as exc_info:
            validate("d", {"1bad": "v"})
        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert exc_info.value.context["key"] == "1bad"


class TestIsPattern:
    """Tests for is_pattern."""

    def test_literal_name(self):
        assert not is_pattern(validate("d", {"name": "n"}))

    @pytest.mark.parametrize("domain", ["d*", "d?"])
    def test_domain_pattern(self, domain):
        assert is_pattern(validate(domain, {"name": "n"}))

    @pytest.mark.parametrize("value", ["n*", "n?", '"n*"'])
    def test_value_pattern(self, value):
        assert is_pattern(validate("d", {"name": value}))

    def test_escaped_wildcard_is_literal(self):
        assert not is_pattern(validate("d", {"name": '"n\\*\\?"'}))

    def test_property_matches_function(self):
        name = validate("d", {"name": "n*"})
        assert name.is_pattern is is_pattern(name)


class TestQuote:
    """Tests for quote and unquote."""

    def test_quote_plain(self):
        assert quote("abc") == '"abc"'

    def test_quote_escapes(self):
        assert quote('a"b\\c*d?e\nf') == '"a\\"b\\\\c\\*d\\?e\\nf"'

    def test_quote_empty(self):
        assert quote("") == '""'

    def test_quoted_value_is_valid_and_literal(self):
        raw = 'weird:name,with=all"the*chars?\n'
        name = validate("d", {"name": quote(raw)})
        assert not name.is_pattern

    def test_unquote_inverts_quote(self):
        raw = 'a"b\\c*d?e\nf'
        assert unquote(quote(raw)) == raw

    @pytest.mark.parametrize("value", ["abc", '"abc', '"a\\qb"'])
    def test_unquote_rejects_malformed(self, value):
        with pytest.raises(ObjectNameSyntaxError):
            unquote(value)
