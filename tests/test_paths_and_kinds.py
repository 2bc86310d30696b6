"""Tests for path building, kind classification and value summaries."""

import sys
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from waldo.core.formatter import format_kind, format_value
from waldo.core.kinds import UNDEFINED, Kind, classify, resolve_kind_name
from waldo.core.match import Match
from waldo.core.paths import OBJECT_LABEL, build_path, is_identifier


class TestBuildPath:
    """Test path string construction."""

    def test_identifier_uses_dot(self):
        assert build_path("root", "a") == "root.a"
        assert build_path("<object>", "_private") == "<object>._private"

    def test_empty_prefix_is_key_alone(self):
        assert build_path("", "a") == "a"
        assert build_path("", "my key") == "my key"
        assert build_path("", 0) == "0"

    def test_non_identifier_uses_quoted_brackets(self):
        assert build_path("root", "my key") == 'root["my key"]'
        assert build_path("root", "1st") == 'root["1st"]'
        assert build_path("root", "a-b") == 'root["a-b"]'
        assert build_path("root", "") == 'root[""]'

    def test_keywords_use_brackets(self):
        assert build_path("root", "class") == 'root["class"]'

    def test_quotes_are_escaped(self):
        assert build_path("root", 'say "hi"') == 'root["say \\"hi\\""]'

    def test_unicode_identifiers(self):
        assert build_path("root", "größe") == "root.größe"

    def test_non_string_keys(self):
        assert build_path("root.items", 0) == "root.items[0]"
        assert build_path("root", (1, 2)) == "root[(1, 2)]"
        assert build_path("root", None) == "root[None]"

    def test_is_identifier(self):
        assert is_identifier("name")
        assert not is_identifier("for")
        assert not is_identifier(3)

    def test_object_label(self):
        assert build_path(OBJECT_LABEL, "a") == "<object>.a"


class TestClassify:
    """Test runtime kind classification."""

    @pytest.mark.parametrize("value,kind", [
        (UNDEFINED, Kind.UNDEFINED),
        (None, Kind.NULL),
        (True, Kind.BOOLEAN),
        (0, Kind.NUMBER),
        (1.5, Kind.NUMBER),
        (Decimal("1.1"), Kind.NUMBER),
        (Fraction(1, 3), Kind.NUMBER),
        ("", Kind.STRING),
        (b"raw", Kind.BYTES),
        ([], Kind.ARRAY),
        ((1,), Kind.ARRAY),
        (len, Kind.FUNCTION),
        (lambda: None, Kind.FUNCTION),
        (OrderedDict, Kind.FUNCTION),
        ({}, Kind.OBJECT),
        (set(), Kind.OBJECT),
        (object(), Kind.OBJECT),
    ])
    def test_classify(self, value, kind):
        assert classify(value) is kind

    def test_resolve_kind_name_is_case_insensitive(self):
        assert resolve_kind_name("array") is Kind.ARRAY
        assert resolve_kind_name("Array") is Kind.ARRAY
        assert resolve_kind_name("NULL") is Kind.NULL

    def test_resolve_python_aliases(self):
        assert resolve_kind_name("None") is Kind.NULL
        assert resolve_kind_name("list") is Kind.ARRAY
        assert resolve_kind_name("dict") is Kind.OBJECT
        assert resolve_kind_name("int") is Kind.NUMBER
        assert resolve_kind_name("str") is Kind.STRING
        assert resolve_kind_name("bool") is Kind.BOOLEAN

    def test_resolve_unknown(self):
        assert resolve_kind_name("Decimal") is None


class TestUndefined:
    """Test the UNDEFINED sentinel."""

    def test_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED

    def test_falsy(self):
        assert not UNDEFINED

    def test_distinct_from_none(self):
        assert UNDEFINED is not None
        assert UNDEFINED != None  # noqa: E711

    def test_repr(self):
        assert repr(UNDEFINED) == "UNDEFINED"


class TestFormatValue:
    """Test match summaries."""

    def test_kind_tags(self):
        assert format_value(12) == "(number)"
        assert format_value("x") == "(string)"
        assert format_value(None) == "(null)"
        assert format_value(UNDEFINED) == "(undefined)"
        assert format_value(print) == "(function)"
        assert format_value([]) == "(array)"
        assert format_value({}) == "(object)"

    def test_circular_marker(self):
        assert format_value({}, ancestor_path="window.a") == "(<window.a>)"

    def test_circular_marker_for_empty_root_label(self):
        assert format_value({}, ancestor_path="") == "(<>)"

    def test_precomputed_kind(self):
        assert format_value({}, kind=Kind.ARRAY) == "(array)"
        assert format_kind(Kind.BYTES) == "(bytes)"


class TestMatch:
    """Test match records."""

    def test_line_and_arguments(self):
        owner = {"c": 12}
        match = Match("root.c", 12, "c", owner, "(number)")
        assert match.line == "root.c -> (number)"
        assert str(match) == match.line
        assert match.debug_arguments == (12, "c", owner)
        assert not match.is_circular

    def test_circular(self):
        owner = {}
        match = Match("root.self", owner, "self", owner, "(<root>)")
        assert match.is_circular

    def test_equality_ignores_value_identity(self):
        a = Match("root.c", [1], "c", {}, "(array)")
        b = Match("root.c", [1], "c", {}, "(array)")
        assert a == b
