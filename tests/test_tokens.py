"""
Tests for scalar token conversion.

These tests verify:
    - Literal parsing rules for bool / int / float
    - The KEY_NOT_FOUND sentinel
    - Normalisation of comparison operands
"""

import pytest
from officer_roster.tokens import (
    KEY_NOT_FOUND,
    KeyNotFound,
    TYPE_DEFAULTS,
    parse_bool,
    parse_int,
    parse_float,
    parse_number,
    to_token,
)


class TestParseBool:
    """Test boolean literal parsing."""

    @pytest.mark.parametrize("text", ["True", "true", "TRUE", " true "])
    def test_true_literals(self, text):
        """Any casing of 'true' parses, whitespace ignored."""
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["False", "false", "FALSE", "false\r"])
    def test_false_literals(self, text):
        """Any casing of 'false' parses, including a trailing CR."""
        assert parse_bool(text) is False

    @pytest.mark.parametrize("text", ["", "yes", "0", "1", "Falsey"])
    def test_non_literals(self, text):
        """Anything else is not a boolean."""
        assert parse_bool(text) is None


class TestParseNumbers:
    """Test integer and float parsing."""

    def test_int(self):
        """Signed integers parse, whitespace ignored."""
        assert parse_int("42") == 42
        assert parse_int(" -8 ") == -8

    def test_int_rejects_decimal(self):
        """Decimals and words are not integers."""
        assert parse_int("4.5") is None
        assert parse_int("abc") is None

    def test_float(self):
        """Decimals and integers both parse as float."""
        assert parse_float("45.5") == 45.5
        assert parse_float("10") == 10.0
        assert parse_float("1e3") == 1000.0

    def test_float_rejects_non_finite(self):
        """NaN, infinity and words are rejected."""
        assert parse_float("nan") is None
        assert parse_float("inf") is None
        assert parse_float("1e999") is None
        assert parse_float("Cat") is None

    def test_underscore_separators_rejected(self):
        """Python's digit-group underscores are not roster numbers."""
        assert parse_float("1_000") is None
        assert parse_int("1_000") is None
        assert parse_number("1_000") is None

    def test_number_keeps_integers_exact(self):
        """Integer literals stay int so large IDs are not rounded."""
        value = parse_number("123456789012345678")
        assert isinstance(value, int)
        assert value == 123456789012345678

    def test_number_falls_back_to_float(self):
        """Non-integer numerics become float."""
        assert parse_number("45.5") == 45.5
        assert parse_number("Cat") is None


class TestKeyNotFound:
    """Test the not-found sentinel."""

    def test_singleton(self):
        """Constructing the class returns the one sentinel."""
        assert KeyNotFound() is KEY_NOT_FOUND

    def test_falsy(self):
        """Sentinel is falsy."""
        assert not KEY_NOT_FOUND

    def test_never_equal_to_values(self):
        """Sentinel never equals a stored value."""
        assert KEY_NOT_FOUND != ""
        assert KEY_NOT_FOUND != "KEY_NOT_FOUND"
        assert KEY_NOT_FOUND is not None


class TestToToken:
    """Test operand normalisation."""

    def test_bool(self):
        """Booleans use the roster file spelling."""
        assert to_token(True) == "True"
        assert to_token(False) == "False"

    def test_numbers(self):
        """Numbers become their text."""
        assert to_token(5) == "5"
        assert to_token(2.5) == "2.5"

    def test_none_is_not_found(self):
        """None maps to the sentinel."""
        assert to_token(None) is KEY_NOT_FOUND

    def test_type_defaults(self):
        """Defaults are defined once, per type."""
        assert TYPE_DEFAULTS == {str: "", bool: False, int: 0, float: 0.0}
