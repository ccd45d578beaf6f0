"""
Tests for conversion rules and operators.

These tests verify:
    - Number formatting (shortest digits, exponent forms)
    - Explicit conversions (Number, String, Boolean, parseInt, parseFloat)
    - Operator coercion (+, -, *, /) including bigint rules
    - Strict equality and NaN checks
"""

import math
from datetime import datetime, timezone

import pytest
from primer.coercion import (
    add,
    divide,
    format_number,
    greater_than,
    is_nan,
    multiply,
    number_is_nan,
    parse_float,
    parse_int,
    strict_equals,
    subtract,
    to_boolean,
    to_iso_string,
    to_number,
    to_string,
    unary_plus,
)
from primer.errors import ScriptRangeError, ScriptTypeError
from primer.values import INFINITY, NAN, UNDEFINED, BigInt, Function, Symbol


class TestFormatNumber:
    """Test number display."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (100.0, "100"),
            (100.65, "100.65"),
            (-0.0, "0"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e21, "1e+21"),
            (1e-7, "1e-7"),
            (0.000001, "0.000001"),
            (123456789012345680000.0, "123456789012345680000"),
            (-2.5, "-2.5"),
            (NAN, "NaN"),
            (-INFINITY, "-Infinity"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestToNumber:
    """Test Number() conversion."""

    def test_strings(self):
        assert to_number("") == 0
        assert to_number("  42 ") == 42
        assert to_number("250.75") == 250.75
        assert to_number("0x1A") == 26
        assert to_number("-Infinity") == -INFINITY
        assert math.isnan(to_number("hello"))
        assert math.isnan(to_number("42px"))

    def test_special_values(self):
        assert to_number(None) == 0
        assert math.isnan(to_number(UNDEFINED))
        assert to_number(True) == 1
        assert to_number(False) == 0

    def test_objects(self):
        """Objects convert through their string form."""
        assert to_number([]) == 0
        assert to_number([5]) == 5
        assert math.isnan(to_number([1, 2]))
        assert math.isnan(to_number({}))

    def test_symbol_raises(self):
        with pytest.raises(ScriptTypeError):
            to_number(Symbol("x"))

    def test_unary_plus_rejects_bigint(self):
        assert unary_plus("42.5") == 42.5
        assert to_number(BigInt(7)) == 7
        with pytest.raises(ScriptTypeError):
            unary_plus(BigInt(7))


class TestToString:
    """Test String() conversion."""

    def test_primitives(self):
        assert to_string(None) == "null"
        assert to_string(UNDEFINED) == "undefined"
        assert to_string(True) == "true"
        assert to_string(1.0) == "1"
        assert to_string(BigInt(10)) == "10"
        assert to_string(Symbol("id")) == "Symbol(id)"

    def test_arrays_join_with_commas(self):
        assert to_string([1, [2, 3]]) == "1,2,3"
        assert to_string([1, None, UNDEFINED, 3]) == "1,,,3"

    def test_objects(self):
        assert to_string({}) == "[object Object]"
        assert to_string(Function("f")) == "function f() { [native code] }"

    def test_date(self):
        date = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert to_string(date) == "Mon Jan 01 2024 12:00:00 GMT+0000 (Coordinated Universal Time)"
        assert to_iso_string(date) == "2024-01-01T12:00:00.000Z"


class TestToBoolean:
    """Test Boolean() conversion."""

    @pytest.mark.parametrize("value", [0, -0.0, NAN, "", None, UNDEFINED, False, BigInt(0)])
    def test_falsy(self, value):
        assert to_boolean(value) is False

    @pytest.mark.parametrize("value", [42, -15, "hello", "false", "0", [], {}, Function()])
    def test_truthy(self, value):
        """Everything else is truthy, even the string "false"."""
        assert to_boolean(value) is True


class TestParsing:
    """Test parseInt and parseFloat."""

    def test_parse_float(self):
        assert parse_float("100.65") == 100.65
        assert parse_float("3.14abc") == 3.14
        assert parse_float("  -Infinityx") == -INFINITY
        assert math.isnan(parse_float("abc"))

    def test_parse_int(self):
        assert parse_int("100.99") == 100
        assert parse_int("42px") == 42
        assert parse_int("-7") == -7
        assert parse_int("0x1A") == 26
        assert math.isnan(parse_int("px42"))

    def test_parse_int_radix(self):
        assert parse_int("101", 2) == 5
        assert parse_int("ff", 16) == 255
        assert math.isnan(parse_int("10", 1))
        assert math.isnan(parse_int("10", 37))


class TestOperators:
    """Test operator coercion."""

    def test_add_concatenates_strings(self):
        assert add("5", 5) == "55"
        assert add(5, "10") == "510"
        assert add("", 789) == "789"
        assert add([1, 2], [3]) == "1,23"
        assert add({}, "") == "[object Object]"

    def test_add_numbers(self):
        assert add(5, 10) == 15
        assert add(True, 1) == 2
        assert add(False, 1) == 1
        assert add(None, 1) == 1

    def test_symbol_concatenation_raises(self):
        with pytest.raises(ScriptTypeError):
            add("id: ", Symbol("id"))

    def test_numeric_operators_convert(self):
        assert subtract("5", 5) == 0
        assert multiply("5", "2") == 10
        assert math.isnan(subtract("hello", 5))
        assert math.isnan(multiply("text", 5))

    def test_division_by_zero(self):
        assert divide(10, 0) == INFINITY
        assert divide(-10, 0) == -INFINITY
        assert math.isnan(divide(0, 0))

    def test_bigint_arithmetic(self):
        assert add(BigInt(9007199254740991), BigInt(100)) == BigInt(9007199254741091)
        assert divide(BigInt(7), BigInt(2)) == BigInt(3)
        assert divide(BigInt(-7), BigInt(2)) == BigInt(-3)

    def test_bigint_mixing_raises(self):
        with pytest.raises(ScriptTypeError) as exc_info:
            add(BigInt(1), 100)
        assert exc_info.value.describe() == (
            "TypeError: Cannot mix BigInt and other types, use explicit conversions"
        )

    def test_bigint_division_by_zero(self):
        with pytest.raises(ScriptRangeError):
            divide(BigInt(1), BigInt(0))

    def test_greater_than(self):
        assert greater_than(10, 5) is True
        assert greater_than("10", 5) is True
        assert greater_than("b", "a") is True


class TestEquality:
    """Test strict equality and NaN checks."""

    def test_strict_equals(self):
        assert strict_equals(1, 1.0)
        assert strict_equals(0, -0.0)
        assert not strict_equals(1, "1")
        assert not strict_equals(NAN, NAN)
        assert strict_equals(None, None)
        assert not strict_equals(None, UNDEFINED)
        assert strict_equals(BigInt(1), BigInt(1))

    def test_references_compare_by_identity(self):
        a = {"value": 1}
        assert strict_equals(a, a)
        assert not strict_equals(a, {"value": 1})

    def test_nan_checks(self):
        assert is_nan(NAN)
        assert is_nan("hello")
        assert not number_is_nan("hello")
        assert number_is_nan(to_number("invalid"))
        assert not is_nan("42")
