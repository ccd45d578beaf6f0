"""
Tests for the dynamic value model.

These tests verify:
    - Kind reporting, including the null quirk
    - Identity semantics of symbols and functions
    - Display of bigint values
"""

from datetime import datetime

import pytest
from primer.values import (
    NAN,
    UNDEFINED,
    BigInt,
    Function,
    Symbol,
    TypeTag,
    is_array,
    is_number,
    is_object,
    is_primitive,
    type_of,
)


class TestTypeOf:
    """Test kind reporting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("hello", TypeTag.STRING),
            (42, TypeTag.NUMBER),
            (3.14, TypeTag.NUMBER),
            (NAN, TypeTag.NUMBER),
            (True, TypeTag.BOOLEAN),
            (UNDEFINED, TypeTag.UNDEFINED),
            (Symbol("id"), TypeTag.SYMBOL),
            (BigInt(1), TypeTag.BIGINT),
            ({}, TypeTag.OBJECT),
            ([], TypeTag.OBJECT),
            (datetime(2024, 1, 1), TypeTag.OBJECT),
            (Function("f"), TypeTag.FUNCTION),
        ],
    )
    def test_kinds(self, value, expected):
        """Every supported value reports its kind."""
        assert type_of(value) is expected

    def test_null_reports_object(self):
        """The null kind quirk is preserved."""
        assert type_of(None) is TypeTag.OBJECT
        assert str(type_of(None)) == "object"

    def test_unsupported_value(self):
        """Values outside the model are rejected."""
        with pytest.raises(TypeError):
            type_of(object())


class TestPredicates:
    """Test helper predicates."""

    def test_bool_is_not_number(self):
        assert is_number(1)
        assert not is_number(True)

    def test_reference_values(self):
        assert is_object({})
        assert is_object(Function())
        assert is_array([])
        assert not is_array({})
        assert is_primitive("x")
        assert is_primitive(None)


class TestIdentity:
    """Test symbol, function and undefined semantics."""

    def test_symbols_with_same_description_differ(self):
        """Two symbols are distinct even with equal descriptions."""
        a = Symbol("id")
        b = Symbol("id")
        assert a != b
        assert a == a
        assert repr(a) == "Symbol(id)"
        assert repr(Symbol()) == "Symbol()"

    def test_symbol_usable_as_key(self):
        key = Symbol("id")
        user = {"name": "Alice", key: 12345}
        assert user[key] == 12345

    def test_bigint(self):
        assert repr(BigInt(9007199254740991)) == "9007199254740991n"
        assert BigInt(3) == BigInt(3)

    def test_function_without_return_gives_undefined(self):
        """A body that returns nothing returns undefined."""
        calls = []
        fn = Function("noReturn", lambda: calls.append(1))
        assert fn() is UNDEFINED
        assert calls == [1]
        assert Function("answer", lambda: 42)() == 42

    def test_undefined_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED
        assert not UNDEFINED
        assert repr(UNDEFINED) == "undefined"
