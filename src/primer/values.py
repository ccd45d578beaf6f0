"""
Dynamic Value Model

Every value a demonstration unit touches is one of a small set of kinds.
Python objects stand in for most of them directly:

    string     -> str
    number     -> int / float (never bool)
    boolean    -> bool
    null       -> None
    undefined  -> UNDEFINED (singleton)
    symbol     -> Symbol
    bigint     -> BigInt
    function   -> Function
    object     -> dict (keys: str or Symbol), list (arrays), datetime (dates)

ARCHITECTURAL RULE:
    The kind of a value is decided here and nowhere else.
    Conversion rules live in coercion, display rules in formatting.

KNOWN QUIRK (kept on purpose):
    type_of(None) is TypeTag.OBJECT
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional


class TypeTag(Enum):
    """
    Value kinds, named the way a typeof check reports them.
    """

    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    UNDEFINED = "undefined"
    SYMBOL = "symbol"
    OBJECT = "object"
    FUNCTION = "function"

    def __str__(self) -> str:
        return self.value


class _Undefined:
    """Sentinel for a declared-but-unassigned value."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNDEFINED = _Undefined()

NAN = float("nan")
INFINITY = float("inf")


@dataclass(frozen=True, eq=False)
class Symbol:
    """
    A unique identifier value.

    Two symbols are never equal unless they are the same object, even
    when their descriptions match:

        Symbol("id") is not Symbol("id")

    Properties:
        description: Optional label shown as Symbol(<description>)
    """

    description: Optional[str] = None

    def __repr__(self) -> str:
        return f"Symbol({self.description if self.description is not None else ''})"


@dataclass(frozen=True)
class BigInt:
    """
    Arbitrary precision integer, a kind distinct from number.

    Properties:
        value: The integer value
    """

    value: int

    def __repr__(self) -> str:
        return f"{self.value}n"


def _noop(*args: Any) -> Any:
    return UNDEFINED


@dataclass(eq=False)
class Function:
    """
    A callable value.

    Functions are reference values: assigning one shares it, they compare
    by identity, and they cannot be cloned structurally.

    Properties:
        name: Function name ("" for anonymous functions)
        body: Python callable invoked when the function is called
    """

    name: str = ""
    body: Callable[..., Any] = field(default=_noop, repr=False)

    def __call__(self, *args: Any) -> Any:
        result = self.body(*args)
        # A body that returns nothing returns undefined.
        return UNDEFINED if result is None else result


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_object(value: Any) -> bool:
    """True for values stored by reference (objects, arrays, dates, functions)."""
    return isinstance(value, (dict, list, datetime, Function))


def is_primitive(value: Any) -> bool:
    return not is_object(value)


def type_of(value: Any) -> TypeTag:
    """
    Report the kind of a value.

    Args:
        value: Any value of the model

    Returns:
        TypeTag for the value

    Raises:
        TypeError: If value is not part of the model
    """
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.OBJECT
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (int, float)):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, BigInt):
        return TypeTag.BIGINT
    if isinstance(value, Symbol):
        return TypeTag.SYMBOL
    if isinstance(value, Function):
        return TypeTag.FUNCTION
    if isinstance(value, (dict, list, datetime)):
        return TypeTag.OBJECT
    raise TypeError(f"Unsupported value type: {type(value)}")
