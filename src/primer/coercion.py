"""
Type conversion rules and the operators built on them.

Conversion table (explicit conversions):

    value          to_number   to_string         to_boolean
    -----------    ---------   ---------------   ----------
    undefined      NaN         "undefined"       False
    null           0           "null"            False
    True / False   1 / 0       "true" / "false"  itself
    ""             0           ""                False
    "hello"        NaN         "hello"           True
    "false"        NaN         "false"           True
    0, -0, NaN     itself      "0", "0", "NaN"   False
    [1, 2]         NaN         "1,2"             True
    {}             NaN         "[object Object]" True

Numbers are IEEE doubles: results are returned as float and printed with
format_number, which drops a trailing ".0" and prints NaN / Infinity.
"""

import math
import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional, Set, Tuple

from primer.errors import ScriptRangeError, ScriptTypeError
from primer.values import (
    INFINITY,
    NAN,
    UNDEFINED,
    BigInt,
    Function,
    Symbol,
    is_number,
    type_of,
)


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


# =========================================================================
# NUMBER FORMATTING
# =========================================================================

def _shortest_digits(x: float) -> Tuple[str, int]:
    """
    Shortest round-trip decimal digits of a positive finite float.

    Returns (digits, n) such that x == 0.<digits> * 10**n.
    """
    _, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, exponent + len(stripped)


def format_number(value: Any) -> str:
    """
    Render a number the way string conversion does.

    Examples:
        100.0   -> "100"
        100.65  -> "100.65"
        -0.0    -> "0"
        1e21    -> "1e+21"
        1e-7    -> "1e-7"
    """
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if x == 0:
        return "0"
    if x < 0:
        return "-" + format_number(-x)
    if math.isinf(x):
        return "Infinity"

    digits, n = _shortest_digits(x)
    k = len(digits)
    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * (-n) + digits

    exponent = n - 1
    sign = "+" if exponent >= 0 else "-"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(exponent)}"


def _format_date(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value:%a %b %d %Y %H:%M:%S} GMT+0000 (Coordinated Universal Time)"


# =========================================================================
# EXPLICIT CONVERSIONS
# =========================================================================

def to_string(value: Any, _seen: Optional[Set[int]] = None) -> str:
    """
    Explicit string conversion (String(value)).

    Symbols convert to their description form here; implicit conversion
    (concatenation) of a symbol raises instead, see add().
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, BigInt):
        return str(value.value)
    if isinstance(value, Symbol):
        return repr(value)
    if isinstance(value, list):
        seen = _seen if _seen is not None else set()
        if id(value) in seen:
            return ""
        seen.add(id(value))
        parts = [
            "" if item is None or item is UNDEFINED else to_string(item, seen)
            for item in value
        ]
        seen.discard(id(value))
        return ",".join(parts)
    if isinstance(value, dict):
        return "[object Object]"
    if isinstance(value, Function):
        return f"function {value.name}() {{ [native code] }}"
    if isinstance(value, datetime):
        return _format_date(value)
    raise TypeError(f"Unsupported value type: {type(value)}")


def _string_to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return INFINITY
    if text == "-Infinity":
        return -INFINITY

    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        body = text[2:].lower()
        if body and all(ch in _DIGITS[:radix] for ch in body):
            return float(int(body, radix))
        return NAN

    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return NAN


def to_primitive(value: Any) -> Any:
    """Reduce a reference value to a primitive (string form for objects)."""
    if isinstance(value, (dict, list, Function, datetime)):
        return to_string(value)
    return value


def to_number(value: Any) -> float:
    """
    General numeric conversion (Number(value)).

    Raises:
        ScriptTypeError: For symbols
    """
    if value is UNDEFINED:
        return NAN
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if is_number(value):
        return float(value)
    if isinstance(value, str):
        return _string_to_number(value)
    if isinstance(value, BigInt):
        return float(value.value)
    if isinstance(value, Symbol):
        raise ScriptTypeError("Cannot convert a Symbol value to a number")
    if isinstance(value, datetime):
        return value.timestamp() * 1000.0
    return _string_to_number(to_primitive(value))


def unary_plus(value: Any) -> float:
    """Unary plus conversion; unlike to_number it rejects bigint."""
    if isinstance(value, BigInt):
        raise ScriptTypeError("Cannot convert a BigInt value to a number")
    return to_number(value)


def to_boolean(value: Any) -> bool:
    """
    Logical conversion (Boolean(value)).

    Falsy values: False, 0, -0, NaN, "", null, undefined, 0n.
    Everything else is truthy, including the string "false".
    """
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, bool):
        return value
    if is_number(value):
        return not (value == 0 or math.isnan(value))
    if isinstance(value, str):
        return value != ""
    if isinstance(value, BigInt):
        return value.value != 0
    return True


def parse_float(value: Any) -> float:
    """
    Float-parsing conversion: reads the longest numeric prefix.

    Examples:
        "100.65"  -> 100.65
        "3.14abc" -> 3.14
        "abc"     -> NaN
    """
    text = to_string(value).lstrip()
    match = _FLOAT_PREFIX_RE.match(text)
    if not match:
        return NAN
    token = match.group(0)
    if token.endswith("Infinity"):
        return -INFINITY if token.startswith("-") else INFINITY
    return float(token)


def parse_int(value: Any, radix: Any = None) -> float:
    """
    Integer-parsing conversion: reads the longest run of digits.

    Examples:
        "100.99" -> 100
        "42px"   -> 42
        "0x1A"   -> 26
        "px42"   -> NaN

    Args:
        value: Value to parse (converted to string first)
        radix: Optional base 2..36; None means 10 (or 16 with an 0x prefix)
    """
    text = to_string(value).lstrip()
    sign = 1
    if text.startswith(("+", "-")):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    if radix is None or radix is UNDEFINED:
        base = 0
    else:
        number = to_number(radix)
        base = 0 if math.isnan(number) or math.isinf(number) else int(number)
    if base != 0 and not 2 <= base <= 36:
        return NAN

    if base in (0, 16) and text[:2].lower() == "0x":
        text = text[2:]
        base = 16
    if base == 0:
        base = 10

    valid = _DIGITS[:base]
    end = 0
    while end < len(text) and text[end].lower() in valid:
        end += 1
    if end == 0:
        return NAN
    return float(sign * int(text[:end], base))


# =========================================================================
# OPERATORS
# =========================================================================

def _to_numeric(value: Any) -> Any:
    primitive = to_primitive(value)
    if isinstance(primitive, BigInt):
        return primitive
    return to_number(primitive)


def _implicit_string(value: Any) -> str:
    if isinstance(value, Symbol):
        raise ScriptTypeError("Cannot convert a Symbol value to a string")
    return to_string(value)


def _arithmetic(left: Any, right: Any, number_op, bigint_op) -> Any:
    left, right = _to_numeric(left), _to_numeric(right)
    if isinstance(left, BigInt) and isinstance(right, BigInt):
        return BigInt(bigint_op(left.value, right.value))
    if isinstance(left, BigInt) or isinstance(right, BigInt):
        raise ScriptTypeError("Cannot mix BigInt and other types, use explicit conversions")
    return number_op(left, right)


def _divide_numbers(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return NAN
        return INFINITY if math.copysign(1, a) == math.copysign(1, b) else -INFINITY
    return a / b


def _divide_bigints(a: int, b: int) -> int:
    if b == 0:
        raise ScriptRangeError("Division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def add(left: Any, right: Any) -> Any:
    """
    The + operator.

    If either side is (or reduces to) a string the result is a
    concatenation, otherwise both sides are added as numbers:

        add("5", 5)   -> "55"
        add(5, "10")  -> "510"
        add(True, 1)  -> 2.0
    """
    left, right = to_primitive(left), to_primitive(right)
    if isinstance(left, str) or isinstance(right, str):
        return _implicit_string(left) + _implicit_string(right)
    return _arithmetic(left, right, lambda a, b: a + b, lambda a, b: a + b)


def subtract(left: Any, right: Any) -> Any:
    return _arithmetic(left, right, lambda a, b: a - b, lambda a, b: a - b)


def multiply(left: Any, right: Any) -> Any:
    return _arithmetic(left, right, lambda a, b: a * b, lambda a, b: a * b)


def divide(left: Any, right: Any) -> Any:
    return _arithmetic(left, right, _divide_numbers, _divide_bigints)


def greater_than(left: Any, right: Any) -> bool:
    left, right = to_primitive(left), to_primitive(right)
    if isinstance(left, str) and isinstance(right, str):
        return left > right
    a, b = to_number(left), to_number(right)
    return a > b


def strict_equals(left: Any, right: Any) -> bool:
    """
    Strict equality (===).

    Different kinds are never equal, NaN is never equal to itself,
    0 equals -0, and reference values compare by identity.
    """
    if type_of(left) is not type_of(right):
        return False
    if left is None or right is None:
        return left is right
    if is_number(left):
        return left == right
    if isinstance(left, (str, bool, BigInt)):
        return left == right
    return left is right


def is_nan(value: Any) -> bool:
    """Coercing NaN check (global isNaN): converts to number first."""
    return math.isnan(to_number(value))


def number_is_nan(value: Any) -> bool:
    """Non-coercing NaN check (Number.isNaN): only a NaN number qualifies."""
    return is_number(value) and math.isnan(value)


def to_iso_string(value: datetime) -> str:
    """Render a date as an ISO-8601 UTC timestamp with milliseconds."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"
