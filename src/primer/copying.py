"""
Copy strategies for reference values.

    assign_reference   both names share ONE object
    shallow_copy       new top level, nested objects still shared
    json_clone         deep, but lossy (functions, undefined, symbols dropped)
    structured_clone   deep, keeps shared references and cycles, rejects functions
    manual_deep_copy   deep, recursive walk over arrays and string-keyed objects

Primitives are always copied by value, so every strategy returns a
primitive unchanged.
"""

import json
import math
from datetime import datetime
from typing import Any, Dict, Optional

from primer.coercion import to_iso_string, to_string
from primer.errors import DataCloneError, ScriptSyntaxError, ScriptTypeError
from primer.values import UNDEFINED, BigInt, Function, Symbol, TypeTag, type_of


_SKIPPED_BY_JSON = (Function, Symbol)


def assign_reference(value: Any) -> Any:
    """Plain assignment: the result IS the original object."""
    return value


def shallow_copy(value: Any) -> Any:
    """
    Copy only the top level ({ ...obj }, [...arr], Object.assign({}, obj)).

    Nested dicts and lists are shared between the original and the copy.
    """
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list):
        return list(value)
    return value


# =========================================================================
# JSON ROUND TRIP
# =========================================================================

def _json_ready(value: Any, stack: list) -> Any:
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        # Whole numbers serialize without a fraction: 2.0 -> 2
        if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value
    if isinstance(value, BigInt):
        raise ScriptTypeError("Do not know how to serialize a BigInt")
    if isinstance(value, datetime):
        return to_iso_string(value)
    if any(item is value for item in stack):
        raise ScriptTypeError("Converting circular structure to JSON")

    if isinstance(value, list):
        stack.append(value)
        ready = [
            None if item is UNDEFINED or isinstance(item, _SKIPPED_BY_JSON)
            else _json_ready(item, stack)
            for item in value
        ]
        stack.pop()
        return ready

    if isinstance(value, dict):
        stack.append(value)
        ready = {}
        for key, item in value.items():
            if not isinstance(key, str):
                continue
            if item is UNDEFINED or isinstance(item, _SKIPPED_BY_JSON):
                continue
            ready[key] = _json_ready(item, stack)
        stack.pop()
        return ready

    raise TypeError(f"Unsupported value type: {type(value)}")


def to_json(value: Any) -> Optional[str]:
    """
    Serialize like JSON.stringify.

    Returns None (nothing serialized) for undefined, functions and symbols
    at the top level.
    """
    if value is UNDEFINED or isinstance(value, _SKIPPED_BY_JSON):
        return None
    return json.dumps(_json_ready(value, []), separators=(",", ":"), ensure_ascii=False)


def json_clone(value: Any) -> Any:
    """
    Deep copy through a JSON round trip (JSON.parse(JSON.stringify(x))).

    Lossy on purpose:
        - functions, undefined and symbol-valued properties disappear
        - dates become ISO strings
        - NaN / Infinity become null

    Raises:
        ScriptTypeError: For bigint values or circular structures
        ScriptSyntaxError: If nothing could be serialized
    """
    text = to_json(value)
    if text is None:
        raise ScriptSyntaxError('"undefined" is not valid JSON')
    return json.loads(text)


# =========================================================================
# STRUCTURED CLONE
# =========================================================================

def structured_clone(value: Any, _memo: Optional[Dict[int, Any]] = None) -> Any:
    """
    Deep copy that preserves internal sharing and cycles.

    Raises:
        DataCloneError: For functions and symbols
    """
    if isinstance(value, (Function, Symbol)):
        raise DataCloneError(f"{to_string(value)} could not be cloned.")
    if not isinstance(value, (dict, list)):
        # Primitives, bigint and (immutable) dates.
        return value

    memo = _memo if _memo is not None else {}
    if id(value) in memo:
        return memo[id(value)]

    if isinstance(value, list):
        copy = []
        memo[id(value)] = copy
        copy.extend(structured_clone(item, memo) for item in value)
        return copy

    copy = {}
    memo[id(value)] = copy
    for key, item in value.items():
        if isinstance(key, Symbol):
            continue
        copy[key] = structured_clone(item, memo)
    return copy


# =========================================================================
# MANUAL DEEP COPY
# =========================================================================

def manual_deep_copy(obj: Any) -> Any:
    """
    Recursive copy written by hand.

    Anything whose kind is not "object" (primitives AND functions) is
    returned as-is; arrays are mapped; every other object is rebuilt from
    its own string keys. Dates have no own keys, so they come back as {}.
    """
    if obj is None or type_of(obj) is not TypeTag.OBJECT:
        return obj
    if isinstance(obj, list):
        return [manual_deep_copy(item) for item in obj]
    copy = {}
    if isinstance(obj, dict):
        for key, item in obj.items():
            if isinstance(key, str):
                copy[key] = manual_deep_copy(item)
    return copy
