"""
Lesson: type conversion.

Every conversion below is printed as "<result> (<kind>)" so the learner
sees both the value and the kind it ended up as.
"""

from typing import Any

from primer.coercion import (
    add,
    is_nan,
    number_is_nan,
    parse_float,
    parse_int,
    strict_equals,
    to_boolean,
    to_number,
    to_string,
    unary_plus,
)
from primer.console import Console
from primer.model import Lesson, Unit
from primer.values import NAN, UNDEFINED, type_of


def _kind(value: Any) -> str:
    return type_of(value).value


def _show(value: Any) -> str:
    return f"{to_string(value)} ({_kind(value)})"


def _show_quoted(value: Any) -> str:
    return f'"{to_string(value)}" ({_kind(value)})'


def string_to_number(console: Console) -> None:
    console.log("=== STRING TO NUMBER CONVERSIONS ===\n")

    amount = "100.65"
    console.log(f"Original: {_show_quoted(amount)}")
    amount = parse_float(amount)
    console.log(f"parseFloat(): {_show(amount)}")
    console.log("✓ Use parseFloat() when you need decimal precision\n")

    amount = "100.99"
    console.log(f"Original: {_show_quoted(amount)}")
    amount = parse_int(amount)
    console.log(f"parseInt(): {_show(amount)}")
    console.log("✓ Use parseInt() when you only need whole numbers\n")

    amount = "250.75"
    console.log(f"Original: {_show_quoted(amount)}")
    amount = to_number(amount)
    console.log(f"Number(): {_show(amount)}")
    console.log("✓ Use Number() for general-purpose conversion\n")

    amount = "42.5"
    console.log(f"Original: {_show_quoted(amount)}")
    amount = unary_plus(amount)
    console.log(f"Unary +: {_show(amount)}")
    console.log("✓ Use + operator for concise conversion\n")

    console.log("--- Edge Case: Non-numeric String ---")
    amount = "hello"
    console.log(f"Original: {_show_quoted(amount)}")
    amount = to_number(amount)
    console.log(f'Number("hello"): {_show(amount)}')
    console.log("⚠️ Non-numeric strings convert to NaN (Not a Number)\n")


def number_to_string(console: Console) -> None:
    console.log("\n=== NUMBER TO STRING CONVERSIONS ===\n")

    conversions = [
        (123, "toString()", "✓ Use .toString() for explicit, readable conversion\n"),
        (456, "String()", "✓ Use String() when you need to handle null/undefined safely\n"),
        (789, "'' + number", "✓ Use concatenation for quick inline conversion\n"),
        (999, "Template literal", "✓ Use template literals for readable string embedding\n"),
    ]
    for amount, method, tip in conversions:
        console.log(f"Original: {_show(amount)}")
        if method == "'' + number":
            converted = add("", amount)
        else:
            converted = to_string(amount)
        console.log(f"{method}: {_show_quoted(converted)}")
        console.log(tip)


def _show_boolean(console: Console, value: Any, call: str, quoted: bool = False) -> None:
    original = _show_quoted(value) if quoted else _show(value)
    converted = to_boolean(value)
    console.log(f"Original: {original}")
    console.log(f"{call}: {_show(converted)}")


def number_to_boolean(console: Console) -> None:
    console.log("\n=== NUMBER TO BOOLEAN CONVERSIONS ===\n")

    _show_boolean(console, 0, "Boolean(0)")
    console.log("⚠️ Zero converts to false (falsy value)\n")

    _show_boolean(console, -0.0, "Boolean(-0)")
    console.log("⚠️ Negative zero also converts to false\n")

    _show_boolean(console, NAN, "Boolean(NaN)")
    console.log("⚠️ NaN converts to false\n")

    _show_boolean(console, 42, "Boolean(42)")
    console.log("✓ Positive numbers convert to true\n")

    _show_boolean(console, -15, "Boolean(-15)")
    console.log("✓ Negative numbers (except -0) convert to true\n")


def string_to_boolean(console: Console) -> None:
    console.log("\n=== STRING TO BOOLEAN CONVERSIONS ===\n")

    _show_boolean(console, "", 'Boolean("")', quoted=True)
    console.log("⚠️ Empty string converts to false\n")

    _show_boolean(console, "hello", 'Boolean("hello")', quoted=True)
    console.log("✓ Non-empty strings convert to true\n")

    _show_boolean(console, "false", 'Boolean("false")', quoted=True)
    console.log('⚠️ Even the string "false" converts to true!\n')


def boolean_to_other_types(console: Console) -> None:
    console.log("\n=== BOOLEAN TO OTHER TYPES ===\n")

    console.log(f"Original: {_show(True)}")
    console.log(f"Number(true): {_show(to_number(True))}")
    console.log("✓ true converts to 1\n")

    console.log(f"Original: {_show(False)}")
    console.log(f"Number(false): {_show(to_number(False))}")
    console.log("✓ false converts to 0\n")

    console.log(f"String(true): {_show_quoted(to_string(True))}")
    console.log(f"String(false): {_show_quoted(to_string(False))}")
    console.log("✓ Booleans convert to their string representations\n")


def special_values(console: Console) -> None:
    console.log("\n=== SPECIAL VALUES ===\n")
    console.log(f"Number(null): {to_string(to_number(None))} (converts to 0)")
    console.log(f"Number(undefined): {to_string(to_number(UNDEFINED))} (converts to NaN)")
    console.log(f"Boolean(null): {to_string(to_boolean(None))} (falsy)")
    console.log(f"Boolean(undefined): {to_string(to_boolean(UNDEFINED))} (falsy)")
    console.log(f'String(null): "{to_string(None)}"')
    console.log(f'String(undefined): "{to_string(UNDEFINED)}"\n')


def checking_for_nan(console: Console) -> None:
    console.log("\n=== PRACTICAL TIP: Checking for NaN ===\n")
    result = to_number("invalid")
    console.log(f"Number('invalid'): {to_string(result)}")
    console.log(
        f"result === NaN: {to_string(strict_equals(result, NAN))} (❌ This doesn't work!)"
    )
    console.log(f"isNaN(result): {to_string(is_nan(result))} (✓ Use isNaN() instead)")
    console.log(
        f"Number.isNaN(result): {to_string(number_is_nan(result))} (✓ More reliable)\n"
    )


def quick_reference(console: Console) -> None:
    console.log("\n=== QUICK REFERENCE ===\n")
    console.log("String → Number:")
    console.log(f'  • parseFloat("10.5") → {to_string(parse_float("10.5"))}')
    console.log(f'  • parseInt("10.5") → {to_string(parse_int("10.5"))}')
    console.log(f'  • Number("10.5") → {to_string(to_number("10.5"))}')
    console.log(f'  • +"10.5" → {to_string(unary_plus("10.5"))}\n')

    console.log("Number → String:")
    console.log(f'  • (100).toString() → "{to_string(100)}"')
    console.log(f'  • String(100) → "{to_string(100)}"')
    console.log(f'  • "" + 100 → "{add("", 100)}"')
    console.log(f'  • `${{100}}` → "{to_string(100)}"\n')

    console.log("To Boolean (Falsy values):")
    console.log('  • 0, -0, NaN, "", null, undefined → false')
    console.log("  • Everything else → true\n")

    console.log("From Boolean:")
    console.log(f"  • Number(true) → {to_string(to_number(True))}")
    console.log(f"  • Number(false) → {to_string(to_number(False))}")
    console.log(f'  • String(true) → "{to_string(True)}"')


LESSON = Lesson(
    name="type-conversion",
    title="Type Conversion",
    units=[
        Unit("string-to-number", "String to Number Conversions", string_to_number),
        Unit("number-to-string", "Number to String Conversions", number_to_string),
        Unit("number-to-boolean", "Number to Boolean Conversions", number_to_boolean),
        Unit("string-to-boolean", "String to Boolean Conversions", string_to_boolean),
        Unit("boolean-to-other-types", "Boolean to Other Types", boolean_to_other_types),
        Unit("special-values", "Special Values", special_values),
        Unit("checking-for-nan", "Practical Tip: Checking for NaN", checking_for_nan),
        Unit("quick-reference", "Quick Reference", quick_reference),
    ],
)
