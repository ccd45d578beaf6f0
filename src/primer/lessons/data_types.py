"""
Lesson: data types.

Two categories:
    1. Primitive types (immutable, stored by value):
       string, number, boolean, null, undefined, symbol, bigint
    2. Reference types (mutable, stored by reference):
       objects, arrays, functions

Includes the documented quirks: the kind of null is "object", NaN is a
number, arrays report "object".
"""

from contextlib import suppress

from primer.coercion import (
    add,
    divide,
    greater_than,
    multiply,
    parse_float,
    parse_int,
    strict_equals,
    subtract,
    to_number,
    to_string,
)
from primer.console import Console
from primer.errors import ScriptTypeError
from primer.model import Lesson, Unit
from primer.values import UNDEFINED, BigInt, Function, Symbol, is_array, type_of


def _kind(value) -> str:
    return type_of(value).value


def strings(console: Console) -> None:
    full_name = "John Doe"
    template = f"Welcome, {full_name}!"
    console.log(full_name, _kind(full_name))
    console.log(template)


def numbers(console: Console) -> None:
    age = 30
    height = 5.9
    result = divide(10, 0)
    invalid = multiply("text", 5)
    console.log(age, _kind(age))
    console.log(height, _kind(height))
    console.log(result)
    console.log(invalid)
    # NaN is technically a number.
    console.log(_kind(invalid))


def booleans(console: Console) -> None:
    is_student = False
    has_access = greater_than(10, 5)
    console.log(is_student, _kind(is_student))
    console.log(has_access)


def null_value(console: Console) -> None:
    empty_value = None
    # Historical quirk: null reports "object".
    console.log(empty_value, _kind(empty_value))


def undefined_value(console: Console) -> None:
    not_assigned = UNDEFINED
    console.log(not_assigned, _kind(not_assigned))

    no_return = Function("noReturn")
    console.log(no_return())

    my_object = Function("myObject", lambda: {})
    console.log(my_object, _kind(my_object))


def symbols(console: Console) -> None:
    unique_id1 = Symbol("id")
    unique_id2 = Symbol("id")
    console.log(unique_id1, _kind(unique_id1))
    console.log(strict_equals(unique_id1, unique_id2))

    ID = Symbol("id")
    user = {"name": "Alice", ID: 12345}
    console.log(user[ID])


def bigints(console: Console) -> None:
    big_number1 = BigInt(9007199254740991)
    huge_number = BigInt(12345678901234567890)
    console.log(big_number1, _kind(big_number1))
    console.log(huge_number)

    # Mixing kinds is rejected; both operands must be bigints.
    with suppress(ScriptTypeError):
        add(big_number1, 100)
    console.log(add(big_number1, BigInt(100)))


def objects(console: Console) -> None:
    person = {
        "fullName": "Jane Doe",
        "age": 25,
        "isStudent": True,
        "address": {
            "city": "New York",
            "zip": "10001",
        },
    }
    console.log(person, _kind(person))
    console.log(person["fullName"])

    person1 = {"name": "Alice"}
    person2 = person1
    person2["name"] = "Bob"
    console.log(person1["name"])


def arrays(console: Console) -> None:
    colors = ["red", "green", "blue"]
    console.log(colors, _kind(colors))
    console.log(is_array(colors))
    console.log(colors[0])
    console.log(len(colors))


def functions(console: Console) -> None:
    greet = Function("greet", lambda: console.log("Hello, World!"))
    say_hi = Function("sayHi", lambda: console.log("Hi there!"))
    console.log(greet, _kind(greet))
    console.log(_kind(say_hi))

    def execute_function(fn: Function) -> None:
        fn()

    execute_function(greet)


def checking_types(console: Console) -> None:
    samples = [
        "hello",
        42,
        True,
        UNDEFINED,
        Symbol(),
        BigInt(123),
        {},
        [],
        None,
        Function(),
    ]
    for value in samples:
        console.log(_kind(value))

    console.log(is_array([]))
    console.log(isinstance([], list))
    console.log(strict_equals(None, None))


def dynamic_typing(console: Console) -> None:
    dynamic_var = "I'm a string"
    console.log(_kind(dynamic_var))
    dynamic_var = 42
    console.log(_kind(dynamic_var))
    dynamic_var = True
    console.log(_kind(dynamic_var))

    console.log(add(5, 10))
    console.log(add("5", "10"))
    console.log(add(5, "10"))


def primitive_vs_reference(console: Console) -> None:
    a = 10
    b = a
    b = 20
    console.log(a)
    console.log(b)

    obj1 = {"value": 10}
    obj2 = obj1
    obj2["value"] = 20
    console.log(obj1["value"])
    console.log(obj2["value"])


def type_coercion(console: Console) -> None:
    console.log(add("5", 5))
    console.log(subtract("5", 5))
    console.log(multiply("5", "2"))
    console.log(add(True, 1))
    console.log(add(False, 1))
    console.log(subtract("hello", 5))

    # Explicit conversion avoids surprises.
    console.log(add(to_number("5"), 5))
    console.log(add(to_string(5), to_string(5)))
    console.log(parse_int("42px"))
    console.log(parse_float("3.14"))


LESSON = Lesson(
    name="data-types",
    title="Data Types",
    units=[
        Unit("string", "String", strings),
        Unit("number", "Number", numbers),
        Unit("boolean", "Boolean", booleans),
        Unit("null", "Null", null_value),
        Unit("undefined", "Undefined", undefined_value),
        Unit("symbol", "Symbol", symbols),
        Unit("bigint", "BigInt", bigints),
        Unit("object", "Object", objects),
        Unit("array", "Array", arrays),
        Unit("function", "Function", functions),
        Unit("checking-types", "Checking Data Types", checking_types),
        Unit("dynamic-typing", "Dynamic Typing vs Static Typing", dynamic_typing),
        Unit("primitive-vs-reference", "Primitive vs Reference", primitive_vs_reference),
        Unit("type-coercion", "Type Coercion", type_coercion),
    ],
)
