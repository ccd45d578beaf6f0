"""
Lesson: variable declarations.

let for values that change, const for bindings that must not be
reassigned, and the difference between reassigning a const binding
(rejected) and mutating the object it holds (allowed).

Naming conventions covered by the listing:
    camelCase         variables and functions    firstName, getUserData
    PascalCase        classes and components     Person, UserProfile
    UPPER_SNAKE_CASE  constants                  MAX_SIZE, API_KEY
    snake_case        less common here           first_name, user_id
"""

from contextlib import suppress

from primer.bindings import Scope
from primer.coercion import add, to_string
from primer.console import Console
from primer.errors import ScriptTypeError
from primer.model import Lesson, Unit


def basic_declarations(console: Console) -> None:
    scope = Scope()
    scope.let("firstName", "John")
    scope.let("lastName", "Doe")
    console.log(f"The first and last name is: {scope['firstName']} {scope['lastName']}")

    scope.let("age", 30)
    console.log(f"The age is {to_string(scope['age'])}.")


def reassigning_variables(console: Console) -> None:
    scope = Scope()
    scope.let("age", 30)
    scope.assign("age", 31)
    console.log(f"The age is now {to_string(scope['age'])}.")

    # Declared first, assigned later.
    scope.let("score")
    scope.assign("score", 1)
    console.log(f"The score is {to_string(scope['score'])}")

    scope.assign("score", add(scope["score"], 1))
    console.log(f"The score is now {to_string(scope['score'])}")


def constants(console: Console) -> None:
    scope = Scope()
    scope.const("PI", 3.14)
    console.log(f"The constant PI is equal to {to_string(scope['PI'])}")

    # Rejected with TypeError: Assignment to constant variable.
    with suppress(ScriptTypeError):
        scope.assign("PI", 3.14159)

    # The binding is fixed, the array it holds is not.
    arr = scope.const("arr", [1, 2, 3, 4])
    arr.append(5)
    console.log(f"The array is [{to_string(arr)}]")

    person = scope.const("person", {"name": "Brad"})
    person["name"] = "John"
    person["email"] = "john@gmail.com"
    console.log("The person object is:", person)


def multiple_declarations(console: Console) -> None:
    scope = Scope()
    for name, value in (("a", 3), ("b", 4), ("c", 45)):
        scope.let(name, value)
    console.log("Multiple values:", scope["a"], scope["b"], scope["c"])

    # Separate lines read better; nothing is printed for these.
    scope.let("x", 10)
    scope.let("y", 20)
    scope.let("z", 30)


LESSON = Lesson(
    name="variables",
    title="Variables and Constants",
    units=[
        Unit("basic-declarations", "Basic Declarations", basic_declarations),
        Unit("reassigning-variables", "Re-assigning Variables (let)", reassigning_variables),
        Unit("constants", "Constants (const)", constants),
        Unit("multiple-declarations", "Multiple Declarations", multiple_declarations),
    ],
)
