"""
Lesson: primitive vs reference values.

Primitives (string, number, boolean, null, undefined, symbol, bigint) are
copied by VALUE: a copy is independent of the original.

Objects, arrays and functions are copied by REFERENCE: both names point to
the same object, so a change through one name is visible through the
other. Shallow copies duplicate only the top level; deep copies duplicate
every level.
"""

from typing import Any, Dict

from primer.coercion import strict_equals
from primer.console import Console
from primer.copying import (
    assign_reference,
    json_clone,
    manual_deep_copy,
    shallow_copy,
    structured_clone,
)
from primer.model import Lesson, Unit
from primer.values import UNDEFINED, Function, Symbol


def _person() -> Dict[str, Any]:
    return {"firstName": "John", "age": 30}


def _person_renamed_through_alias() -> Dict[str, Any]:
    """The person after the copy-by-reference unit renamed it."""
    person = _person()
    alias = assign_reference(person)
    alias["firstName"] = "Jane"
    return person


def _complex_person() -> Dict[str, Any]:
    return {
        "name": "Alice",
        "age": 25,
        "address": {"city": "Wonderland", "zip": "12345"},
        "hobbies": ["reading", "coding"],
    }


def _complex_person_after_shallow_edits() -> Dict[str, Any]:
    """The complex person after the shallow copy unit edited its nested values."""
    person = _complex_person()
    copy = shallow_copy(person)
    copy["address"]["city"] = "New Wonderland"
    copy["hobbies"].append("gaming")
    return person


def primitive_values(console: Console) -> None:
    first_name = "John"
    age = 30
    console.log("=== PRIMITIVE VALUES ===")
    console.log("firstName:", first_name)
    console.log("age:", age)


def reference_values(console: Console) -> None:
    console.log("\n=== REFERENCE VALUES ===")
    console.log("person:", _person())


def copy_by_value(console: Console) -> None:
    first_name = "John"
    new_first_name = first_name
    console.log("\n=== PRIMITIVE COPY BY VALUE ===")
    console.log("Original:", first_name)
    console.log("Copy:", new_first_name)

    new_first_name = "Jane"
    console.log('\nAfter changing copy to "Jane":')
    console.log("Original:", first_name)
    console.log("Copy:", new_first_name)

    new_first_name = "Johnathan"
    console.log('\nAfter changing copy to "Johnathan":')
    console.log("Original:", first_name)
    console.log("Copy:", new_first_name)


def copy_by_reference(console: Console) -> None:
    person = _person()
    new_person = assign_reference(person)
    console.log("\n=== REFERENCE COPY BY REFERENCE ===")
    console.log("Original person:", person)
    console.log("New person:", new_person)
    console.log("Are they the same object?", strict_equals(person, new_person))

    new_person["firstName"] = "Jane"
    console.log('\nAfter changing newPerson.firstName to "Jane":')
    console.log("Original person:", person)
    console.log("New person:", new_person)
    console.log("Both changed!")


def shallow_copy_methods(console: Console) -> None:
    person = _person_renamed_through_alias()
    console.log("\n=== SHALLOW COPY METHODS ===")

    # Object.assign({}, person)
    another_person = shallow_copy(person)
    another_person["firstName"] = "Mike"
    console.log("\nUsing Object.assign():")
    console.log("Original person:", person)
    console.log("Another person:", another_person)
    console.log("Are they the same?", strict_equals(person, another_person))

    # { ...person }
    yet_another_person = shallow_copy(person)
    yet_another_person["firstName"] = "Sarah"
    console.log("\nUsing spread operator:")
    console.log("Original person:", person)
    console.log("Yet another person:", yet_another_person)


def shallow_copy_problem(console: Console) -> None:
    complex_person = _complex_person()
    console.log("\n=== SHALLOW COPY PROBLEM ===")
    console.log("Original complex person:", complex_person)

    another = shallow_copy(complex_person)
    another["name"] = "Bob"
    console.log("\nAfter changing name:")
    console.log("Original name:", complex_person["name"])
    console.log("Copy name:", another["name"])

    another["address"]["city"] = "New Wonderland"
    console.log("\nAfter changing nested address.city:")
    console.log("Original city:", complex_person["address"]["city"])
    console.log("Copy city:", another["address"]["city"])
    console.log("Both changed! Nested objects are still referenced.")

    another["hobbies"].append("gaming")
    console.log("\nAfter adding to hobbies array:")
    console.log("Original hobbies:", complex_person["hobbies"])
    console.log("Copy hobbies:", another["hobbies"])


def deep_copy_solutions(console: Console) -> None:
    complex_person = _complex_person_after_shallow_edits()
    console.log("\n=== DEEP COPY SOLUTIONS ===")

    deep_copy_person = json_clone(complex_person)
    deep_copy_person["address"]["city"] = "Deep Copy City"
    deep_copy_person["hobbies"].append("swimming")
    console.log("\nUsing JSON.parse(JSON.stringify()):")
    console.log("Original city:", complex_person["address"]["city"])
    console.log("Deep copy city:", deep_copy_person["address"]["city"])
    console.log("Original hobbies:", complex_person["hobbies"])
    console.log("Deep copy hobbies:", deep_copy_person["hobbies"])

    obj_with_function = {
        "name": "Test",
        "greet": Function("greet", lambda: "Hello"),
        "date": console.clock.now(),
        "undef": UNDEFINED,
        "sym": Symbol("test"),
    }
    json_copy = json_clone(obj_with_function)
    console.log("\nJSON copy limitations:")
    console.log("Original:", obj_with_function)
    console.log("JSON copy:", json_copy)

    structured_clone_person = structured_clone(complex_person)
    structured_clone_person["address"]["city"] = "Structured Clone City"
    structured_clone_person["hobbies"].append("painting")
    console.log("\nUsing structuredClone():")
    console.log("Original city:", complex_person["address"]["city"])
    console.log("Structured clone city:", structured_clone_person["address"]["city"])
    console.log("Original hobbies:", complex_person["hobbies"])
    console.log("Structured clone hobbies:", structured_clone_person["hobbies"])

    manual_copy = manual_deep_copy(complex_person)
    manual_copy["address"]["city"] = "Manual Copy City"
    console.log("\nUsing manual deep copy:")
    console.log("Original city:", complex_person["address"]["city"])
    console.log("Manual copy city:", manual_copy["address"]["city"])


def practical_examples(console: Console) -> None:
    users = [
        {"id": 1, "name": "Alice"},
        {"id": 2, "name": "Bob"},
    ]
    console.log("\n=== PRACTICAL EXAMPLES ===")

    users_copy = shallow_copy(users)
    users_copy[0]["name"] = "Charlie"
    console.log("\nArray of objects:")
    console.log("Original users:", users)
    console.log("Users copy:", users_copy)
    console.log("Nested objects still referenced!")

    users_deep_copy = structured_clone(users)
    users_deep_copy[0]["name"] = "David"
    console.log("\nAfter deep copy:")
    console.log("Original users:", users)
    console.log("Deep copy users:", users_deep_copy)


def function_parameters(console: Console) -> None:
    def modify_object(obj: Dict[str, Any]) -> None:
        obj["modified"] = True

    my_obj = {"value": 10}
    modify_object(my_obj)
    console.log("\nFunction parameter (reference):")
    console.log("myObj:", my_obj)

    safe_obj = {"value": 20}
    modify_object(shallow_copy(safe_obj))
    console.log("safeObj:", safe_obj)


SUMMARY = """
PRIMITIVES (Stack):
- Copied by VALUE
- Independent when assigned to new variables
- Types: String, Number, Boolean, Null, Undefined, Symbol, BigInt

REFERENCES (Heap):
- Copied by REFERENCE
- Multiple variables can point to same object
- Types: Object, Array, Function

COPYING OBJECTS:
1. Shallow copy (first level only):
   - { ...obj } or Object.assign({}, obj)
   
2. Deep copy (all levels):
   - structuredClone(obj) ✅ Best for most cases
   - JSON.parse(JSON.stringify(obj)) ⚠️ Loses functions/special types
   - Manual recursive function ⚠️ More control, more code

BEST PRACTICES:
- Use structuredClone() for deep copies (modern approach)
- Be aware of shallow vs deep copy limitations
- When passing objects to functions, consider if they should be mutated
- Use const for objects you don't want reassigned (but can still mutate properties)
"""

MEMORY_DIAGRAM = """
PRIMITIVE (Copy by Value):
Stack:
  firstName → "John"
  newFirstName → "Jane" (independent copy)

REFERENCE (Copy by Reference):
Stack:                  Heap:
  person → [0x001] →    { firstName: 'Jane', age: 30 }
  newPerson → [0x001] → (same object!)

SHALLOW COPY:
Stack:                      Heap:
  person → [0x001] →        { name: 'Alice', address: [0x002] }
  copy → [0x003] →          { name: 'Alice', address: [0x002] }
  address (shared) → [0x002] → { city: 'Wonderland' }

DEEP COPY:
Stack:                      Heap:
  person → [0x001] →        { name: 'Alice', address: [0x002] }
  deepCopy → [0x003] →      { name: 'Alice', address: [0x004] }
  (separate addresses)       (completely independent)
"""


def summary(console: Console) -> None:
    console.log("\n=== SUMMARY ===")
    console.log(SUMMARY)


def memory_visualization(console: Console) -> None:
    console.log("\n=== MEMORY VISUALIZATION ===")
    console.log(MEMORY_DIAGRAM)


LESSON = Lesson(
    name="primitive-vs-reference",
    title="Primitive vs Reference Types",
    units=[
        Unit("primitive-values", "Primitive Types", primitive_values),
        Unit("reference-values", "Reference Types", reference_values),
        Unit("copy-by-value", "Primitives: Copy by Value", copy_by_value),
        Unit("copy-by-reference", "References: Copy by Reference", copy_by_reference),
        Unit("shallow-copy-methods", "Shallow Copy Methods", shallow_copy_methods),
        Unit("shallow-copy-problem", "Shallow Copy Problem", shallow_copy_problem),
        Unit("deep-copy-solutions", "Deep Copy Solutions", deep_copy_solutions),
        Unit("practical-examples", "Practical Examples", practical_examples),
        Unit("function-parameters", "Function Parameters", function_parameters),
        Unit("summary", "Summary & Best Practices", summary),
        Unit("memory-visualization", "Visual Memory Diagram", memory_visualization),
    ],
)
