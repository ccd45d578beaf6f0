"""
Tests for the lesson catalog and the transcripts each lesson produces.

Transcripts are produced with a FixedClock, so every line is exact except
timer payloads, which are only checked for presence and sign.

The full plain render is also compared with tests/data/reference_transcript.txt,
with timer payloads and dates masked.
"""

import re
from pathlib import Path

import pytest
from primer.backends import render_transcript
from primer.clock import FixedClock
from primer.console import Console, RecordLevel
from primer.lessons import LESSONS, UnknownLessonError, get_lesson, select_lessons
from primer.runner import run_lessons


@pytest.fixture(scope="module")
def transcript():
    return run_lessons(LESSONS, Console(clock=FixedClock(step_ms=0.25)))


def texts(transcript, unit):
    return [r.text for r in transcript.for_unit(unit) if r.level is RecordLevel.LOG]


REFERENCE = Path(__file__).parent / "data" / "reference_transcript.txt"


def mask(text):
    text = re.sub(r"^Loop Timer: .*$", "Loop Timer: <elapsed>", text, flags=re.MULTILINE)
    return re.sub(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", "<date>", text)


class TestCatalog:
    """Test lesson lookup."""

    def test_catalog_order(self):
        assert [lesson.name for lesson in LESSONS] == [
            "console",
            "variables",
            "primitive-vs-reference",
            "type-conversion",
            "data-types",
        ]

    def test_select_keeps_catalog_order(self):
        selected = select_lessons(["variables", "console"])
        assert [lesson.name for lesson in selected] == ["console", "variables"]
        assert select_lessons([]) == LESSONS

    def test_unknown_lesson(self):
        with pytest.raises(UnknownLessonError) as exc_info:
            get_lesson("nope")
        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value).startswith("Unknown lesson 'nope'")

    def test_every_unit_emits(self, transcript):
        expected = [lesson.qualified_name(unit) for lesson in LESSONS for unit in lesson.units]
        assert transcript.units() == expected


class TestConsoleLesson:
    """Test the console output lesson."""

    def test_basic_logging(self, transcript):
        assert texts(transcript, "console/basic-logging") == [
            "100",
            "Hello from script.js",
            "Values: 20 hello true 100",
        ]

    def test_alert_levels(self, transcript):
        records = transcript.for_unit("console/alert-levels")
        assert [r.level for r in records] == [RecordLevel.LOG, RecordLevel.WARN, RecordLevel.ERROR]
        assert records[1].text == "Warning: API response slow"

    def test_visualizing_data(self, transcript):
        records = transcript.for_unit("console/visualizing-data")
        assert records[0].text == "{ name: 'Brad', email: 'example@gmail.com', role: 'Admin' }"
        assert records[1].level is RecordLevel.TABLE
        assert records[1].table.columns == ["name", "email"]
        assert len(records[1].table.rows) == 3
        assert "│ 0       │ 'Brad'  │ 'brad@gmail.com'  │" in records[1].text.splitlines()

    def test_grouping_logs(self, transcript):
        records = transcript.for_unit("console/grouping-logs")
        assert records[0].level is RecordLevel.GROUP
        assert records[0].collapsed
        assert records[0].label == "Server Connection Steps"
        assert [(r.text, r.depth) for r in records[1:4]] == [
            ("Step 1: Connecting...", 1),
            ("Step 2: Authenticating...", 1),
            ("Step 3: Connected!", 1),
        ]
        assert records[4].level is RecordLevel.GROUP_END

    def test_custom_styling(self, transcript):
        (record,) = transcript.for_unit("console/custom-styling")
        assert record.text == "Hello World!"
        style = record.spans[0].style
        assert (style.color, style.background_color) == ("#bada55", "#222")
        assert (style.padding, style.font_size) == ("10px", "16px")

    def test_performance_timing(self, transcript):
        records = transcript.for_unit("console/performance-timing")
        timer = [r for r in records if r.level is RecordLevel.TIME_END]
        assert len(timer) == 1
        assert timer[0].label == "Loop Timer"
        assert timer[0].elapsed_ms >= 0
        assert timer[0].text.startswith("Loop Timer: ")
        assert records[-1].text == "The sum of the numbers of 0 to 999 is: 499500"


class TestVariablesLesson:
    """Test the declarations lesson."""

    def test_declarations(self, transcript):
        assert texts(transcript, "variables/basic-declarations") == [
            "The first and last name is: John Doe",
            "The age is 30.",
        ]
        assert texts(transcript, "variables/reassigning-variables") == [
            "The age is now 31.",
            "The score is 1",
            "The score is now 2",
        ]

    def test_constants(self, transcript):
        assert texts(transcript, "variables/constants") == [
            "The constant PI is equal to 3.14",
            "The array is [1,2,3,4,5]",
            "The person object is: { name: 'John', email: 'john@gmail.com' }",
        ]

    def test_multiple_declarations(self, transcript):
        assert texts(transcript, "variables/multiple-declarations") == ["Multiple values: 3 4 45"]


class TestPrimitiveVsReferenceLesson:
    """Test the value vs reference lesson."""

    def test_reference_values(self, transcript):
        assert texts(transcript, "primitive-vs-reference/reference-values") == [
            "\n=== REFERENCE VALUES ===",
            "person: { firstName: 'John', age: 30 }",
        ]

    def test_copy_by_reference(self, transcript):
        lines = texts(transcript, "primitive-vs-reference/copy-by-reference")
        assert "Are they the same object? true" in lines
        assert lines[-3:] == [
            "Original person: { firstName: 'Jane', age: 30 }",
            "New person: { firstName: 'Jane', age: 30 }",
            "Both changed!",
        ]

    def test_shallow_copy_methods(self, transcript):
        lines = texts(transcript, "primitive-vs-reference/shallow-copy-methods")
        assert lines[2:5] == [
            "Original person: { firstName: 'Jane', age: 30 }",
            "Another person: { firstName: 'Mike', age: 30 }",
            "Are they the same? false",
        ]

    def test_shallow_copy_problem(self, transcript):
        lines = texts(transcript, "primitive-vs-reference/shallow-copy-problem")
        assert lines[1] == (
            "Original complex person: {\n"
            "  name: 'Alice',\n"
            "  age: 25,\n"
            "  address: { city: 'Wonderland', zip: '12345' },\n"
            "  hobbies: [ 'reading', 'coding' ]\n"
            "}"
        )
        assert "Original name: Alice" in lines
        assert "Original city: New Wonderland" in lines
        assert "Original hobbies: [ 'reading', 'coding', 'gaming' ]" in lines

    def test_deep_copy_solutions(self, transcript):
        lines = texts(transcript, "primitive-vs-reference/deep-copy-solutions")
        assert lines[2:6] == [
            "Original city: New Wonderland",
            "Deep copy city: Deep Copy City",
            "Original hobbies: [ 'reading', 'coding', 'gaming' ]",
            "Deep copy hobbies: [ 'reading', 'coding', 'gaming', 'swimming' ]",
        ]
        assert (
            "Original: {\n"
            "  name: 'Test',\n"
            "  greet: [Function: greet],\n"
            "  date: 2024-01-01T12:00:00.000Z,\n"
            "  undef: undefined,\n"
            "  sym: Symbol(test)\n"
            "}"
        ) in lines
        assert "JSON copy: { name: 'Test', date: '2024-01-01T12:00:00.000Z' }" in lines
        assert "Structured clone city: Structured Clone City" in lines
        assert "Manual copy city: Manual Copy City" in lines
        assert lines.count("Original city: New Wonderland") == 3

    def test_practical_examples(self, transcript):
        lines = texts(transcript, "primitive-vs-reference/practical-examples")
        assert "Original users: [ { id: 1, name: 'Charlie' }, { id: 2, name: 'Bob' } ]" in lines
        assert lines[-1] == "Deep copy users: [ { id: 1, name: 'David' }, { id: 2, name: 'Bob' } ]"

    def test_function_parameters(self, transcript):
        assert texts(transcript, "primitive-vs-reference/function-parameters") == [
            "\nFunction parameter (reference):",
            "myObj: { value: 10, modified: true }",
            "safeObj: { value: 20 }",
        ]


class TestTypeConversionLesson:
    """Test the type conversion lesson."""

    def test_string_to_number(self, transcript):
        lines = texts(transcript, "type-conversion/string-to-number")
        assert lines[0] == "=== STRING TO NUMBER CONVERSIONS ===\n"
        assert 'Original: "100.65" (string)' in lines
        assert "parseFloat(): 100.65 (number)" in lines
        assert "parseInt(): 100 (number)" in lines
        assert "Number(): 250.75 (number)" in lines
        assert "Unary +: 42.5 (number)" in lines
        assert 'Number("hello"): NaN (number)' in lines

    def test_number_to_string(self, transcript):
        lines = texts(transcript, "type-conversion/number-to-string")
        assert "toString(): \"123\" (string)" in lines
        assert "'' + number: \"789\" (string)" in lines

    def test_booleans(self, transcript):
        number_lines = texts(transcript, "type-conversion/number-to-boolean")
        assert "Boolean(0): false (boolean)" in number_lines
        assert "Boolean(NaN): false (boolean)" in number_lines
        assert "Boolean(-15): true (boolean)" in number_lines
        string_lines = texts(transcript, "type-conversion/string-to-boolean")
        assert 'Boolean("false"): true (boolean)' in string_lines
        assert 'Boolean(""): false (boolean)' in string_lines

    def test_special_values(self, transcript):
        assert texts(transcript, "type-conversion/special-values")[1:] == [
            "Number(null): 0 (converts to 0)",
            "Number(undefined): NaN (converts to NaN)",
            "Boolean(null): false (falsy)",
            "Boolean(undefined): false (falsy)",
            'String(null): "null"',
            'String(undefined): "undefined"\n',
        ]

    def test_checking_for_nan(self, transcript):
        lines = texts(transcript, "type-conversion/checking-for-nan")
        assert "result === NaN: false (❌ This doesn't work!)" in lines
        assert "isNaN(result): true (✓ Use isNaN() instead)" in lines

    def test_quick_reference(self, transcript):
        lines = texts(transcript, "type-conversion/quick-reference")
        assert '  • parseInt("10.5") → 10' in lines
        assert '  • `${100}` → "100"\n' in lines
        assert lines[-1] == '  • String(true) → "true"'


class TestDataTypesLesson:
    """Test the data types lesson."""

    @pytest.mark.parametrize(
        "unit, expected",
        [
            ("string", ["John Doe string", "Welcome, John Doe!"]),
            ("number", ["30 number", "5.9 number", "Infinity", "NaN", "number"]),
            ("boolean", ["false boolean", "true"]),
            ("null", ["null object"]),
            ("undefined", ["undefined undefined", "undefined", "[Function: myObject] function"]),
            ("symbol", ["Symbol(id) symbol", "false", "12345"]),
            (
                "bigint",
                [
                    "9007199254740991n bigint",
                    "12345678901234567890n",
                    "9007199254741091n",
                ],
            ),
            ("array", ["[ 'red', 'green', 'blue' ] object", "true", "red", "3"]),
            ("function", ["[Function: greet] function", "function", "Hello, World!"]),
            ("dynamic-typing", ["string", "number", "boolean", "15", "510", "510"]),
            ("primitive-vs-reference", ["10", "20", "20", "20"]),
            (
                "type-coercion",
                ["55", "0", "10", "2", "1", "NaN", "10", "55", "42", "3.14"],
            ),
        ],
    )
    def test_unit_output(self, transcript, unit, expected):
        assert texts(transcript, f"data-types/{unit}") == expected

    def test_object(self, transcript):
        assert texts(transcript, "data-types/object") == [
            "{\n"
            "  fullName: 'Jane Doe',\n"
            "  age: 25,\n"
            "  isStudent: true,\n"
            "  address: { city: 'New York', zip: '10001' }\n"
            "} object",
            "Jane Doe",
            "Bob",
        ]

    def test_checking_types(self, transcript):
        assert texts(transcript, "data-types/checking-types") == [
            "string",
            "number",
            "boolean",
            "undefined",
            "symbol",
            "bigint",
            "object",
            "object",
            "object",
            "function",
            "true",
            "true",
            "true",
        ]


class TestFullTranscript:
    """Test the complete plain render against the checked-in reference."""

    def test_matches_reference(self, transcript):
        expected = REFERENCE.read_text(encoding="utf-8")
        rendered = mask(render_transcript(transcript))
        assert rendered.splitlines() == mask(expected).splitlines()
        assert rendered.endswith("3.14\n")

    def test_rejected_operations_print_nothing(self, transcript):
        rendered = render_transcript(transcript)
        assert "TypeError" not in rendered
        assert "Reassigning" not in rendered

    def test_summary_keeps_indented_blank_line(self, transcript):
        (summary,) = texts(transcript, "primitive-vs-reference/summary")[1:]
        assert "Object.assign({}, obj)\n   \n2. Deep copy (all levels):" in summary
