"""
Human-readable rendering of values, the way a developer console prints them.

    {'name': 'Brad', 'age': 30}   ->  { name: 'Brad', age: 30 }
    ['a', 'b']                    ->  [ 'a', 'b' ]
    Function('greet')             ->  [Function: greet]
    BigInt(10)                    ->  10n

Layout rules:
    - An object is printed on one line when it fits in 80 columns and
      holds at most 3 levels of nesting, otherwise one entry per line
      with 2-space indentation.
    - Arrays with more than 6 short entries are grouped into columns.
    - Objects nested deeper than 2 levels print as [Object] / [Array].
"""

import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from primer.coercion import (
    format_number,
    parse_float,
    parse_int,
    to_iso_string,
    to_number,
    to_string,
)
from primer.copying import to_json
from primer.values import UNDEFINED, BigInt, Function, Symbol, is_number


BREAK_LENGTH = 80
COMPACT = 3
DEFAULT_DEPTH = 2
MAX_ARRAY_LENGTH = 100

_KEY_RE = re.compile(r"^[a-zA-Z_][a-zA-Z_0-9]*$")
_FORMAT_RE = re.compile(r"%[sdifjoOc%]")

_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    "\\": "\\\\",
}


def quote_string(text: str) -> str:
    """
    Quote a string for display inside a structure.

    Single quotes are preferred; double quotes or backticks are used when
    the text itself contains single quotes.
    """
    quote = "'"
    if "'" in text:
        if '"' not in text:
            quote = '"'
        elif "`" not in text and "${" not in text:
            quote = "`"

    out = []
    for ch in text:
        if ch == quote:
            out.append("\\" + ch)
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02X}")
        else:
            out.append(ch)
    return f"{quote}{''.join(out)}{quote}"


def format_key(key: Any) -> str:
    if isinstance(key, Symbol):
        return f"[{key!r}]"
    if _KEY_RE.match(key):
        return key
    return quote_string(key)


def _format_function(value: Function) -> str:
    if value.name:
        return f"[Function: {value.name}]"
    return "[Function (anonymous)]"


class _Inspector:
    """Holds the layout state of one inspect_value call."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        self.indentation = 0
        self.current_depth = 0
        self.stack: List[Any] = []
        self.circular: Dict[int, int] = {}

    def format_value(self, value: Any, level: int, in_structure: bool = True) -> str:
        if isinstance(value, str):
            if not in_structure:
                return value
            return self._format_string(value)
        if value is None:
            return "null"
        if value is UNDEFINED:
            return "undefined"
        if isinstance(value, bool):
            return "true" if value else "false"
        if is_number(value):
            if value == 0 and math.copysign(1, value) < 0:
                return "-0"
            return format_number(value)
        if isinstance(value, BigInt):
            return repr(value)
        if isinstance(value, Symbol):
            return repr(value)
        if isinstance(value, Function):
            return _format_function(value)
        if isinstance(value, datetime):
            return to_iso_string(value)
        if isinstance(value, (dict, list)):
            return self._format_structure(value, level)
        raise TypeError(f"Unsupported value type: {type(value)}")

    def _format_string(self, value: str) -> str:
        if (
            "\n" in value
            and len(value) > 16
            and len(value) > BREAK_LENGTH - self.indentation - 4
        ):
            lines = value.splitlines(keepends=True)
            joiner = " +\n" + " " * (self.indentation + 2)
            return joiner.join(quote_string(line) for line in lines)
        return quote_string(value)

    def _format_structure(self, value: Any, level: int) -> str:
        if any(item is value for item in self.stack):
            index = self.circular.setdefault(id(value), len(self.circular) + 1)
            return f"[Circular *{index}]"

        is_list = isinstance(value, list)
        if level > self.depth:
            return "[Array]" if is_list else "[Object]"
        if not value:
            return "[]" if is_list else "{}"

        self.current_depth = level
        self.stack.append(value)
        self.indentation += 2
        if is_list:
            output = [self.format_value(item, level + 1) for item in value[:MAX_ARRAY_LENGTH]]
            remaining = len(value) - MAX_ARRAY_LENGTH
            if remaining > 0:
                output.append(f"... {remaining} more item{'s' if remaining > 1 else ''}")
        else:
            output = [
                f"{format_key(key)}: {self.format_value(item, level + 1)}"
                for key, item in value.items()
            ]
        self.indentation -= 2
        self.stack.pop()

        braces = ("[", "]") if is_list else ("{", "}")
        result = self._reduce_to_single_string(output, braces, level, value if is_list else None)
        index = self.circular.get(id(value))
        if index is not None:
            result = f"<ref *{index}> {result}"
        return result

    def _reduce_to_single_string(
        self, output: List[str], braces: Tuple[str, str], level: int, array: Optional[list]
    ) -> str:
        entries = len(output)
        if array is not None and entries > 6:
            output = self._group_array_elements(output, array)

        if self.current_depth - level < COMPACT and entries == len(output):
            start = len(output) + self.indentation + len(braces[0]) + 10
            if self._is_below_break_length(output, start):
                joined = ", ".join(output)
                if "\n" not in joined:
                    return f"{braces[0]} {joined} {braces[1]}"

        indent = "\n" + " " * self.indentation
        body = f",{indent}  ".join(output)
        return f"{braces[0]}{indent}  {body}{indent}{braces[1]}"

    @staticmethod
    def _is_below_break_length(output: List[str], start: int) -> bool:
        total = len(output) + start
        if total + len(output) > BREAK_LENGTH:
            return False
        for entry in output:
            total += len(entry)
            if total > BREAK_LENGTH:
                return False
        return True

    def _group_array_elements(self, output: List[str], array: list) -> List[str]:
        total_length = 0
        max_length = 0
        output_length = len(output)
        if len(array) > MAX_ARRAY_LENGTH:
            output_length -= 1
        separator_space = 2
        data_len = []
        for entry in output[:output_length]:
            data_len.append(len(entry))
            total_length += len(entry) + separator_space
            max_length = max(max_length, len(entry))

        actual_max = max_length + separator_space
        if not (
            actual_max * 3 + self.indentation < BREAK_LENGTH
            and (total_length / actual_max > 5 or max_length <= 6)
        ):
            return output

        average_bias = math.sqrt(actual_max - total_length / len(output))
        biased_max = max(actual_max - 3 - average_bias, 1)
        columns = min(
            math.floor(math.sqrt(2.5 * biased_max * output_length) / biased_max + 0.5),
            (BREAK_LENGTH - self.indentation) // actual_max,
            COMPACT * 4,
            15,
        )
        if columns <= 1:
            return output

        max_line_length = []
        for i in range(columns):
            line_length = 0
            for j in range(i, output_length, columns):
                line_length = max(line_length, data_len[j])
            max_line_length.append(line_length + separator_space)

        numeric = all(is_number(item) or isinstance(item, BigInt) for item in array[:output_length])
        grouped = []
        for i in range(0, output_length, columns):
            last = min(i + columns, output_length) - 1
            line = ""
            for j in range(i, last):
                cell = f"{output[j]}, "
                width = max_line_length[j - i]
                line += cell.rjust(width) if numeric else cell.ljust(width)
            if numeric:
                line += output[last].rjust(max_line_length[last - i] - separator_space)
            else:
                line += output[last]
            grouped.append(line)
        if output_length < len(output):
            grouped.append(output[-1])
        return grouped


def inspect_value(value: Any, depth: int = DEFAULT_DEPTH) -> str:
    """
    Render any value of the model for display.

    Args:
        value: Value to render
        depth: Nesting depth below which objects collapse to [Object]

    Returns:
        Display string (strings are quoted)
    """
    return _Inspector(depth).format_value(value, 0)


# =========================================================================
# LOG ARGUMENTS
# =========================================================================

def _format_plain(value: Any) -> str:
    """Top-level rendering: strings print raw, everything else inspected."""
    return _Inspector(DEFAULT_DEPTH).format_value(value, 0, in_structure=False)


def _substitute(specifier: str, arg: Any) -> str:
    if specifier == "s":
        if isinstance(arg, (dict, list)):
            return inspect_value(arg, depth=0)
        if is_number(arg) or isinstance(arg, BigInt):
            return _format_plain(arg)
        return to_string(arg)
    if specifier == "d":
        if isinstance(arg, BigInt):
            return repr(arg)
        if isinstance(arg, Symbol):
            return "NaN"
        return _format_plain(to_number(arg))
    if specifier == "i":
        if isinstance(arg, BigInt):
            return repr(arg)
        if isinstance(arg, Symbol):
            return "NaN"
        return _format_plain(parse_int(arg))
    if specifier == "f":
        if isinstance(arg, Symbol):
            return "NaN"
        return _format_plain(parse_float(arg))
    if specifier == "j":
        text = to_json(arg)
        return "undefined" if text is None else text
    # %o and %O
    return inspect_value(arg, depth=4 if specifier == "o" else DEFAULT_DEPTH)


def format_args(*args: Any) -> List[Tuple[str, Optional[str]]]:
    """
    Render console arguments into styled segments.

    The first argument may be a format string with %s %d %i %f %j %o %O %c
    and %% directives. Each %c consumes a CSS text argument and starts a new
    segment carrying that CSS. Remaining arguments are appended separated by
    spaces.

    Returns:
        List of (text, css) segments; css is None for unstyled text.
        Joining the texts gives the plain message.
    """
    segments: List[Tuple[str, Optional[str]]] = []
    rest = list(args)
    current_css: Optional[str] = None
    current = ""

    if rest and isinstance(rest[0], str) and len(rest) > 1 and "%" in rest[0]:
        template = rest.pop(0)
        last = 0
        for match in _FORMAT_RE.finditer(template):
            specifier = match.group(0)[1]
            if specifier == "%":
                current += template[last:match.start()] + "%"
                last = match.end()
                continue
            if not rest:
                break
            arg = rest.pop(0)
            current += template[last:match.start()]
            last = match.end()
            if specifier == "c":
                if current:
                    segments.append((current, current_css))
                current = ""
                current_css = to_string(arg)
            else:
                current += _substitute(specifier, arg)
        current += template[last:]
        separator = " "
    else:
        separator = ""
        if rest:
            current = _format_plain(rest.pop(0))
            separator = " "

    for arg in rest:
        current += separator + _format_plain(arg)
        separator = " "

    if current or not segments:
        segments.append((current, current_css))
    return segments


def format_message(*args: Any) -> str:
    """Plain text of console arguments (styles dropped)."""
    return "".join(text for text, _ in format_args(*args))
