"""
Console and Output Records

A Console turns calls like log(...), table(...) or group(...) into
OutputRecord objects. Records are:
    - appended to a Transcript, in emission order
    - handed to an optional sink right away (streaming renderers)

Records carry everything a renderer needs:
    - level (log, warn, error, table, group, ...)
    - plain text (already formatted)
    - group depth at which they were emitted
    - styled spans (from %c directives)
    - table data / timer measurements

ARCHITECTURAL RULE:
    The Console never writes to a stream itself.
    Rendering belongs in primer.backends.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from primer.clock import SystemClock
from primer.coercion import format_number, to_boolean
from primer.formatting import format_args, format_message, inspect_value
from primer.values import Symbol


logger = logging.getLogger(__name__)


class RecordLevel(Enum):
    """Kinds of output records."""

    LOG = "log"
    INFO = "info"
    DEBUG = "debug"
    WARN = "warn"
    ERROR = "error"
    TABLE = "table"
    GROUP = "group"
    GROUP_END = "groupEnd"
    TIME = "time"
    TIME_END = "timeEnd"


_STYLE_PROPERTIES = {
    "color": "color",
    "background-color": "background_color",
    "background": "background_color",
    "font-weight": "font_weight",
    "font-style": "font_style",
    "text-decoration": "text_decoration",
    "padding": "padding",
    "font-size": "font_size",
}


@dataclass(frozen=True)
class Style:
    """
    Presentation metadata attached to a span of text by a %c directive.

    Terminal renderers may translate colors and weight to ANSI codes and
    ignore the rest. The text itself is always emitted.
    """

    color: Optional[str] = None
    background_color: Optional[str] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    text_decoration: Optional[str] = None
    padding: Optional[str] = None
    font_size: Optional[str] = None

    @classmethod
    def parse(cls, css: str) -> "Style":
        """
        Parse CSS declarations, e.g. "color: #bada55; font-size: 16px".

        Unknown properties are ignored.
        """
        values: Dict[str, str] = {}
        for declaration in css.split(";"):
            name, sep, value = declaration.partition(":")
            if not sep:
                continue
            attr = _STYLE_PROPERTIES.get(name.strip().lower())
            if attr is not None:
                values[attr] = value.strip()
        return cls(**values)

    def to_css(self) -> str:
        parts = []
        for css_name, attr in _STYLE_PROPERTIES.items():
            value = getattr(self, attr)
            if value is not None and css_name != "background":
                parts.append(f"{css_name}: {value}")
        return "; ".join(parts)


@dataclass
class Span:
    """A run of text with optional styling."""

    text: str
    style: Optional[Style] = None


@dataclass
class Table:
    """
    Tabular view of a sequence of uniform records.

    Properties:
        headers: "(index)" followed by the column names
        rows: One list of display cells per element, index cell first
    """

    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        return self.headers[1:]

    def render(self) -> List[str]:
        """Box-drawn lines with left-aligned cells."""
        widths = [len(header) for header in self.headers]
        for row in self.rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))

        def divider(left: str, middle: str, right: str) -> str:
            return left + middle.join("─" * (w + 2) for w in widths) + right

        def line(cells: Sequence[str]) -> str:
            return "│" + "│".join(f" {cell.ljust(w)} " for cell, w in zip(cells, widths)) + "│"

        lines = [divider("┌", "┬", "┐"), line(self.headers), divider("├", "┼", "┤")]
        lines.extend(line(row) for row in self.rows)
        lines.append(divider("└", "┴", "┘"))
        return lines


@dataclass
class OutputRecord:
    """
    One emitted line or structure.

    Properties:
        level: RecordLevel of the record
        text: Plain rendered payload ("" for records that print nothing)
        depth: Group nesting depth the record was emitted at
        unit: Name of the demonstration unit that emitted it
        label: Group / timer / counter label
        collapsed: Group start only; True when the group starts collapsed
        spans: Styled segments (empty when the text carries no styling)
        table: Table data for TABLE records
        elapsed_ms: Measured duration for TIME_END records
    """

    level: RecordLevel
    text: str = ""
    depth: int = 0
    unit: Optional[str] = None
    label: Optional[str] = None
    collapsed: bool = False
    spans: List[Span] = field(default_factory=list)
    table: Optional[Table] = None
    elapsed_ms: Optional[float] = None


@dataclass
class Transcript:
    """Append-only list of records in emission order."""

    records: List[OutputRecord] = field(default_factory=list)

    def append(self, record: OutputRecord) -> None:
        self.records.append(record)

    def for_unit(self, unit: str) -> List[OutputRecord]:
        return [record for record in self.records if record.unit == unit]

    def units(self) -> List[str]:
        seen: List[str] = []
        for record in self.records:
            if record.unit is not None and record.unit not in seen:
                seen.append(record.unit)
        return seen

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)


def format_duration(ms: float) -> str:
    """
    Render a timer measurement.

        0.0521   -> "0.052ms"
        1520.5   -> "1.521s"
        61000    -> "1:01.000 (m:ss.mmm)"
    """
    if ms >= 60_000:
        hours, rest = divmod(ms, 3_600_000)
        minutes, rest = divmod(rest, 60_000)
        whole, fraction = f"{rest / 1000:.3f}".split(".")
        if hours:
            return f"{int(hours)}:{int(minutes):02d}:{whole.zfill(2)}.{fraction} (h:mm:ss.mmm)"
        return f"{int(minutes)}:{whole.zfill(2)}.{fraction} (m:ss.mmm)"
    if ms >= 1000:
        return f"{ms / 1000:.3f}s"
    return f"{format_number(round(ms, 3))}ms"


def _column_name(key: Any) -> str:
    return repr(key) if isinstance(key, Symbol) else str(key)


def build_table(data: Any, properties: Optional[Sequence[str]] = None) -> Optional[Table]:
    """
    Build a Table from a list or dict of rows.

    Columns are the union of row keys in first-seen order (or exactly
    `properties` when given); primitive rows go into a "Values" column.

    Returns:
        Table, or None when data is not tabular
    """
    if isinstance(data, list):
        indexed = [(str(i), row) for i, row in enumerate(data)]
    elif isinstance(data, dict):
        indexed = [(_column_name(key), row) for key, row in data.items()]
    else:
        return None

    columns: List[str] = list(properties) if properties is not None else []
    cells: List[Dict[str, str]] = []
    values: List[Optional[str]] = []
    for _, row in indexed:
        row_cells: Dict[str, str] = {}
        if isinstance(row, (dict, list)):
            items = row.items() if isinstance(row, dict) else enumerate(row)
            for key, item in items:
                name = _column_name(key)
                if properties is not None and name not in properties:
                    continue
                if name not in columns:
                    columns.append(name)
                row_cells[name] = inspect_value(item, depth=0)
            values.append(None)
        else:
            values.append(inspect_value(row))
        cells.append(row_cells)

    has_values = properties is None and any(value is not None for value in values)
    headers = ["(index)"] + columns + (["Values"] if has_values else [])
    rows = []
    for (index, _), row_cells, value in zip(indexed, cells, values):
        row = [index] + [row_cells.get(column, "") for column in columns]
        if has_values:
            row.append(value or "")
        rows.append(row)
    return Table(headers=headers, rows=rows)


RecordSink = Callable[[OutputRecord], None]


class Console:
    """
    Output channel used by demonstration units.

    Example:
        console = Console()
        console.log("Values:", 20, "hello", True)
        console.group_collapsed("Steps")
        console.log("Step 1")
        console.group_end()
    """

    def __init__(
        self,
        transcript: Optional[Transcript] = None,
        sink: Optional[RecordSink] = None,
        clock=None,
    ) -> None:
        self.transcript = transcript if transcript is not None else Transcript()
        self.sink = sink
        self.clock = clock or SystemClock()
        self.unit: Optional[str] = None
        self._groups: List[str] = []
        self._timers: Dict[str, float] = {}
        self._counts: Dict[str, int] = {}

    @property
    def depth(self) -> int:
        return len(self._groups)

    def _emit(self, level: RecordLevel, text: str = "", **fields: Any) -> OutputRecord:
        fields.setdefault("depth", self.depth)
        record = OutputRecord(level=level, text=text, unit=self.unit, **fields)
        self.transcript.append(record)
        if self.sink is not None:
            self.sink(record)
        return record

    def _emit_message(self, level: RecordLevel, args: Sequence[Any]) -> OutputRecord:
        segments = format_args(*args)
        text = "".join(segment for segment, _ in segments)
        spans = []
        if any(css is not None for _, css in segments):
            spans = [
                Span(text=segment, style=Style.parse(css) if css is not None else None)
                for segment, css in segments
            ]
        return self._emit(level, text, spans=spans)

    # =========================================================================
    # MESSAGES
    # =========================================================================

    def log(self, *args: Any) -> OutputRecord:
        return self._emit_message(RecordLevel.LOG, args)

    def info(self, *args: Any) -> OutputRecord:
        return self._emit_message(RecordLevel.INFO, args)

    def debug(self, *args: Any) -> OutputRecord:
        return self._emit_message(RecordLevel.DEBUG, args)

    def warn(self, *args: Any) -> OutputRecord:
        return self._emit_message(RecordLevel.WARN, args)

    def error(self, *args: Any) -> OutputRecord:
        return self._emit_message(RecordLevel.ERROR, args)

    def assert_(self, condition: Any, *args: Any) -> Optional[OutputRecord]:
        """Emit an error record only when condition is falsy."""
        if to_boolean(condition):
            return None
        if args and isinstance(args[0], str):
            return self.error(f"Assertion failed: {args[0]}", *args[1:])
        return self.error("Assertion failed", *args)

    def table(self, data: Any, properties: Optional[Sequence[str]] = None) -> OutputRecord:
        table = build_table(data, properties)
        if table is None:
            return self.log(data)
        return self._emit(RecordLevel.TABLE, "\n".join(table.render()), table=table)

    # =========================================================================
    # GROUPS
    # =========================================================================

    def group(self, *label: Any) -> OutputRecord:
        return self._open_group(label, collapsed=False)

    def group_collapsed(self, *label: Any) -> OutputRecord:
        return self._open_group(label, collapsed=True)

    def _open_group(self, label: Sequence[Any], collapsed: bool) -> OutputRecord:
        text = format_message(*label) if label else ""
        record = self._emit(RecordLevel.GROUP, text, label=text, collapsed=collapsed)
        self._groups.append(text)
        return record

    def group_end(self) -> Optional[OutputRecord]:
        """Close the innermost group; a no-op when no group is open."""
        if not self._groups:
            return None
        label = self._groups.pop()
        return self._emit(RecordLevel.GROUP_END, label=label)

    def close_groups(self) -> int:
        """Close every open group, returning how many were closed."""
        closed = 0
        while self._groups:
            self.group_end()
            closed += 1
        return closed

    # =========================================================================
    # TIMERS AND COUNTERS
    # =========================================================================

    def time(self, label: str = "default") -> OutputRecord:
        if label in self._timers:
            return self.warn(f"Warning: Label '{label}' already exists for console.time()")
        self._timers[label] = self.clock.monotonic_ms()
        return self._emit(RecordLevel.TIME, label=label)

    def _elapsed(self, label: str) -> Optional[float]:
        start = self._timers.get(label)
        if start is None:
            return None
        return max(self.clock.monotonic_ms() - start, 0.0)

    def time_log(self, label: str = "default", *args: Any) -> OutputRecord:
        elapsed = self._elapsed(label)
        if elapsed is None:
            return self.warn(f"Warning: No such label '{label}' for console.timeLog()")
        text = f"{label}: {format_duration(elapsed)}"
        if args:
            text = f"{text} {format_message(*args)}"
        return self._emit(RecordLevel.LOG, text, label=label, elapsed_ms=elapsed)

    def time_end(self, label: str = "default") -> OutputRecord:
        elapsed = self._elapsed(label)
        if elapsed is None:
            logger.debug("timeEnd on unknown label %r", label)
            return self.warn(f"Warning: No such label '{label}' for console.timeEnd()")
        del self._timers[label]
        text = f"{label}: {format_duration(elapsed)}"
        return self._emit(RecordLevel.TIME_END, text, label=label, elapsed_ms=elapsed)

    def count(self, label: str = "default") -> OutputRecord:
        self._counts[label] = self._counts.get(label, 0) + 1
        return self._emit(RecordLevel.LOG, f"{label}: {self._counts[label]}", label=label)

    def count_reset(self, label: str = "default") -> Optional[OutputRecord]:
        if label not in self._counts:
            return self.warn(f"Warning: Count for '{label}' does not exist")
        self._counts[label] = 0
        return None

    def discard_timers(self) -> List[str]:
        """Drop every running timer, returning the labels that were running."""
        labels = list(self._timers)
        self._timers.clear()
        return labels

    def reset_counts(self) -> None:
        self._counts.clear()
