"""
Transcript Analyzer: read-only checks over a finished run.

This module inspects a Transcript and reports:
    - Record counts per level and per unit
    - Group balance and nesting depth
    - Tables and their row counts
    - Timers and their elapsed values

IMPORTANT: It does NOT modify the transcript. It only produces reports.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from primer.console import RecordLevel, Transcript


@dataclass
class TranscriptReport:
    """Summary of one transcript."""

    total_records: int = 0
    level_counts: Dict[str, int] = field(default_factory=dict)
    units: List[str] = field(default_factory=list)
    records_per_unit: Dict[str, int] = field(default_factory=dict)

    # Groups
    group_starts: int = 0
    group_ends: int = 0
    max_group_depth: int = 0
    balanced: bool = True

    # Tables: (unit, row count)
    tables: List[Tuple[Optional[str], int]] = field(default_factory=list)

    # Timers: (label, elapsed ms)
    timers: List[Tuple[str, float]] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def summary_lines(self) -> List[str]:
        lines = [
            f"Records: {self.total_records}",
            f"Units: {len(self.units)}",
            "Levels: " + ", ".join(
                f"{level}={count}" for level, count in sorted(self.level_counts.items())
            ),
            f"Groups: {self.group_starts} opened, {self.group_ends} closed, "
            f"max depth {self.max_group_depth}",
            f"Tables: {len(self.tables)}",
            f"Timers: {len(self.timers)}",
        ]
        for warning in self.warnings:
            lines.append(f"WARNING: {warning}")
        return lines


def analyze_transcript(transcript: Transcript) -> TranscriptReport:
    """
    Analyze a transcript.

    Checks for:
    - Group starts matched by group ends, in stack order
    - Record depth agreeing with the number of open groups
    - Timer end records carrying a non-negative elapsed value

    Returns a TranscriptReport with metrics and warnings.
    """
    report = TranscriptReport()
    level_counts: Dict[str, int] = defaultdict(int)
    per_unit: Dict[str, int] = defaultdict(int)

    # Open group labels per unit; groups never span units.
    open_groups: Dict[Optional[str], List[str]] = defaultdict(list)

    for record in transcript:
        report.total_records += 1
        level_counts[record.level.value] += 1

        unit = record.unit
        if unit is not None:
            if unit not in per_unit:
                report.units.append(unit)
            per_unit[unit] += 1

        stack = open_groups[unit]

        # =====================================================================
        # 1. NESTING
        # =====================================================================

        if record.level is not RecordLevel.GROUP_END and record.depth != len(stack):
            report.add_warning(
                f"Improper nesting in {unit or '<no unit>'}: record at depth "
                f"{record.depth} with {len(stack)} open group(s)"
            )

        if record.level is RecordLevel.GROUP:
            report.group_starts += 1
            stack.append(record.label or "")
            report.max_group_depth = max(report.max_group_depth, len(stack))

        elif record.level is RecordLevel.GROUP_END:
            report.group_ends += 1
            if not stack:
                report.balanced = False
                report.add_warning(f"Group end without a matching start in {unit or '<no unit>'}")
            else:
                label = stack.pop()
                if record.label is not None and record.label != label:
                    report.add_warning(
                        f"Improper nesting in {unit or '<no unit>'}: closed "
                        f"{record.label!r} while {label!r} was innermost"
                    )

        # =====================================================================
        # 2. TABLES AND TIMERS
        # =====================================================================

        elif record.level is RecordLevel.TABLE:
            rows = len(record.table.rows) if record.table is not None else 0
            report.tables.append((unit, rows))

        elif record.level is RecordLevel.TIME_END:
            label = record.label or "default"
            if record.elapsed_ms is None:
                report.add_warning(f"Timer {label!r} has no elapsed value")
            else:
                if record.elapsed_ms < 0:
                    report.add_warning(
                        f"Timer {label!r} has negative elapsed value {record.elapsed_ms}"
                    )
                report.timers.append((label, record.elapsed_ms))

    for unit, stack in open_groups.items():
        if stack:
            report.balanced = False
            report.add_warning(
                f"Unbalanced groups in {unit or '<no unit>'}: {', '.join(repr(s) for s in stack)} "
                "never closed"
            )

    report.level_counts = dict(level_counts)
    report.records_per_unit = dict(per_unit)
    return report
