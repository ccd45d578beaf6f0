"""
Demo: Run every lesson, print the transcript and the analyzer report.
"""

from primer.analyzer import analyze_transcript
from primer.backends import RenderMode, render_transcript
from primer.clock import FixedClock
from primer.console import Console, Transcript
from primer.lessons import LESSONS
from primer.runner import run_lessons
from primer.serialization import transcript_to_yaml


def print_report(report):
    """Pretty-print a TranscriptReport."""
    print()
    print("=" * 70)
    print("TRANSCRIPT ANALYSIS REPORT")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Total Records:         {report.total_records}")
    print(f"  Units:                 {len(report.units)}")
    for level, count in sorted(report.level_counts.items()):
        print(f"    {level}: {count}")
    print()

    print("🗂️  GROUPS")
    print(f"  Opened / Closed:       {report.group_starts} / {report.group_ends}")
    print(f"  Max Depth:             {report.max_group_depth}")
    print(f"  Balanced:              {'✓' if report.balanced else '✗'}")
    print()

    print("📋 TABLES AND TIMERS")
    for unit, rows in report.tables:
        print(f"  table in {unit}: {rows} row(s)")
    for label, elapsed in report.timers:
        print(f"  timer {label}: {elapsed:.3f}ms")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for warning in report.warnings:
            print(f"  • {warning}")
    else:
        print("✓ No warnings")
    print()


if __name__ == "__main__":
    console = Console(clock=FixedClock(step_ms=0.25))
    transcript = run_lessons(LESSONS, console)

    print(render_transcript(transcript, RenderMode.PLAIN))
    print_report(analyze_transcript(transcript))

    print("First records as YAML:")
    first_unit = transcript.units()[0]
    subset = Transcript(records=transcript.for_unit(first_unit))
    print(transcript_to_yaml(subset))
