"""
Demonstration Runner

Executes units strictly in listing order against one Console and returns
the Transcript of everything they emitted.

Guarantees:
    - Lesson order, then unit order, then statement order
    - No reordering or batching of records
    - Group start/end records always balance per unit
    - Timers and counters never carry over from one unit to the next

Exceptions raised by a unit body propagate unchanged: a failing unit is a
defect in the demonstration, not a runtime condition.
"""

import logging
from typing import Iterable, Optional

from primer.console import Console, Transcript
from primer.model import Lesson, Unit


logger = logging.getLogger(__name__)


def run_unit(unit: Unit, console: Console, qualified_name: Optional[str] = None) -> None:
    """
    Run a single unit, tagging its records with the unit name.

    Groups the unit leaves open are closed (and logged) so the transcript
    stays properly nested. Timers left running are discarded (and logged)
    and counters restart, so the next unit starts from a clean console.
    """
    name = qualified_name or unit.name
    previous = console.unit
    console.unit = name
    logger.debug("Running unit %s", name)
    try:
        unit.run(console)
        unclosed = console.close_groups()
        if unclosed:
            logger.warning("Unit %s left %d group(s) open; closed them", name, unclosed)
        running = console.discard_timers()
        if running:
            logger.warning(
                "Unit %s left timer(s) running: %s; discarded them", name, ", ".join(running)
            )
        console.reset_counts()
    finally:
        console.unit = previous
    logger.debug("Finished unit %s", name)


def run_lesson(lesson: Lesson, console: Console) -> None:
    logger.debug("Running lesson %s (%d units)", lesson.name, len(lesson.units))
    for unit in lesson.units:
        run_unit(unit, console, lesson.qualified_name(unit))


def run_lessons(lessons: Iterable[Lesson], console: Optional[Console] = None) -> Transcript:
    """
    Run lessons in order.

    Args:
        lessons: Lessons to run, in the order given
        console: Console to write to (a fresh one by default)

    Returns:
        The console's Transcript
    """
    console = console or Console()
    lesson_count = 0
    unit_count = 0
    for lesson in lessons:
        run_lesson(lesson, console)
        lesson_count += 1
        unit_count += len(lesson.units)
    logger.info(
        "Ran %d unit(s) from %d lesson(s), %d record(s)",
        unit_count,
        lesson_count,
        len(console.transcript),
    )
    return console.transcript
