"""
Core Demonstration Objects

Defines the containers the runner walks:
    - Units (one self-contained example block with a narrative label)
    - Lessons (an ordered list of units from one source listing)

ARCHITECTURAL RULE:
    These objects:
        - Are created once, when a lesson module is imported
        - Are never mutated afterwards
        - Know nothing about rendering or streams
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from primer.console import Console


UnitBody = Callable[[Console], None]


@dataclass(frozen=True)
class Unit:
    """
    One demonstration unit.

    Properties:
        name:
            Stable identifier, unique within its lesson
            Examples: "basic-logging", "shallow-copy-problem"

        label:
            Human-readable heading for the unit
            Example: "Grouping Logs"

        body:
            Callable that performs the example steps and writes its
            output records to the Console it receives

    IMPORTANT:
        A unit must not depend on anything another unit printed or
        computed. Each body builds its own values from literals.
    """

    name: str
    label: str
    body: UnitBody

    def run(self, console: Console) -> None:
        self.body(console)


@dataclass(frozen=True)
class Lesson:
    """
    Ordered collection of units taken from one listing.

    Properties:
        name: Lesson identifier used on the command line (e.g. "console")
        title: Human-readable title
        units: Units in listing order

    INVARIANTS:
        - Unit names are unique within the lesson
        - Unit order is the order of the source listing
    """

    name: str
    title: str
    units: List[Unit] = field(default_factory=list)

    def __post_init__(self) -> None:
        names = [unit.name for unit in self.units]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate unit names in lesson {self.name!r}: {duplicates}")

    def get_unit(self, unit_name: str) -> Optional[Unit]:
        """
        Retrieve a unit by name.

        Args:
            unit_name: Unit identifier

        Returns:
            Unit object or None if not found
        """
        for unit in self.units:
            if unit.name == unit_name:
                return unit
        return None

    def qualified_name(self, unit: Unit) -> str:
        return f"{self.name}/{unit.name}"
