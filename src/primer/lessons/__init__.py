"""Lesson catalog, in listing order."""

from typing import List, Sequence

from primer.lessons import (
    console_basics,
    data_types,
    primitive_vs_reference,
    type_conversion,
    variables,
)
from primer.model import Lesson


LESSONS: List[Lesson] = [
    console_basics.LESSON,
    variables.LESSON,
    primitive_vs_reference.LESSON,
    type_conversion.LESSON,
    data_types.LESSON,
]


class UnknownLessonError(KeyError):
    """Raised when a lesson name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        known = ", ".join(lesson.name for lesson in LESSONS)
        return f"Unknown lesson {self.name!r} (known: {known})"


def get_lesson(name: str) -> Lesson:
    for lesson in LESSONS:
        if lesson.name == name:
            return lesson
    raise UnknownLessonError(name)


def select_lessons(names: Sequence[str]) -> List[Lesson]:
    """
    Resolve lesson names, keeping catalog order.

    An empty selection means every lesson.
    """
    if not names:
        return list(LESSONS)
    wanted = {get_lesson(name).name for name in names}
    return [lesson for lesson in LESSONS if lesson.name in wanted]


__all__ = ["LESSONS", "UnknownLessonError", "get_lesson", "select_lessons"]
