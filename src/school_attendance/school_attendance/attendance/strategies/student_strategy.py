from __future__ import annotations

from typing import Iterable

from ...classes.model import SchoolClass
from ...users.model import Student
from ..model import StudentAttendance
from .base import VisibilityStrategy


class StudentVisibility(VisibilityStrategy):
    """Own entries only, within the class(es) named like the student's class."""

    def __init__(self, student: Student):
        self._student = student

    def visible_classes(self, classes: Iterable[SchoolClass]) -> list[SchoolClass]:
        return [c for c in classes if c.name == self._student.class_name]

    def visible_entries(self, entries: Iterable[StudentAttendance]) -> tuple[StudentAttendance, ...]:
        return tuple(e for e in entries if e.student_id == self._student.id)
