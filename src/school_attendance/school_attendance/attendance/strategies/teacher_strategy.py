from __future__ import annotations

from typing import Iterable

from ...classes.model import SchoolClass
from ...users.model import Teacher
from ..model import StudentAttendance
from .base import VisibilityStrategy


class TeacherVisibility(VisibilityStrategy):
    """Every entry of every class the teacher owns."""

    allows_student_filter = True

    def __init__(self, teacher: Teacher):
        self._teacher = teacher

    def visible_classes(self, classes: Iterable[SchoolClass]) -> list[SchoolClass]:
        return [c for c in classes if c.teacher == self._teacher.id]

    def visible_entries(self, entries: Iterable[StudentAttendance]) -> tuple[StudentAttendance, ...]:
        return tuple(entries)
