from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...classes.model import SchoolClass
from ..model import StudentAttendance


class VisibilityStrategy(ABC):
    """Strategy Pattern: encapsulate what a viewer is allowed to see."""

    # Teachers may narrow to one student; students only ever see themselves.
    allows_student_filter: bool = False

    @abstractmethod
    def visible_classes(self, classes: Iterable[SchoolClass]) -> list[SchoolClass]:
        raise NotImplementedError

    @abstractmethod
    def visible_entries(self, entries: Iterable[StudentAttendance]) -> tuple[StudentAttendance, ...]:
        raise NotImplementedError
