from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..classes.model import SchoolClass
from ..users.model import Student, Teacher


@dataclass(frozen=True)
class Collections:
    """The four persisted collections, always read and written together."""

    classes: tuple[SchoolClass, ...] = ()
    students: tuple[Student, ...] = ()
    teachers: tuple[Teacher, ...] = ()
    attendance_records: tuple[AttendanceRecord, ...] = ()

    def find_class(self, class_id: str) -> SchoolClass | None:
        return next((c for c in self.classes if c.id == class_id), None)

    def find_student(self, student_id: str) -> Student | None:
        return next((s for s in self.students if s.id == student_id), None)

    def find_teacher(self, teacher_id: str) -> Teacher | None:
        return next((t for t in self.teachers if t.id == teacher_id), None)
