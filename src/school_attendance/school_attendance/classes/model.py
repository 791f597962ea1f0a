from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import Weekday


@dataclass(frozen=True)
class ClassSchedule:
    """One weekly slot: (day, time window, subject)."""

    day: Weekday
    start_time: str
    end_time: str
    subject: str

    def to_dict(self) -> dict:
        return {
            "day": self.day.value,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "subject": self.subject,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ClassSchedule":
        return cls(
            day=Weekday(data["day"]),
            start_time=data["startTime"],
            end_time=data["endTime"],
            subject=data["subject"],
        )


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class (homeroom) owned by one teacher.

    `students` holds Student ids. It is not reconciled against Student.class_name.
    """

    id: str
    name: str
    grade: str
    department: str
    teacher: str
    students: tuple[str, ...] = field(default_factory=tuple)
    schedule: tuple[ClassSchedule, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "grade": self.grade,
            "department": self.department,
            "teacher": self.teacher,
            "students": list(self.students),
            "schedule": [s.to_dict() for s in self.schedule],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SchoolClass":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            grade=str(data["grade"]),
            department=data["department"],
            teacher=str(data["teacher"]),
            students=tuple(str(s) for s in data.get("students") or ()),
            schedule=tuple(ClassSchedule.from_dict(s) for s in data.get("schedule") or ()),
        )
