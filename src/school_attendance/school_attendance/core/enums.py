from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for visibility scoping."""

    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Status of one student on one attendance sheet."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
