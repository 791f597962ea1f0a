"""Seed data used the first time the record store is loaded.

Seven days of attendance for each class, ending today. Every fifth day
(i % 5 == 0, counting back from today) marks the whole class absent.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..attendance.model import AttendanceRecord, StudentAttendance, make_qr_code, make_record_id
from ..classes.model import ClassSchedule, SchoolClass
from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus, Weekday
from ..users.model import Student, Teacher
from .model import Collections

SEED_DAYS = 7

SEED_TEACHERS = (
    Teacher(
        id="1",
        name="John Smith",
        email="teacher@example.com",
        subjects=("Mathematics", "Physics"),
        classes=("TKJ-10A", "RPL-11B", "MM-12A"),
    ),
    Teacher(
        id="2",
        name="Emily Johnson",
        email="emily.johnson@example.com",
        subjects=("Programming", "Database"),
        classes=("RPL-10B", "TKJ-12A"),
    ),
)

SEED_STUDENTS = (
    Student(
        id="1",
        name="Alice Cooper",
        email="student@example.com",
        student_id="2023001",
        class_name="TKJ-10A",
        grade="10",
        department="Computer and Network Engineering",
    ),
    Student(
        id="2",
        name="Bob Johnson",
        email="bob.johnson@example.com",
        student_id="2023002",
        class_name="RPL-10B",
        grade="10",
        department="Software Engineering",
    ),
    Student(
        id="3",
        name="Carol Williams",
        email="carol.williams@example.com",
        student_id="2023003",
        class_name="MM-12A",
        grade="12",
        department="Multimedia",
    ),
)

SEED_CLASSES = (
    SchoolClass(
        id="1",
        name="TKJ-10A",
        grade="10",
        department="Computer and Network Engineering",
        teacher="1",
        students=("1",),
        schedule=(
            ClassSchedule(Weekday.MONDAY, "08:00", "09:30", "Network Fundamentals"),
            ClassSchedule(Weekday.TUESDAY, "10:00", "11:30", "Computer Hardware"),
            ClassSchedule(Weekday.WEDNESDAY, "13:00", "14:30", "Operating Systems"),
        ),
    ),
    SchoolClass(
        id="2",
        name="RPL-10B",
        grade="10",
        department="Software Engineering",
        teacher="2",
        students=("2",),
        schedule=(
            ClassSchedule(Weekday.MONDAY, "10:00", "11:30", "Programming Basics"),
            ClassSchedule(Weekday.THURSDAY, "08:00", "09:30", "Database Design"),
        ),
    ),
    SchoolClass(
        id="3",
        name="MM-12A",
        grade="12",
        department="Multimedia",
        teacher="1",
        students=("3",),
        schedule=(
            ClassSchedule(Weekday.WEDNESDAY, "08:00", "09:30", "Digital Design"),
            ClassSchedule(Weekday.FRIDAY, "10:00", "11:30", "Video Editing"),
        ),
    ),
)


def seed_attendance(classes: tuple[SchoolClass, ...], today: date, *, days: int = SEED_DAYS) -> tuple[AttendanceRecord, ...]:
    records: list[AttendanceRecord] = []
    for i in range(days):
        day = format_iso_date(today - timedelta(days=i))
        absent_day = i % 5 == 0
        for cls in classes:
            records.append(
                AttendanceRecord(
                    id=make_record_id(day, cls.id),
                    class_id=cls.id,
                    date=day,
                    created_by=cls.teacher,
                    last_updated=day,
                    qr_code=make_qr_code(day, cls.id),
                    records=tuple(
                        StudentAttendance(
                            student_id=student_id,
                            status=AttendanceStatus.ABSENT if absent_day else AttendanceStatus.PRESENT,
                            time_in=None if absent_day else "08:00",
                        )
                        for student_id in cls.students
                    ),
                )
            )
    return tuple(records)


def build_fixtures(today: date) -> Collections:
    return Collections(
        classes=SEED_CLASSES,
        students=SEED_STUDENTS,
        teachers=SEED_TEACHERS,
        attendance_records=seed_attendance(SEED_CLASSES, today),
    )
