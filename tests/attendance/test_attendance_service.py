from __future__ import annotations

from datetime import date

import pytest

from school_attendance.attendance.filters import AttendanceFilter
from school_attendance.attendance.model import StudentAttendance
from school_attendance.attendance.service import AttendanceService, parse_entries
from school_attendance.core.enums import AttendanceStatus
from school_attendance.core.exceptions import AuthorizationError, ValidationError


@pytest.fixture
def service(record_store, fixed_now):
    return AttendanceService(record_store, clock=lambda: fixed_now)


def test_submit_then_reload_round_trip(service, record_store, teacher, fixed_now):
    entries = (
        StudentAttendance(student_id="1", status=AttendanceStatus.LATE, time_in="08:20", notes="bus"),
    )

    service.submit(teacher, class_id="1", date="2026-03-20", entries=entries)

    reloaded = record_store.load()
    saved = [r for r in reloaded.attendance_records if r.id == "2026-03-20-class-1"]
    assert len(saved) == 1
    assert saved[0].records == entries
    assert saved[0].created_by == teacher.id
    assert saved[0].last_updated == fixed_now.isoformat()
    assert saved[0].qr_code == "attendance-1-2026-03-20"


def test_submit_replaces_existing_sheet_in_place(service, record_store, teacher):
    before = record_store.load().attendance_records
    index = next(i for i, r in enumerate(before) if r.id == "2026-03-17-class-1")
    entries = (StudentAttendance(student_id="1", status=AttendanceStatus.EXCUSED),)

    service.submit(teacher, class_id="1", date="2026-03-17", entries=entries)

    after = record_store.load().attendance_records
    assert len(after) == len(before)
    assert after[index].records == entries
    assert after[index].qr_code == before[index].qr_code


def test_submit_requires_teacher_of_the_class(service, teacher, other_teacher, student):
    entries = (StudentAttendance(student_id="1", status=AttendanceStatus.PRESENT),)

    with pytest.raises(AuthorizationError):
        service.submit(student, class_id="1", date="2026-03-20", entries=entries)
    with pytest.raises(AuthorizationError):
        service.submit(other_teacher, class_id="1", date="2026-03-20", entries=entries)


@pytest.mark.parametrize(
    "class_id,day,entries",
    [
        ("", "2026-03-20", (StudentAttendance("1", AttendanceStatus.PRESENT),)),
        ("404", "2026-03-20", (StudentAttendance("1", AttendanceStatus.PRESENT),)),
        ("1", "20/03/2026", (StudentAttendance("1", AttendanceStatus.PRESENT),)),
        ("1", "2026-03-20", ()),
        (1, "2026-03-20", (StudentAttendance("1", AttendanceStatus.PRESENT),)),
        ("1", 20260320, (StudentAttendance("1", AttendanceStatus.PRESENT),)),
    ],
)
def test_submit_rejects_invalid_input(service, teacher, class_id, day, entries):
    with pytest.raises(ValidationError):
        service.submit(teacher, class_id=class_id, date=day, entries=entries)


def test_parse_entries_validates_status():
    entries = parse_entries([{"studentId": "1", "status": "late", "timeIn": "08:05", "notes": ""}])

    assert entries == (StudentAttendance("1", AttendanceStatus.LATE, "08:05", ""),)
    with pytest.raises(ValidationError):
        parse_entries([{"studentId": "1", "status": "sick"}])
    with pytest.raises(ValidationError):
        parse_entries([{"status": "present"}])
    with pytest.raises(ValidationError):
        parse_entries(7)


def test_default_roster_marks_enrolled_students_present(service, teacher, fixed_now):
    roster = service.default_roster(teacher, "3", now=fixed_now)

    assert roster == [StudentAttendance("3", AttendanceStatus.PRESENT, "09:15", "")]


def test_history_pages_sorted_records_with_names(service, teacher):
    view = service.history(teacher, AttendanceFilter(start=date(2026, 3, 12), end=date(2026, 3, 18)), page=1)

    assert view.page.total_items == 14
    assert view.page.total_pages == 2
    assert len(view.page.items) == 10
    dates = [row["date"] for row in view.page.items]
    assert dates == sorted(dates, reverse=True)
    assert view.page.items[0]["className"] in {"TKJ-10A", "MM-12A"}
    assert view.page.items[0]["records"][0]["studentName"] in {"Alice Cooper", "Carol Williams"}
    assert view.stats.total == 14


def test_export_csv_one_row_per_entry(service, record_store, teacher):
    entries = (StudentAttendance("1", AttendanceStatus.LATE, "08:20", 'said "sorry"'),)
    service.submit(teacher, class_id="1", date="2026-03-19", entries=entries)

    flt = AttendanceFilter(start=date(2026, 3, 18), end=date(2026, 3, 19), class_id="1")
    lines = service.export_csv(teacher, flt).splitlines()

    assert lines[0] == "Date,Class,Student,Status,Time In,Notes"
    assert lines[1] == '"2026-03-19","TKJ-10A","Alice Cooper","late","08:20","said ""sorry"""'
    assert lines[2] == '"2026-03-18","TKJ-10A","Alice Cooper","absent","",""'
    assert len(lines) == 3
