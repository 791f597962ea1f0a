from __future__ import annotations

from datetime import date

import pytest

from school_attendance.attendance.filters import scope_to_viewer
from school_attendance.attendance.model import AttendanceRecord, StudentAttendance
from school_attendance.attendance.stats import attendance_rate, count_by_status, daily_breakdown, status_slices
from school_attendance.core.enums import AttendanceStatus


def _sheet(day: str, *statuses: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(
        id=f"{day}-class-9",
        class_id="9",
        date=day,
        created_by="1",
        last_updated=day,
        qr_code="",
        records=tuple(StudentAttendance(student_id=str(i), status=s) for i, s in enumerate(statuses)),
    )


@pytest.mark.parametrize(
    "present,total,expected",
    [(0, 0, 0.0), (3, 3, 100.0), (1, 3, 33.3), (2, 3, 66.7), (10, 14, 71.4), (1, 16, 6.3), (5, 16, 31.3)],
)
def test_attendance_rate(present, total, expected):
    assert attendance_rate(present, total) == expected


def test_counts_sum_to_total():
    sheets = [
        _sheet("2026-03-17", AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.EXCUSED),
        _sheet("2026-03-18", AttendanceStatus.ABSENT, AttendanceStatus.PRESENT),
    ]

    stats = count_by_status(sheets)

    assert (stats.present, stats.absent, stats.late, stats.excused) == (2, 1, 1, 1)
    assert stats.present + stats.absent + stats.late + stats.excused == stats.total == 5
    assert stats.percentage == 40.0


def test_empty_set_has_zero_rate():
    stats = count_by_status([])

    assert stats.total == 0
    assert stats.percentage == 0.0


def test_seeded_teacher_stats(collections, teacher):
    visible = scope_to_viewer(collections.attendance_records, collections.classes, teacher)

    stats = count_by_status(visible)

    assert stats.total == 14
    assert stats.absent == 4
    assert stats.present == 10
    assert stats.percentage == 71.4


def test_daily_breakdown_covers_trailing_week_oldest_first():
    sheets = [
        _sheet("2026-03-18", AttendanceStatus.PRESENT, AttendanceStatus.ABSENT),
        _sheet("2026-03-18", AttendanceStatus.LATE),
        _sheet("2026-03-12", AttendanceStatus.EXCUSED),
        _sheet("2026-03-01", AttendanceStatus.PRESENT),
    ]

    days = daily_breakdown(sheets, date(2026, 3, 18))

    assert [d.date for d in days] == [f"2026-03-{n}" for n in range(12, 19)]
    assert days[0].label == "03/12"
    assert days[0].excused == 1
    assert (days[-1].present, days[-1].absent, days[-1].late) == (1, 1, 1)
    assert sum(d.present for d in days) == 1


def test_status_slices_skip_empty_statuses():
    stats = count_by_status([_sheet("2026-03-18", AttendanceStatus.PRESENT, AttendanceStatus.LATE)])

    assert status_slices(stats) == [{"name": "Present", "value": 1}, {"name": "Late", "value": 1}]
