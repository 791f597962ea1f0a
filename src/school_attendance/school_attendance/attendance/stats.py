from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..common.datetime_utils import format_iso_date, format_short_date
from ..core.constants import TREND_DAYS
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceStats, DailyBreakdown, StudentAttendance


def attendance_rate(present: int, total: int) -> float:
    """Percentage of present entries, one decimal; 0 when nothing was recorded."""
    if total == 0:
        return 0.0
    return float(Decimal(present / total * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _status_counts(records: Iterable[AttendanceRecord]) -> Counter:
    return Counter(e.status for r in records for e in r.records)


def count_by_status(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    return count_entries(e for r in records for e in r.records)


def count_entries(entries: Iterable[StudentAttendance]) -> AttendanceStats:
    counts = Counter(e.status for e in entries)
    total = sum(counts.values())
    present = counts[AttendanceStatus.PRESENT]
    return AttendanceStats(
        present=present,
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        excused=counts[AttendanceStatus.EXCUSED],
        total=total,
        percentage=attendance_rate(present, total),
    )


def daily_breakdown(records: Iterable[AttendanceRecord], today: date, *, days: int = TREND_DAYS) -> list[DailyBreakdown]:
    """Per-status counts for each of the trailing `days` dates, oldest first."""

    by_date: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        by_date.setdefault(r.date, []).append(r)

    out: list[DailyBreakdown] = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        counts = _status_counts(by_date.get(format_iso_date(day), ()))
        out.append(
            DailyBreakdown(
                date=format_iso_date(day),
                label=format_short_date(day),
                present=counts[AttendanceStatus.PRESENT],
                absent=counts[AttendanceStatus.ABSENT],
                late=counts[AttendanceStatus.LATE],
                excused=counts[AttendanceStatus.EXCUSED],
            )
        )
    return out


def status_slices(stats: AttendanceStats) -> list[dict]:
    """Non-empty slices for the status pie chart."""

    slices = [
        {"name": "Present", "value": stats.present},
        {"name": "Absent", "value": stats.absent},
        {"name": "Late", "value": stats.late},
        {"name": "Excused", "value": stats.excused},
    ]
    return [s for s in slices if s["value"] > 0]
