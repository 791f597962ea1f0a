"""Role-scoped filtering, sorting and paging of attendance records.

All functions are pure: they take the stored collections and return new
record instances, never mutating their inputs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Callable, Iterable, Optional, Sequence

from ..classes.model import SchoolClass
from ..common.datetime_utils import try_parse_iso_date
from ..core.constants import DEFAULT_HISTORY_DAYS, RECORDS_PER_PAGE
from ..core.enums import AttendanceStatus
from ..users.model import UserProfile
from .factory import VisibilityStrategyFactory
from .model import AttendanceRecord, StudentAttendance


@dataclass(frozen=True)
class AttendanceFilter:
    """Inclusive date range plus optional exact-match filters."""

    start: date
    end: date
    class_id: Optional[str] = None
    status: Optional[AttendanceStatus] = None
    student_id: Optional[str] = None

    @classmethod
    def last_days(cls, today: date, days: int = DEFAULT_HISTORY_DAYS, **kwargs) -> "AttendanceFilter":
        return cls(start=today - timedelta(days=days), end=today, **kwargs)


def _keep_entries(
    records: Iterable[AttendanceRecord],
    predicate: Callable[[StudentAttendance], bool],
) -> list[AttendanceRecord]:
    """Drop non-matching entries, then drop records left empty."""

    out: list[AttendanceRecord] = []
    for r in records:
        entries = tuple(e for e in r.records if predicate(e))
        if entries:
            out.append(r if len(entries) == len(r.records) else replace(r, records=entries))
    return out


def scope_to_viewer(
    records: Iterable[AttendanceRecord],
    classes: Iterable[SchoolClass],
    viewer: UserProfile,
    *,
    factory: Optional[VisibilityStrategyFactory] = None,
) -> list[AttendanceRecord]:
    """Records of the viewer's classes, trimmed to the entries they may see."""

    strategy = (factory or VisibilityStrategyFactory()).for_viewer(viewer)
    class_ids = {c.id for c in strategy.visible_classes(classes)}

    out: list[AttendanceRecord] = []
    for r in records:
        if r.class_id not in class_ids:
            continue
        entries = strategy.visible_entries(r.records)
        if entries:
            out.append(r if len(entries) == len(r.records) else replace(r, records=entries))
    return out


def filter_attendance(
    records: Iterable[AttendanceRecord],
    classes: Iterable[SchoolClass],
    viewer: UserProfile,
    flt: AttendanceFilter,
    *,
    factory: Optional[VisibilityStrategyFactory] = None,
) -> list[AttendanceRecord]:
    factory = factory or VisibilityStrategyFactory()
    filtered = scope_to_viewer(records, classes, viewer, factory=factory)

    if flt.class_id:
        filtered = [r for r in filtered if r.class_id == flt.class_id]

    in_range: list[AttendanceRecord] = []
    for r in filtered:
        day = try_parse_iso_date(r.date)
        if day is not None and flt.start <= day <= flt.end:
            in_range.append(r)
    filtered = in_range

    if flt.status:
        filtered = _keep_entries(filtered, lambda e: e.status == flt.status)

    if flt.student_id and factory.for_viewer(viewer).allows_student_filter:
        filtered = _keep_entries(filtered, lambda e: e.student_id == flt.student_id)

    return filtered


def sort_by_date_desc(records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    """Newest first. Equal dates keep their input order (sorted() is stable)."""
    return sorted(records, key=lambda r: r.date, reverse=True)


@dataclass(frozen=True)
class Page:
    items: Sequence = field(default_factory=tuple)
    page: int = 1
    per_page: int = RECORDS_PER_PAGE
    total_items: int = 0
    total_pages: int = 0


def paginate(items: Sequence, page: int, per_page: int = RECORDS_PER_PAGE) -> Page:
    page = max(int(page or 1), 1)
    start = (page - 1) * per_page
    return Page(
        items=tuple(items[start:start + per_page]),
        page=page,
        per_page=per_page,
        total_items=len(items),
        total_pages=math.ceil(len(items) / per_page),
    )
