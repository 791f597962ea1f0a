from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import format_clock, now_local
from ..common.latency import simulate_latency
from ..common.validators import require_iso_date, require_non_empty, require_status
from ..core.constants import UNKNOWN_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..storage.model import Collections
from ..storage.record_store import RecordStore
from ..users.model import UserProfile
from ..users.permissions import require_teacher
from .export import write_attendance_csv
from .factory import VisibilityStrategyFactory
from .filters import AttendanceFilter, Page, filter_attendance, paginate, sort_by_date_desc
from .model import AttendanceRecord, AttendanceStats, StudentAttendance, make_qr_code, make_record_id
from .stats import count_by_status


@dataclass(frozen=True)
class HistoryView:
    page: Page
    stats: AttendanceStats


def record_to_ui(record: AttendanceRecord, collections: Collections) -> dict:
    """Stored record plus the class and student names a table needs."""

    cls = collections.find_class(record.class_id)
    data = record.to_dict()
    data["className"] = cls.name if cls else UNKNOWN_LABEL
    for entry in data["records"]:
        student = collections.find_student(entry["studentId"])
        entry["studentName"] = student.name if student else UNKNOWN_LABEL
    return data


def parse_entries(raw: Iterable[dict]) -> tuple[StudentAttendance, ...]:
    """Validate submitted entries (JSON objects) into StudentAttendance."""

    if raw is not None and not isinstance(raw, (list, tuple)):
        raise ValidationError("Attendance entries must be a list")
    entries: list[StudentAttendance] = []
    for item in raw or ():
        if not isinstance(item, dict):
            raise ValidationError("Each attendance entry must be an object")
        entries.append(
            StudentAttendance(
                student_id=require_non_empty(str(item.get("studentId") or ""), "studentId"),
                status=require_status(item.get("status")),
                time_in=item.get("timeIn") or None,
                notes=item.get("notes"),
            )
        )
    return tuple(entries)


class AttendanceService:
    """Use cases: review (history/export) and mark attendance."""

    def __init__(
        self,
        records: RecordStore,
        *,
        factory: Optional[VisibilityStrategyFactory] = None,
        latency_seconds: float = 0.0,
        clock: Callable[[], datetime] = now_local,
    ):
        self._records = records
        self._factory = factory or VisibilityStrategyFactory()
        self._latency = float(latency_seconds)
        self._clock = clock

    def _filtered(self, viewer: UserProfile, flt: AttendanceFilter) -> tuple[Collections, list[AttendanceRecord]]:
        data = self._records.load()
        rows = filter_attendance(data.attendance_records, data.classes, viewer, flt, factory=self._factory)
        return data, sort_by_date_desc(rows)

    def history(self, viewer: UserProfile, flt: AttendanceFilter, *, page: int = 1) -> HistoryView:
        data, rows = self._filtered(viewer, flt)
        current = paginate(rows, page)
        current = replace(current, items=tuple(record_to_ui(r, data) for r in current.items))
        return HistoryView(page=current, stats=count_by_status(rows))

    def export_csv(self, viewer: UserProfile, flt: AttendanceFilter) -> str:
        data, rows = self._filtered(viewer, flt)
        return write_attendance_csv(rows, data.classes, data.students)

    def _owned_class(self, viewer: UserProfile, class_id: Optional[str], data: Collections):
        teacher = require_teacher(viewer)
        class_id = require_non_empty(class_id, "Class")
        cls = data.find_class(class_id)
        if not cls:
            raise ValidationError("Class not found")
        if cls.teacher != teacher.id:
            raise AuthorizationError("You do not teach this class")
        return teacher, cls

    def default_roster(self, viewer: UserProfile, class_id: Optional[str], *, now: Optional[datetime] = None) -> list[StudentAttendance]:
        """Every enrolled student marked present at the current time."""

        now = now or self._clock()
        data = self._records.load()
        _, cls = self._owned_class(viewer, class_id, data)
        return [
            StudentAttendance(
                student_id=s.id,
                status=AttendanceStatus.PRESENT,
                time_in=format_clock(now),
                notes="",
            )
            for s in data.students
            if s.id in cls.students
        ]

    def submit(
        self,
        viewer: UserProfile,
        *,
        class_id: Optional[str],
        date: Optional[str],
        entries: Iterable[StudentAttendance],
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = now or self._clock()
        teacher, cls = self._owned_class(viewer, class_id, self._records.load())
        date = require_iso_date(date, "Date")
        entries = tuple(entries)
        if not entries:
            raise ValidationError("No students to mark attendance for")

        record_id = make_record_id(date, cls.id)
        saved: dict[str, AttendanceRecord] = {}

        def apply(data: Collections) -> Collections:
            existing = next((r for r in data.attendance_records if r.id == record_id), None)
            record = AttendanceRecord(
                id=record_id,
                class_id=cls.id,
                date=date,
                created_by=teacher.id,
                last_updated=now.isoformat(),
                qr_code=existing.qr_code if existing else make_qr_code(date, cls.id),
                records=entries,
            )
            saved["record"] = record
            if existing:
                updated = tuple(record if r.id == record_id else r for r in data.attendance_records)
            else:
                updated = data.attendance_records + (record,)
            return replace(data, attendance_records=updated)

        simulate_latency(self._latency)
        self._records.mutate(apply)
        return saved["record"]
