from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import AttendanceStatus


def make_record_id(date: str, class_id: str) -> str:
    """One record per (class, date); the id is derived from both."""
    return f"{date}-class-{class_id}"


def make_qr_code(date: str, class_id: str) -> str:
    return f"attendance-{class_id}-{date}"


@dataclass(frozen=True)
class StudentAttendance:
    """Embedded entry: one student's status on one attendance sheet."""

    student_id: str
    status: AttendanceStatus
    time_in: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"studentId": self.student_id, "status": self.status.value}
        if self.time_in is not None:
            data["timeIn"] = self.time_in
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "StudentAttendance":
        return cls(
            student_id=str(data["studentId"]),
            status=AttendanceStatus(data["status"]),
            time_in=data.get("timeIn"),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one class's attendance sheet for one date."""

    id: str
    class_id: str
    date: str
    created_by: str
    last_updated: str
    qr_code: str
    records: tuple[StudentAttendance, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "classId": self.class_id,
            "date": self.date,
            "createdBy": self.created_by,
            "lastUpdated": self.last_updated,
            "qrCode": self.qr_code,
            "records": [r.to_dict() for r in self.records],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        class_id = str(data["classId"])
        date = data["date"]
        if not isinstance(date, str):
            raise TypeError(f"date must be a string, got {type(date).__name__}")
        return cls(
            id=data.get("id") or make_record_id(date, class_id),
            class_id=class_id,
            date=date,
            created_by=str(data.get("createdBy", "")),
            last_updated=data.get("lastUpdated", ""),
            qr_code=data.get("qrCode") or make_qr_code(date, class_id),
            records=tuple(StudentAttendance.from_dict(r) for r in data.get("records") or ()),
        )


@dataclass(frozen=True)
class AttendanceStats:
    present: int
    absent: int
    late: int
    excused: int
    total: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "excused": self.excused,
            "total": self.total,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class DailyBreakdown:
    """Per-status counts for one calendar day (chart read-model)."""

    date: str
    label: str
    present: int
    absent: int
    late: int
    excused: int

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "label": self.label,
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "excused": self.excused,
        }
