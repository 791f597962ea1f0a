from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..classes.model import SchoolClass
from ..common.datetime_utils import format_iso_date
from ..core.constants import UNKNOWN_LABEL
from ..users.model import Student
from .model import AttendanceRecord

CSV_HEADER = ["Date", "Class", "Student", "Status", "Time In", "Notes"]


def export_filename(today: date) -> str:
    return f"attendance_report_{format_iso_date(today)}.csv"


def write_attendance_csv(
    records: Iterable[AttendanceRecord],
    classes: Iterable[SchoolClass],
    students: Iterable[Student],
) -> str:
    """One row per student entry, in the order the records are given.

    Every data field is quoted; embedded quotes are doubled by the csv module.
    """

    class_names = {c.id: c.name for c in classes}
    student_names = {s.id: s.name for s in students}

    out = io.StringIO()
    out.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for record in records:
        class_name = class_names.get(record.class_id, UNKNOWN_LABEL)
        for entry in record.records:
            writer.writerow(
                [
                    record.date,
                    class_name,
                    student_names.get(entry.student_id, UNKNOWN_LABEL),
                    entry.status.value,
                    entry.time_in or "",
                    entry.notes or "",
                ]
            )
    return out.getvalue()
