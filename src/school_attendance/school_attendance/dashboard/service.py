from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.factory import VisibilityStrategyFactory
from ..attendance.filters import scope_to_viewer, sort_by_date_desc
from ..attendance.service import record_to_ui
from ..attendance.stats import count_by_status, daily_breakdown, status_slices
from ..common.datetime_utils import format_iso_date, weekday_name
from ..core.constants import RECENT_RECORDS_LIMIT, TREND_DAYS
from ..storage.record_store import RecordStore
from ..users.model import Teacher, UserProfile


class DashboardService:
    """Read-model for the landing page of both roles."""

    def __init__(self, records: RecordStore, *, factory: Optional[VisibilityStrategyFactory] = None):
        self._records = records
        self._factory = factory or VisibilityStrategyFactory()

    def overview(self, viewer: UserProfile, *, today: date) -> dict:
        data = self._records.load()
        strategy = self._factory.for_viewer(viewer)
        relevant = strategy.visible_classes(data.classes)
        visible = sort_by_date_desc(scope_to_viewer(data.attendance_records, data.classes, viewer, factory=self._factory))

        today_s = format_iso_date(today)
        today_records = [r for r in visible if r.date == today_s]
        stats = count_by_status(visible)

        weekday = weekday_name(today)
        schedule = []
        for cls in relevant:
            slots = [s.to_dict() for s in cls.schedule if s.day.value == weekday]
            if not slots:
                continue
            qr = next((r.qr_code for r in today_records if r.class_id == cls.id), None)
            schedule.append({"classId": cls.id, "className": cls.name, "slots": slots, "qrCode": qr})

        by_day = []
        if isinstance(viewer, Teacher):
            by_day = [d.to_dict() for d in daily_breakdown(visible, today, days=TREND_DAYS)]

        return {
            "today": today_s,
            "stats": stats.to_dict(),
            "chart": status_slices(stats),
            "classes": [{"id": c.id, "name": c.name} for c in relevant],
            "today_attendance": [record_to_ui(r, data) for r in today_records],
            "today_schedule": schedule,
            "by_day": by_day,
            "recent": [record_to_ui(r, data) for r in visible[:RECENT_RECORDS_LIMIT]],
        }
