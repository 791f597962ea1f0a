from __future__ import annotations

from typing import Optional

from ..attendance.factory import VisibilityStrategyFactory
from ..core.constants import UNKNOWN_LABEL
from ..storage.record_store import RecordStore
from ..users.model import UserProfile


class ClassService:
    def __init__(self, records: RecordStore, *, factory: Optional[VisibilityStrategyFactory] = None):
        self._records = records
        self._factory = factory or VisibilityStrategyFactory()

    def for_viewer(self, viewer: UserProfile, *, search: str = "") -> list[dict]:
        """Teacher: owned classes. Student: their own class. Optional name/grade search."""

        data = self._records.load()
        classes = self._factory.for_viewer(viewer).visible_classes(data.classes)

        term = (search or "").strip().lower()
        if term:
            classes = [c for c in classes if term in c.name.lower() or term in c.grade.lower()]

        out = []
        for c in classes:
            teacher = data.find_teacher(c.teacher)
            item = c.to_dict()
            item["teacherName"] = teacher.name if teacher else UNKNOWN_LABEL
            item["studentCount"] = len(c.students)
            out.append(item)
        return out
