from __future__ import annotations

from typing import Optional

from ..storage.record_store import RecordStore
from .model import UserProfile


class StoredUserRepository:
    """UserRepository over the teacher/student collections of the record store."""

    def __init__(self, records: RecordStore):
        self._records = records

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        data = self._records.load()
        for user in (*data.teachers, *data.students):
            if user.email == email:
                return user
        return None
