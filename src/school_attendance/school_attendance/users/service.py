from __future__ import annotations

import json
import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..attendance.stats import count_entries
from ..common.latency import simulate_latency
from ..core.constants import DEFAULT_DEMO_PASSWORD, USER_KEY
from ..core.exceptions import AuthenticationError
from ..storage.record_store import RecordStore
from ..storage.repository import KeyValueStorage
from .model import UserProfile, user_from_dict
from .permissions import require_teacher
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: the session store (sign in, sign out, who is signed in).

    Every account shares one demo password; nothing expires.
    """

    def __init__(
        self,
        users: UserRepository,
        session: KeyValueStorage,
        *,
        password: str = DEFAULT_DEMO_PASSWORD,
        latency_seconds: float = 0.0,
    ):
        self._users = users
        self._session = session
        self._password_hash = generate_password_hash(password)
        self._latency = float(latency_seconds)

    def sign_in(self, email: str, password: str) -> UserProfile:
        simulate_latency(self._latency)

        user = self._users.get_by_email(email or "")
        if not user or not check_password_hash(self._password_hash, password or ""):
            raise AuthenticationError("Invalid email or password")

        self._session.set_item(USER_KEY, json.dumps(user.to_dict(), ensure_ascii=False))
        return user

    def sign_out(self) -> None:
        self._session.remove_item(USER_KEY)

    def current_user(self) -> Optional[UserProfile]:
        raw = self._session.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            return user_from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Error parsing signed-in user, clearing it: %s", e)
            self._session.remove_item(USER_KEY)
            return None


class StudentService:
    """Use case: a teacher's roster across the classes they own."""

    def __init__(self, records: RecordStore):
        self._records = records

    def for_teacher(self, viewer: UserProfile, *, search: str = "", class_name: str = "") -> list[dict]:
        teacher = require_teacher(viewer)
        data = self._records.load()

        owned = [c for c in data.classes if c.teacher == teacher.id]
        term = (search or "").strip().lower()

        rows = []
        for student in data.students:
            if not any(student.id in c.students for c in owned):
                continue
            if term and not (
                term in student.name.lower()
                or term in student.student_id.lower()
                or term in student.email.lower()
            ):
                continue
            if class_name and student.class_name != class_name:
                continue

            stats = count_entries(
                e for r in data.attendance_records for e in r.records if e.student_id == student.id
            )
            rows.append({"student": student.to_dict(), "stats": stats.to_dict()})
        return rows
