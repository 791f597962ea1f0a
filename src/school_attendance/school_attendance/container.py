from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .attendance.factory import VisibilityStrategyFactory
from .attendance.service import AttendanceService
from .classes.service import ClassService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_DEMO_PASSWORD, STORAGE_FILENAME
from .dashboard.service import DashboardService
from .storage.json_file_storage import JsonFileStorage
from .storage.record_store import RecordStore
from .storage.repository import KeyValueStorage
from .users.service import AuthService, StudentService
from .users.stored_user_repository import StoredUserRepository


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    session_storage: KeyValueStorage
    clock: Callable[[], datetime]

    record_store: RecordStore
    users_repo: StoredUserRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    class_service: ClassService
    student_service: StudentService
    dashboard_service: DashboardService


def build_container(
    *,
    session_storage: KeyValueStorage,
    data_dir: str | Path = "data",
    storage: Optional[KeyValueStorage] = None,
    demo_password: str = DEFAULT_DEMO_PASSWORD,
    latency_seconds: float = 0.0,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    storage = storage or JsonFileStorage(Path(data_dir) / STORAGE_FILENAME)
    record_store = RecordStore(storage, today=lambda: clock().date())
    users_repo = StoredUserRepository(record_store)
    factory = VisibilityStrategyFactory()

    auth_service = AuthService(users_repo, session_storage, password=demo_password, latency_seconds=latency_seconds)
    attendance_service = AttendanceService(record_store, factory=factory, latency_seconds=latency_seconds, clock=clock)
    class_service = ClassService(record_store, factory=factory)
    student_service = StudentService(record_store)
    dashboard_service = DashboardService(record_store, factory=factory)

    return Container(
        storage=storage,
        session_storage=session_storage,
        clock=clock,
        record_store=record_store,
        users_repo=users_repo,
        auth_service=auth_service,
        attendance_service=attendance_service,
        class_service=class_service,
        student_service=student_service,
        dashboard_service=dashboard_service,
    )
