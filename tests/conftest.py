from __future__ import annotations

from datetime import datetime

import pytest

from school_attendance.storage.memory_storage import InMemoryStorage
from school_attendance.storage.record_store import RecordStore


@pytest.fixture
def fixed_now() -> datetime:
    # A Wednesday: two of the seeded classes have a slot on it.
    return datetime(2026, 3, 18, 9, 15, 0)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def record_store(storage, fixed_now) -> RecordStore:
    return RecordStore(storage, today=lambda: fixed_now.date())


@pytest.fixture
def collections(record_store):
    return record_store.load()


@pytest.fixture
def teacher(collections):
    # John Smith owns classes 1 (TKJ-10A) and 3 (MM-12A)
    return collections.find_teacher("1")


@pytest.fixture
def other_teacher(collections):
    # Emily Johnson owns class 2 (RPL-10B)
    return collections.find_teacher("2")


@pytest.fixture
def student(collections):
    # Alice Cooper, class TKJ-10A
    return collections.find_student("1")
