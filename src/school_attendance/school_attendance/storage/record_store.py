from __future__ import annotations

import json
import logging
from datetime import date
from typing import Callable, Optional

from ..attendance.model import AttendanceRecord
from ..classes.model import SchoolClass
from ..common.datetime_utils import now_local
from ..core.constants import ATTENDANCE_KEY, CLASSES_KEY, STUDENTS_KEY, TEACHERS_KEY
from ..core.exceptions import StorageParseError
from ..users.model import Student, Teacher
from .fixtures import build_fixtures
from .model import Collections
from .repository import KeyValueStorage

logger = logging.getLogger(__name__)

# (collection attribute, storage key, item decoder)
_COLLECTION_KEYS = (
    ("classes", CLASSES_KEY, SchoolClass.from_dict),
    ("students", STUDENTS_KEY, Student.from_dict),
    ("teachers", TEACHERS_KEY, Teacher.from_dict),
    ("attendance_records", ATTENDANCE_KEY, AttendanceRecord.from_dict),
)


def decode_collection(key: str, raw: str, decoder: Callable[[dict], object]) -> tuple:
    try:
        items = json.loads(raw)
        if not isinstance(items, list):
            raise TypeError(f"expected a list, got {type(items).__name__}")
        return tuple(decoder(item) for item in items)
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise StorageParseError(key, str(e)) from e


def encode_collection(items) -> str:
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


class RecordStore:
    """Owns the class/student/teacher/attendance collections.

    Collections missing from storage (or unreadable) are seeded from the
    fixture for `today`; writes always cover all four keys at once.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        fixtures: Callable[[date], Collections] = build_fixtures,
        today: Optional[Callable[[], date]] = None,
    ):
        self._storage = storage
        self._fixtures = fixtures
        self._today = today or (lambda: now_local().date())

    def load(self) -> Collections:
        seeds: Optional[Collections] = None
        values: dict[str, tuple] = {}
        seeded = False

        for attr, key, decoder in _COLLECTION_KEYS:
            raw = self._storage.get_item(key)
            if raw is not None:
                try:
                    values[attr] = decode_collection(key, raw, decoder)
                    continue
                except StorageParseError as e:
                    logger.error("Error loading %s, falling back to seed data: %s", key, e)

            if seeds is None:
                seeds = self._fixtures(self._today())
            values[attr] = getattr(seeds, attr)
            seeded = True

        collections = Collections(**values)
        if seeded:
            logger.info("Seeded record store with default data")
            self.save(collections)
        return collections

    def save(self, collections: Collections) -> None:
        self._storage.set_many(
            {key: encode_collection(getattr(collections, attr)) for attr, key, _ in _COLLECTION_KEYS}
        )

    def mutate(self, fn: Callable[[Collections], Collections]) -> Collections:
        updated = fn(self.load())
        self.save(updated)
        return updated

    def reset(self) -> Collections:
        collections = self._fixtures(self._today())
        self.save(collections)
        return collections
