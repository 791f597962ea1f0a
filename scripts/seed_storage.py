from __future__ import annotations

import importlib
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "school_attendance"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from school_attendance.config import get_settings_module
from school_attendance.core.constants import STORAGE_FILENAME
from school_attendance.storage.json_file_storage import JsonFileStorage
from school_attendance.storage.record_store import RecordStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = JsonFileStorage(Path(settings.DATA_DIR) / STORAGE_FILENAME)

    collections = RecordStore(storage).reset()

    print(
        f"OK: Seeded {storage.path} -> "
        f"classes={len(collections.classes)} students={len(collections.students)} "
        f"teachers={len(collections.teachers)} records={len(collections.attendance_records)}"
    )


if __name__ == "__main__":
    main()
