"""Backup the storage file.

Note: the copy is taken as-is; run it while the app is idle.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "school_attendance"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from school_attendance.config import get_settings_module
from school_attendance.core.constants import STORAGE_FILENAME


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    source = Path(settings.DATA_DIR) / STORAGE_FILENAME
    if not source.exists():
        raise SystemExit(f"Nothing to back up: {source} does not exist. Run scripts/seed_storage.py first.")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"storage_{ts}.json"
    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
