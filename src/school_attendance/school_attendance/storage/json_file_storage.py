from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Key-value storage kept in a single JSON document on disk.

    Every write rewrites the whole document through a temp file and
    `os.replace`, so `set_many` lands all keys or none of them.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

    def set_many(self, items: Mapping[str, str]) -> None:
        current = self._read_all()
        current.update(items)
        self._write_all(current)

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Storage file %s is unreadable, starting empty: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Storage file %s does not hold an object, starting empty", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Mapping[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".storage-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dict(items), f, ensure_ascii=False, indent=4)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
