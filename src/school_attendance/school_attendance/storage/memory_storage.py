from __future__ import annotations

from typing import Mapping, Optional


class InMemoryStorage:
    """Dict-backed storage, used by tests and scripts."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def set_many(self, items: Mapping[str, str]) -> None:
        self._items.update(items)

    def keys(self) -> list[str]:
        return sorted(self._items)
