from __future__ import annotations

from typing import Mapping, Optional, Protocol


class KeyValueStorage(Protocol):
    """String-keyed blob storage (values are JSON strings).

    Note (DIP): stores depend on this interface; the concrete backend is a
    JSON file, the Flask session cookie, or a dict in tests.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def set_many(self, items: Mapping[str, str]) -> None:
        """Write several keys together (atomically where the backend allows)."""

        raise NotImplementedError
