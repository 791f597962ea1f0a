from __future__ import annotations

from typing import Mapping, Optional

from flask import session


class FlaskSessionStorage:
    """Per-browser storage on top of Flask's signed cookie session.

    Only small values belong here (the cookie is size-limited), which is why
    it holds the signed-in user and nothing else.
    """

    def get_item(self, key: str) -> Optional[str]:
        value = session.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        session[key] = value

    def remove_item(self, key: str) -> None:
        session.pop(key, None)

    def set_many(self, items: Mapping[str, str]) -> None:
        for key, value in items.items():
            session[key] = value
