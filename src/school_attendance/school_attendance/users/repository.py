from __future__ import annotations

from typing import Optional, Protocol

from .model import UserProfile


class UserRepository(Protocol):
    """Read access to the people known to the system.

    Note (DIP): services depend on this interface, not on a concrete storage.
    """

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        raise NotImplementedError
