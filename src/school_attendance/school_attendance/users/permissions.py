from __future__ import annotations

from ..core.exceptions import AuthorizationError
from .model import Teacher, UserProfile


def require_teacher(viewer: UserProfile) -> Teacher:
    if not isinstance(viewer, Teacher):
        raise AuthorizationError("Only teachers can do this")
    return viewer
