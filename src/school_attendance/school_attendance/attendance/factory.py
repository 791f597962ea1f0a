from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError
from ..users.model import Student, Teacher, UserProfile
from .strategies.base import VisibilityStrategy
from .strategies.student_strategy import StudentVisibility
from .strategies.teacher_strategy import TeacherVisibility


@dataclass
class VisibilityStrategyFactory:
    """Factory Pattern: choose the visibility rules for a viewer's role."""

    def for_viewer(self, viewer: UserProfile) -> VisibilityStrategy:
        if isinstance(viewer, Teacher):
            return TeacherVisibility(viewer)
        if isinstance(viewer, Student):
            return StudentVisibility(viewer)
        raise ValidationError(f"Unsupported viewer type: {type(viewer).__name__}")
