from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..core.enums import Role


@dataclass(frozen=True)
class Teacher:
    """Domain entity: Teacher.

    Note: Plain data object, storage code lives in the record store.
    """

    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    subjects: tuple[str, ...] = field(default_factory=tuple)
    classes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def role(self) -> Role:
        return Role.TEACHER

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "subjects": list(self.subjects),
            "classes": list(self.classes),
        }
        if self.avatar is not None:
            data["avatar"] = self.avatar
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Teacher":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            avatar=data.get("avatar"),
            subjects=tuple(data.get("subjects") or ()),
            classes=tuple(data.get("classes") or ()),
        )


@dataclass(frozen=True)
class Student:
    """Domain entity: Student. `class_name` refers to SchoolClass.name."""

    id: str
    name: str
    email: str
    student_id: str
    class_name: str
    grade: str
    department: str
    avatar: Optional[str] = None

    @property
    def role(self) -> Role:
        return Role.STUDENT

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "studentId": self.student_id,
            "class": self.class_name,
            "grade": self.grade,
            "department": self.department,
        }
        if self.avatar is not None:
            data["avatar"] = self.avatar
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            student_id=str(data["studentId"]),
            class_name=data["class"],
            grade=str(data["grade"]),
            department=data["department"],
            avatar=data.get("avatar"),
        )


UserProfile = Union[Teacher, Student]


def user_from_dict(data: dict) -> UserProfile:
    """Decode a stored user, dispatching on its role tag."""

    role = Role(data["role"])
    if role == Role.TEACHER:
        return Teacher.from_dict(data)
    return Student.from_dict(data)
