from __future__ import annotations

import pytest

from school_attendance.core.exceptions import AuthorizationError
from school_attendance.users.service import StudentService


@pytest.fixture
def service(record_store):
    return StudentService(record_store)


def test_teacher_sees_students_of_owned_classes(service, teacher):
    rows = service.for_teacher(teacher)

    assert [r["student"]["name"] for r in rows] == ["Alice Cooper", "Carol Williams"]
    assert rows[0]["stats"]["total"] == 7
    assert rows[0]["stats"]["absent"] == 2
    assert rows[0]["stats"]["percentage"] == 71.4


@pytest.mark.parametrize("term", ["carol", "2023003", "WILLIAMS@"])
def test_search_matches_name_student_id_or_email(service, teacher, term):
    rows = service.for_teacher(teacher, search=term)

    assert [r["student"]["id"] for r in rows] == ["3"]


def test_class_filter(service, teacher):
    rows = service.for_teacher(teacher, class_name="TKJ-10A")

    assert [r["student"]["id"] for r in rows] == ["1"]


def test_students_cannot_list_rosters(service, student):
    with pytest.raises(AuthorizationError):
        service.for_teacher(student)
