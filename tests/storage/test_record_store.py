from __future__ import annotations

import json
import logging
from dataclasses import replace

from school_attendance.core.constants import ATTENDANCE_KEY, CLASSES_KEY, STUDENTS_KEY, TEACHERS_KEY
from school_attendance.storage.memory_storage import InMemoryStorage
from school_attendance.storage.record_store import RecordStore

ALL_KEYS = [ATTENDANCE_KEY, CLASSES_KEY, STUDENTS_KEY, TEACHERS_KEY]


def test_first_load_seeds_and_persists_every_collection(storage, record_store):
    data = record_store.load()

    assert len(data.classes) == 3
    assert len(data.students) == 3
    assert len(data.teachers) == 2
    assert len(data.attendance_records) == 21
    assert storage.keys() == sorted(ALL_KEYS)


def test_seed_ids_are_derived_from_date_and_class(collections):
    assert all(r.id == f"{r.date}-class-{r.class_id}" for r in collections.attendance_records)


def test_load_prefers_persisted_collections(storage, record_store, collections):
    trimmed = replace(collections, students=collections.students[:1])
    record_store.save(trimmed)

    again = RecordStore(storage).load()

    assert [s.id for s in again.students] == ["1"]
    assert again.attendance_records == collections.attendance_records


def test_parse_failure_falls_back_to_seed_for_that_collection_only(fixed_now, caplog):
    storage = InMemoryStorage({STUDENTS_KEY: "{not json", TEACHERS_KEY: json.dumps([])})
    store = RecordStore(storage, today=lambda: fixed_now.date())

    with caplog.at_level(logging.ERROR):
        data = store.load()

    assert len(data.students) == 3
    assert data.teachers == ()
    assert STUDENTS_KEY in caplog.text
    # the repaired collection was written back
    assert json.loads(storage.get_item(STUDENTS_KEY))[0]["studentId"] == "2023001"


def test_bad_enum_value_is_a_parse_failure(fixed_now, caplog):
    bad = [{"id": "x", "classId": "1", "date": "2026-03-18", "records": [{"studentId": "1", "status": "sick"}]}]
    storage = InMemoryStorage({ATTENDANCE_KEY: json.dumps(bad)})

    with caplog.at_level(logging.ERROR):
        data = RecordStore(storage, today=lambda: fixed_now.date()).load()

    assert len(data.attendance_records) == 21
    assert ATTENDANCE_KEY in caplog.text


def test_non_string_date_is_a_parse_failure(fixed_now, caplog):
    bad = [
        {"id": "a", "classId": "1", "date": "2026-03-18", "records": [{"studentId": "1", "status": "present"}]},
        {"id": "b", "classId": "1", "date": None, "records": [{"studentId": "1", "status": "present"}]},
    ]
    storage = InMemoryStorage({ATTENDANCE_KEY: json.dumps(bad)})

    with caplog.at_level(logging.ERROR):
        data = RecordStore(storage, today=lambda: fixed_now.date()).load()

    assert len(data.attendance_records) == 21
    assert all(isinstance(r.date, str) for r in data.attendance_records)
    assert ATTENDANCE_KEY in caplog.text


def test_mutate_saves_all_collections(storage, record_store):
    record_store.load()
    storage.remove_item(CLASSES_KEY)

    record_store.mutate(lambda data: replace(data, attendance_records=()))

    assert json.loads(storage.get_item(ATTENDANCE_KEY)) == []
    assert storage.get_item(CLASSES_KEY) is not None


def test_reset_restores_fixtures(record_store, collections):
    record_store.save(replace(collections, attendance_records=()))

    record_store.reset()

    assert len(record_store.load().attendance_records) == 21


def test_stored_json_uses_original_key_names(storage, collections):
    stored = json.loads(storage.get_item(STUDENTS_KEY))[0]

    assert set(stored) >= {"id", "name", "email", "role", "studentId", "class", "grade", "department"}
    assert stored["role"] == "student"
