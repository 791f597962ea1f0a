from __future__ import annotations

import json

from school_attendance.storage.json_file_storage import JsonFileStorage


def test_missing_file_reads_as_empty(tmp_path):
    storage = JsonFileStorage(tmp_path / "storage.json")

    assert storage.get_item("anything") is None


def test_set_many_writes_one_document(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    storage = JsonFileStorage(path)

    storage.set_many({"a": "[1]", "b": "[2]"})
    storage.set_item("c", "[3]")

    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "[1]", "b": "[2]", "c": "[3]"}
    assert [p.name for p in path.parent.iterdir()] == ["storage.json"]


def test_remove_item(tmp_path):
    storage = JsonFileStorage(tmp_path / "storage.json")
    storage.set_many({"a": "1", "b": "2"})

    storage.remove_item("a")
    storage.remove_item("missing")

    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get_item("a") is None

    storage.set_item("a", "1")
    assert storage.get_item("a") == "1"
