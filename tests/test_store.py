import json
import logging

from helpers import deadline, fixed

from timetable.day_index import build_day_index
from timetable.store import ensure_store, load, save


def test_load_missing_file_returns_empty(tmp_path):
    assert load(tmp_path / "absent.json") == []


def test_load_malformed_file_logs_and_returns_empty(tmp_path, caplog):
    path = tmp_path / "schedule.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="timetable.store"):
        assert load(path) == []
    assert "Failed to read" in caplog.text


def test_save_then_load(tmp_path):
    path = tmp_path / "schedule.json"
    events = [fixed("1", "Gym", "Monday", "07:00", "08:00"), deadline("2", "Essay", "Friday", "Gym")]
    assert save(events, path) is True
    assert load(path) == events


def test_save_is_idempotent(tmp_path):
    path = tmp_path / "schedule.json"
    path.write_text(
        '[{"id": "1", "event": "Essay", "day": "Monday", "start": "9:00", "end": "1", "type": "deadline"}]',
        encoding="utf-8",
    )
    save(load(path), path)
    first = path.read_bytes()
    save(load(path), path)
    assert path.read_bytes() == first


def test_save_failure_returns_false(tmp_path, caplog):
    target = tmp_path / "missing-dir" / "schedule.json"
    with caplog.at_level(logging.ERROR, logger="timetable.store"):
        assert save([], target) is False
    assert "Failed to write" in caplog.text


def test_ensure_store_creates_empty_file(tmp_path):
    path = tmp_path / "schedule.json"
    assert ensure_store(path) is True
    assert path.read_text(encoding="utf-8") == "[]"
    assert load(path) == []


def test_load_keeps_valid_events_next_to_malformed_records(tmp_path):
    path = tmp_path / "schedule.json"
    path.write_text(
        json.dumps(
            [
                {"id": "1", "event": "Gym", "day": "Monday", "start": "07:00", "end": "08:00", "type": "fixed"},
                {"id": "2", "event": "Blank day", "day": "", "start": "09:00", "end": "10:00", "type": "fixed"},
                {"id": "3", "event": "Odd day", "day": "Funday", "start": "09:00", "end": "10:00", "type": "fixed"},
                {"id": "4", "event": "", "day": "Tuesday", "start": "N/A", "end": "23:59", "type": "deadline"},
            ]
        ),
        encoding="utf-8",
    )
    events = load(path)
    assert [event.id for event in events] == ["1", "2", "3", "4"]

    index = build_day_index(events)
    assert [event.id for bucket in index.values() for event in bucket] == ["1", "4"]

    save(events, path)
    assert [event.id for event in load(path)] == ["1", "2", "3", "4"]
