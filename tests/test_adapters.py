import json
import logging

import pytest

from timetable.adapters.json_adapter import dumps, from_record, loads, parse, to_record


def test_json_parse_success(tmp_path):
    path = tmp_path / "schedule.json"
    payload = [
        {"id": "1", "event": "Gym", "day": "Monday", "start": "07:00", "end": "08:00", "type": "fixed", "depends_on": None},
        {"id": "2", "event": "Essay", "day": "Friday", "start": "N/A", "end": "23:59", "type": "deadline", "depends_on": "Gym"},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    events = parse(str(path))
    assert len(events) == 2
    assert events[0].name == "Gym"
    assert events[1].is_deadline
    assert events[1].depends_on == "Gym"


def test_json_parse_not_a_list(tmp_path):
    path = tmp_path / "schedule.json"
    path.write_text(json.dumps({"id": "1"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse(str(path))


def test_from_record_missing_id():
    with pytest.raises(ValueError, match="Item 3"):
        from_record({"event": "Gym", "day": "Monday"}, 3)


def test_from_record_blank_name_and_day_become_empty():
    event = from_record({"id": "1", "event": "", "start": "10:00", "end": "11:00"}, 1)
    assert (event.name, event.day) == ("", "")


def test_from_record_normalizes_type():
    event = from_record({"id": "1", "event": "Essay", "day": "Monday", "type": " Deadline "}, 1)
    assert (event.kind, event.start, event.end) == ("deadline", "N/A", "23:59")
    other = from_record({"id": "2", "event": "Walk", "day": "Monday", "type": "dependency", "start": "9:00"}, 2)
    assert other.kind == "fixed"


def test_loads_skips_only_unreadable_records(caplog):
    text = json.dumps(
        [
            {"id": "1", "event": "Gym", "day": "Monday", "start": "07:00", "end": "08:00", "type": "fixed"},
            {"event": "No id", "day": "Monday"},
            "not an object",
            {"id": "4", "event": "Essay", "day": "Friday", "type": "deadline"},
        ]
    )
    with caplog.at_level(logging.WARNING, logger="timetable.adapters.json_adapter"):
        events = loads(text)
    assert [event.id for event in events] == ["1", "4"]
    assert "Item 2" in caplog.text
    assert "Item 3" in caplog.text


def test_from_record_coerces_deadline_and_empty_dependency():
    event = from_record(
        {"id": "1", "event": "Essay", "day": "Monday", "start": "10:00", "end": "11:00", "type": "deadline", "depends_on": ""},
        1,
    )
    assert (event.start, event.end) == ("N/A", "23:59")
    assert event.depends_on is None


def test_from_record_keeps_unknown_day():
    event = from_record({"id": "1", "event": "Odd", "day": "Funday", "start": "10:00", "end": "11:00", "type": "fixed"}, 1)
    assert event.day == "Funday"


def test_to_record_key_order_and_dumps():
    event = from_record({"id": "7", "event": "Gym", "day": "Monday", "start": "07:00", "end": "08:00", "type": "fixed"}, 1)
    assert list(to_record(event)) == ["id", "event", "day", "start", "end", "type", "depends_on"]
    text = dumps([event])
    assert text.startswith("[\n  {\n    \"id\": \"7\"")
    assert json.loads(text)[0]["depends_on"] is None
