"""JSON adapter for timetable events."""

from __future__ import annotations

import json
import logging

from timetable.schema import DEADLINE, DEADLINE_END, FIXED, KINDS, NO_START, Event

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id",)


def from_record(item: dict, index: int) -> Event:
    """Build an Event from one persisted record.

    Only ``id`` is required. A missing name or day becomes ``""``; the
    views skip events whose day is not a weekday label.
    """

    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object, got {type(item).__name__}")

    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    kind = str(item.get("type") or FIXED).strip().lower()
    if kind not in KINDS:
        logger.warning("Item %d: unknown type %r, treating as %s", index, item.get("type"), FIXED)
        kind = FIXED
    if kind == DEADLINE:
        start, end = NO_START, DEADLINE_END
    else:
        start = str(item.get("start") or NO_START).strip()
        end = str(item.get("end") or "").strip()

    depends_raw = item.get("depends_on")
    depends_on = str(depends_raw).strip() if depends_raw else None

    return Event(
        id=str(item["id"]).strip(),
        name=str(item.get("event") or "").strip(),
        day=str(item.get("day") or "").strip(),
        start=start,
        end=end,
        kind=kind,
        depends_on=depends_on or None,
    )


def to_record(event: Event) -> dict:
    """Persisted form of an Event; key order is part of the file format."""

    return {
        "id": event.id,
        "event": event.name,
        "day": event.day,
        "start": event.start,
        "end": event.end,
        "type": event.kind,
        "depends_on": event.depends_on,
    }


def loads(text: str) -> list[Event]:
    """Decode a schedule, skipping (and logging) records that cannot be read."""

    payload = json.loads(text)
    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    events: list[Event] = []
    for i, item in enumerate(payload, start=1):
        try:
            events.append(from_record(item, i))
        except ValueError as exc:
            logger.warning("Skipping record: %s", exc)
    return events


def dumps(events: list[Event]) -> str:
    return json.dumps([to_record(event) for event in events], indent=2, ensure_ascii=False)


def parse(file_path: str) -> list[Event]:
    """Parse a schedule JSON file into events."""

    with open(file_path, encoding="utf-8") as handle:
        return loads(handle.read())
