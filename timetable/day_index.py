"""Per-weekday buckets ordered by start time."""

from __future__ import annotations

import bisect
import logging
from dataclasses import replace

from timetable.schema import NO_START, WEEKDAYS, Event
from timetable.timefmt import pad_time

logger = logging.getLogger(__name__)


def _start_key(event: Event) -> tuple[int, str]:
    # Zero-padded "HH:MM" compares chronologically as a string; N/A sorts last.
    if event.start == NO_START:
        return (1, "")
    return (0, event.start)


def insert_sorted_by_start(bucket: list[Event], event: Event) -> None:
    """Insert after every event starting at or before ``event``."""

    if event.start == NO_START:
        bucket.append(event)
        return
    position = bisect.bisect_right(bucket, _start_key(event), key=_start_key)
    bucket.insert(position, event)


def build_day_index(events: list[Event]) -> dict[str, list[Event]]:
    """Bucket events by weekday, each bucket ordered by start time.

    Every weekday is present in the result. Events whose ``day`` is not a
    canonical weekday label are skipped with a warning. Start times are
    padded to "HH:MM" on the returned copies; the input is not modified.
    """

    index: dict[str, list[Event]] = {day: [] for day in WEEKDAYS}
    for event in events:
        bucket = index.get(event.day)
        if bucket is None:
            logger.warning("Skipping event %r: unknown day %r", event.name, event.day)
            continue
        insert_sorted_by_start(bucket, replace(event, start=pad_time(event.start)))
    return index
