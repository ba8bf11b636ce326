"""Weekly load summary."""

from __future__ import annotations

from collections import Counter

import numpy as np

from timetable.schema import WEEKDAYS, Event
from timetable.timefmt import pad_time, to_minutes


def _minutes(value: str) -> int:
    minutes = to_minutes(pad_time(value))
    return -1 if minutes is None else minutes


def weekly_load(events: list[Event]) -> dict[str, int]:
    """Busy minutes of fixed-time events per weekday."""

    fixed = [event for event in events if not event.is_deadline and event.day_index >= 0]
    if not fixed:
        return {day: 0 for day in WEEKDAYS}

    days = np.array([event.day_index for event in fixed], dtype=int)
    starts = np.array([_minutes(event.start) for event in fixed], dtype=int)
    ends = np.array([_minutes(event.end) for event in fixed], dtype=int)

    durations = np.where((starts >= 0) & (ends > starts), ends - starts, 0)
    totals = np.bincount(days, weights=durations, minlength=len(WEEKDAYS))
    return {day: int(total) for day, total in zip(WEEKDAYS, totals)}


def build_summary(events: list[Event]) -> dict:
    """Counts and load figures for the schedule."""

    per_day = Counter(event.day for event in events)
    return {
        "total_events": len(events),
        "fixed": sum(1 for event in events if not event.is_deadline),
        "deadlines": sum(1 for event in events if event.is_deadline),
        "dependencies": sum(1 for event in events if event.depends_on),
        "events_per_day": {day: per_day.get(day, 0) for day in WEEKDAYS},
        "busy_minutes": weekly_load(events),
    }
