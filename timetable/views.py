"""Assemble the derived views for one selected day."""

from __future__ import annotations

from typing import Any

from timetable.day_index import build_day_index
from timetable.deadlines import build_deadline_ordering, deadlines_from
from timetable.graph import build_graph
from timetable.lookup import EventIndex, reference_warnings
from timetable.schema import WEEKDAYS, Event, weekday_index

ALL_DAYS = "all"


def _pairs_for_day(pairs: list[tuple[str, str]], day: str, index: EventIndex) -> list[tuple[str, str]]:
    selected = []
    for source, target in pairs:
        source_event = index.find(source)
        target_event = index.find(target)
        if (source_event and source_event.day == day) or (target_event and target_event.day == day):
            selected.append((source, target))
    return selected


def day_view(events: list[Event], day: str) -> dict[str, Any]:
    """Build every view the console and web page show for ``day``.

    ``day`` is a weekday label or ``"all"``. Views are rebuilt from
    ``events`` on every call.
    """

    if day != ALL_DAYS and weekday_index(day) < 0:
        raise ValueError(f"Unknown day '{day}'")

    by_day = build_day_index(events)
    ordering = build_deadline_ordering(events)
    graph = build_graph(events)
    index = EventIndex(events)

    if day == ALL_DAYS:
        day_events = [event for bucket in by_day.values() for event in bucket]
        upcoming = deadlines_from(ordering, 0)
        pairs = graph.edges()
    else:
        day_events = by_day[day]
        upcoming = deadlines_from(ordering, weekday_index(day))
        pairs = _pairs_for_day(graph.edges(), day, index)

    cycle = graph.find_cycle()
    return {
        "day": day,
        "events": day_events,
        "upcoming_deadlines": upcoming,
        "dependencies": pairs,
        "has_dependencies": len(graph) > 0,
        "has_cycle": cycle is not None,
        "cycle": cycle or [],
        "warnings": reference_warnings(events, index),
    }


def day_choices() -> list[str]:
    return [ALL_DAYS, *WEEKDAYS]
