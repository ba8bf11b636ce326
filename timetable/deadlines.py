"""Deadline priority view."""

from __future__ import annotations

import heapq
import itertools

from timetable.schema import Event


class DeadlineQueue:
    """Binary min-heap of deadline events keyed by weekday index.

    Ties on the weekday are broken by insertion order, so same-day
    deadlines come out in the order they were pushed. Events with a
    non-canonical day carry index -1 and therefore lead the ordering.
    """

    def __init__(self, events: list[Event] | None = None) -> None:
        self._heap: list[tuple[int, int, Event]] = []
        self._counter = itertools.count()
        for event in events or []:
            self.push(event)

    def push(self, event: Event) -> None:
        heapq.heappush(self._heap, (event.day_index, next(self._counter), event))

    def peek(self) -> Event | None:
        return self._heap[0][2] if self._heap else None

    def pop(self) -> Event | None:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def ordered(self) -> list[Event]:
        """Non-destructive sorted materialization."""

        return [entry[2] for entry in sorted(self._heap)]

    def from_day(self, weekday: int) -> list[Event]:
        return [event for event in self.ordered() if event.day_index >= weekday]


def build_deadline_queue(events: list[Event]) -> DeadlineQueue:
    return DeadlineQueue([event for event in events if event.is_deadline])


def build_deadline_ordering(events: list[Event]) -> list[Event]:
    """All deadline events ordered by weekday, input order kept within a day."""

    return build_deadline_queue(events).ordered()


def deadlines_from(ordering: list[Event], weekday: int) -> list[Event]:
    """Deadlines due on ``weekday`` (0 = Monday) or later in the week."""

    return [event for event in ordering if event.day_index >= weekday]
