"""Core data schema for timetable events."""

from dataclasses import dataclass
from typing import Optional

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

NO_START = "N/A"
DEADLINE_END = "23:59"

FIXED = "fixed"
DEADLINE = "deadline"
KINDS = (FIXED, DEADLINE)


def weekday_index(label: str) -> int:
    """Return 0..6 for a canonical weekday label, -1 otherwise."""

    try:
        return WEEKDAYS.index(label)
    except ValueError:
        return -1


@dataclass
class Event:
    """Scheduled event record shared by the store, views and editor."""

    id: str
    name: str
    day: str
    start: str
    end: str
    kind: str = FIXED
    depends_on: Optional[str] = None

    @property
    def is_deadline(self) -> bool:
        return self.kind == DEADLINE

    @property
    def day_index(self) -> int:
        return weekday_index(self.day)
