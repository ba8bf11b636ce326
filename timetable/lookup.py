"""Resolve ``depends_on`` references against an event snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from timetable.schema import Event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ById:
    key: str
    event: Event


@dataclass(frozen=True)
class ByName:
    key: str
    event: Event


@dataclass(frozen=True)
class Dangling:
    key: str


Reference = Union[ById, ByName, Dangling]


class EventIndex:
    """In-memory lookup built once per render pass.

    A key matching an event id wins over a key matching an event name. Names
    are not unique; the first event with a given name is returned.
    """

    def __init__(self, events: list[Event]) -> None:
        self.events = list(events)
        self.by_id: dict[str, Event] = {}
        self.by_name: dict[str, list[Event]] = {}
        for event in self.events:
            self.by_id.setdefault(event.id, event)
            self.by_name.setdefault(event.name, []).append(event)

    def resolve(self, key: str) -> Reference:
        if key in self.by_id:
            return ById(key, self.by_id[key])
        if key in self.by_name:
            return ByName(key, self.by_name[key][0])
        return Dangling(key)

    def find(self, key: str) -> Event | None:
        reference = self.resolve(key)
        if isinstance(reference, Dangling):
            return None
        return reference.event

    def is_ambiguous(self, key: str) -> bool:
        """True when ``key`` could mean more than one distinct event."""

        matches = {id(event) for event in self.by_name.get(key, [])}
        if key in self.by_id:
            matches.add(id(self.by_id[key]))
        return len(matches) > 1


def reference_warnings(events: list[Event], index: EventIndex | None = None) -> list[str]:
    """Notes for dependencies that point nowhere or at more than one event."""

    index = index or EventIndex(events)
    warnings: list[str] = []
    for event in events:
        key = event.depends_on
        if not key:
            continue
        if isinstance(index.resolve(key), Dangling):
            warnings.append(f"'{event.name}' depends on unknown event '{key}'")
        elif index.is_ambiguous(key):
            warnings.append(f"'{event.name}' depends on '{key}', which matches more than one event")
    for warning in warnings:
        logger.info(warning)
    return warnings
