"""Interactive editor: add, edit and delete events, then re-save the file."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable

from timetable import store
from timetable.adapters import json_adapter
from timetable.schema import DEADLINE, DEADLINE_END, FIXED, KINDS, NO_START, WEEKDAYS, Event
from timetable.timefmt import generate_id, pad_time
from timetable.views import day_view

logger = logging.getLogger(__name__)

_EDITABLE = {"name", "day", "start", "end", "kind", "depends_on"}

MENU = (
    "1. Add / Append Events",
    "2. Edit an Event",
    "3. Delete an Event",
    "4. View Timetable for a Day (and upcoming deadlines + dependencies)",
    "5. List All Events",
    "6. Show JSON (console)",
    "7. Create a Fresh Timetable (new schedule)",
    "8. Exit",
)


def _check_day(day: str) -> str:
    if day not in WEEKDAYS:
        raise ValueError(f"Unknown day '{day}'")
    return day


def _check_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValueError("Event name cannot be blank")
    return name


def _check_kind(kind: str | None) -> str:
    normalized = (kind or "").strip().lower()
    if normalized not in KINDS:
        raise ValueError(f"Unknown event type '{kind}'")
    return normalized


def _fresh_id(events: list[Event]) -> str:
    taken = {event.id for event in events}
    candidate = generate_id()
    while candidate in taken:
        candidate = generate_id()
    return candidate


def _position(events: list[Event], position: int) -> int:
    if not 1 <= position <= len(events):
        raise ValueError(f"No event number {position}")
    return position - 1


def add_event(
    events: list[Event],
    name: str,
    day: str,
    *,
    deadline: bool = False,
    start: str | None = None,
    end: str | None = None,
    depends_on: str | None = None,
) -> Event:
    """Append a new event with an id not yet used in ``events`` and return it."""

    if deadline:
        start, end, kind = NO_START, DEADLINE_END, DEADLINE
    else:
        start, end, kind = pad_time(start), pad_time(end), FIXED

    event = Event(
        id=_fresh_id(events),
        name=_check_name(name),
        day=_check_day(day),
        start=start,
        end=end,
        kind=kind,
        depends_on=(depends_on or "").strip() or None,
    )
    events.append(event)
    return event


def edit_event(events: list[Event], position: int, **changes) -> Event:
    """Change any field but ``id`` of the event at 1-based ``position``."""

    unknown = set(changes) - _EDITABLE
    if unknown:
        raise ValueError(f"Cannot edit fields {sorted(unknown)}")

    i = _position(events, position)
    updated = replace(events[i], **changes)
    updated.name = _check_name(updated.name)
    _check_day(updated.day)
    updated.kind = _check_kind(updated.kind)
    if updated.kind == DEADLINE:
        updated.start, updated.end = NO_START, DEADLINE_END
    else:
        updated.start, updated.end = pad_time(updated.start), pad_time(updated.end)
    updated.depends_on = (updated.depends_on or "").strip() or None

    events[i] = updated
    return updated


def delete_event(events: list[Event], position: int) -> Event:
    return events.pop(_position(events, position))


def describe_event(event: Event) -> str:
    dependency = f" | depends on: {event.depends_on}" if event.depends_on else ""
    return f"[{event.id}] {event.name} | {event.day} | {event.kind} | {event.start}-{event.end}{dependency}"


def list_lines(events: list[Event]) -> list[str]:
    if not events:
        return ["No events in schedule."]
    return ["All Events:"] + [f"{i}. {describe_event(event)}" for i, event in enumerate(events, start=1)]


def render_day_lines(events: list[Event], day: str) -> list[str]:
    """Console rendering of one day with its deadlines and dependencies."""

    view = day_view(events, day)
    lines = [f"Timetable for {day}:"]
    if not view["events"]:
        lines.append("  No events.")
    for event in view["events"]:
        dependency = f" | depends on: {event.depends_on}" if event.depends_on else ""
        if event.is_deadline:
            lines.append(f"  [deadline] {event.name} - due by {event.end}{dependency}")
        else:
            lines.append(f"  [fixed] {event.name} - {event.start} to {event.end}{dependency}")

    lines.append("")
    lines.append("Upcoming deadlines (from selected day):")
    if not view["upcoming_deadlines"]:
        lines.append("  None.")
    for event in view["upcoming_deadlines"]:
        lines.append(f"  {event.name} -> {event.day} by {event.end}")

    lines.append("")
    lines.append("Task Dependencies:")
    if not view["has_dependencies"]:
        lines.append("  None.")
    for source, target in view["dependencies"]:
        lines.append(f"  {source} -> {target}")
    if view["has_cycle"]:
        lines.append("WARNING: circular dependency detected: " + " -> ".join(view["cycle"]))
    for warning in view["warnings"]:
        lines.append(f"Note: {warning}")
    return lines


class Editor:
    """Menu loop over the schedule file.

    ``ask`` and ``say`` default to :func:`input` and :func:`print`; tests
    pass scripted replacements.
    """

    def __init__(
        self,
        path: str | Path,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ) -> None:
        self.path = Path(path)
        self.ask = ask
        self.say = say

    # prompt helpers

    def _ask_int(self, prompt: str) -> int:
        while True:
            answer = self.ask(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                self.say("Please enter a number.")

    def _ask_yes(self, prompt: str) -> bool:
        while True:
            answer = self.ask(f"{prompt} [y/n]: ").strip().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

    def _ask_day(self, prompt: str) -> str | None:
        for number, day in enumerate(WEEKDAYS, start=1):
            self.say(f"  [{number}] {day}")
        choice = self._ask_int(f"{prompt} [1-7, 0 to cancel]: ")
        if 1 <= choice <= len(WEEKDAYS):
            return WEEKDAYS[choice - 1]
        return None

    def _save(self, events: list[Event], message: str) -> None:
        if store.save(events, self.path):
            self.say(message)
        else:
            self.say(f"Could not write {self.path}; changes were not saved.")

    def _prompt_new_events(self, events: list[Event]) -> None:
        count = self._ask_int("How many events to add? ")
        for number in range(1, count + 1):
            self.say(f"Event {number}:")
            name = self.ask("Event Name: ").strip()
            day = self._ask_day("Select Day")
            if day is None:
                self.say("Skipping this event.")
                continue
            if self._ask_yes("Is this a deadline-based task (due by 23:59)?"):
                start = end = None
                deadline = True
            else:
                start = self.ask("Start Time (HH:MM): ")
                end = self.ask("End Time (HH:MM): ")
                deadline = False
            depends_on = None
            if self._ask_yes("Does this event depend on another event?"):
                depends_on = self.ask("Enter the name (or ID) of event it depends on: ")
            try:
                event = add_event(events, name, day, deadline=deadline, start=start, end=end, depends_on=depends_on)
            except ValueError as exc:
                self.say(f"Skipping this event: {exc}")
                continue
            self.say(f"Added: {event.name}")

    # menu actions

    def add(self) -> None:
        events = store.load(self.path)
        self._prompt_new_events(events)
        self._save(events, f"{self.path} updated with new events.")

    def edit(self) -> None:
        events = store.load(self.path)
        if not events:
            self.say("No events to edit.")
            return
        self._show(list_lines(events))
        position = self._ask_int("Enter the event number to edit (0 to cancel): ")
        if not 1 <= position <= len(events):
            self.say("Cancelled.")
            return

        event = events[position - 1]
        self.say(f"Editing: {event.name}")
        changes: dict = {}
        name = self.ask(f"New name (enter to keep '{event.name}'): ").strip()
        if name:
            changes["name"] = name
        day = self._ask_day(f"Change day? (current: {event.day})")
        if day:
            changes["day"] = day
        kind = event.kind
        if self._ask_yes(f"Change between deadline/fixed? (current: {event.kind})"):
            kind = DEADLINE if event.kind != DEADLINE else FIXED
            changes["kind"] = kind
        if kind != DEADLINE:
            start = self.ask(f"Start time ({event.start}) (enter to keep): ").strip()
            if start:
                changes["start"] = start
            end = self.ask(f"End time ({event.end}) (enter to keep): ").strip()
            if end:
                changes["end"] = end
        if self._ask_yes("Change dependency?"):
            if self._ask_yes("Set a dependency?"):
                changes["depends_on"] = self.ask("Dependency (name or id): ")
            else:
                changes["depends_on"] = None

        edit_event(events, position, **changes)
        self._save(events, "Event updated.")

    def delete(self) -> None:
        events = store.load(self.path)
        if not events:
            self.say("No events to delete.")
            return
        self._show(list_lines(events))
        position = self._ask_int("Enter the event number to delete (0 to cancel): ")
        if not 1 <= position <= len(events):
            self.say("Cancelled.")
            return
        removed = delete_event(events, position)
        self._save(events, f"Deleted: {removed.name}")

    def view_day(self) -> None:
        events = store.load(self.path)
        if not events:
            self.say("No schedule found.")
            return
        day = self._ask_day("View which day?")
        if day is None:
            self.say("Cancelled.")
            return
        self._show(render_day_lines(events, day))

    def list_all(self) -> None:
        self._show(list_lines(store.load(self.path)))

    def show_json(self) -> None:
        self.say(json_adapter.dumps(store.load(self.path)))

    def fresh(self) -> None:
        if not self._ask_yes("This will erase all existing events. Continue?"):
            self.say("Cancelled. Old timetable preserved.")
            return
        events: list[Event] = []
        self._prompt_new_events(events)
        self._save(events, f"New timetable saved to {self.path}.")

    def _show(self, lines: list[str]) -> None:
        for line in lines:
            self.say(line)

    def run(self) -> None:
        """Loop over the main menu until the exit entry is chosen."""

        actions = {
            1: self.add,
            2: self.edit,
            3: self.delete,
            4: self.view_day,
            5: self.list_all,
            6: self.show_json,
            7: self.fresh,
        }
        store.ensure_store(self.path)
        while True:
            self.say("")
            self.say("================= SMART TIMETABLE =================")
            self._show(list(MENU))
            choice = self._ask_int("Enter choice: ")
            if choice == 8:
                self.say("Bye!")
                return
            action = actions.get(choice)
            if action is None:
                self.say("Invalid option.")
                continue
            try:
                action()
            except ValueError as exc:
                logger.warning("Menu action %d failed: %s", choice, exc)
                self.say(f"Error: {exc}")
