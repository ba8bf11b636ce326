"""Flat-file event store.

The whole schedule is read in one go and rewritten in one go; callers own
the loaded list and pass it back to :func:`save` after mutating it. There
is no locking, so the last writer wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from timetable.adapters import json_adapter
from timetable.schema import Event

logger = logging.getLogger(__name__)


def load(path: str | Path) -> list[Event]:
    """Load all events, falling back to an empty list on any read problem."""

    path = Path(path)
    if not path.exists():
        logger.info("Schedule file %s not found, starting empty", path)
        return []

    try:
        return json_adapter.parse(str(path))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.error("Failed to read %s: %s", path, exc)
        return []


def save(events: list[Event], path: str | Path) -> bool:
    """Overwrite the schedule file with ``events``; False when the write failed."""

    path = Path(path)
    try:
        path.write_text(json_adapter.dumps(events), encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        return False
    logger.debug("Saved %d events to %s", len(events), path)
    return True


def ensure_store(path: str | Path) -> bool:
    """Create an empty schedule file if none exists yet."""

    path = Path(path)
    if path.exists():
        return True
    created = save([], path)
    if created:
        logger.info("Created new schedule file %s", path)
    return created
