"""Time string helpers."""

from __future__ import annotations

import random
import time

from timetable.schema import NO_START


def pad_time(value: str | None) -> str:
    """Normalize loose user input such as '9:5' or '905' to 'HH:MM'."""

    if value is None:
        return NO_START
    text = str(value).strip()
    if not text or text == NO_START:
        return NO_START

    if ":" in text:
        hours, minutes = (part.strip() for part in text.split(":", maxsplit=1))
        return f"{hours.zfill(2)}:{minutes.zfill(2)}"

    digits = text.zfill(4)
    return f"{digits[:2]}:{digits[2:]}"


def to_minutes(value: str | None) -> int | None:
    """Minutes since midnight for 'HH:MM', or None when unparsable."""

    if not value or value == NO_START or ":" not in value:
        return None
    hours, minutes = value.split(":", maxsplit=1)
    if not (hours.isdigit() and minutes.isdigit()):
        return None
    return int(hours) * 60 + int(minutes)


def generate_id() -> str:
    return f"{int(time.time() * 1000)}-{random.randrange(10000)}"
