"""Demo script for the timetable views."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timetable.editor import render_day_lines
from timetable.store import load
from timetable.summary import build_summary


def main() -> None:
    events = load("examples/sample_schedule.json")
    for day in ("Monday", "Thursday"):
        print("\n".join(render_day_lines(events, day)))
        print()
    print("Summary:", build_summary(events))


if __name__ == "__main__":
    main()
