"""Streamlit page for the weekly timetable."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from timetable import store
from timetable.config import TimetableConfig, configure_logging
from timetable.summary import build_summary
from timetable.views import ALL_DAYS, day_choices, day_view


def _label(day: str) -> str:
    return "All Days" if day == ALL_DAYS else day


def _time_text(event) -> str:
    return f"Deadline: {event.end}" if event.is_deadline else f"{event.start} - {event.end}"


def load_snapshot(path: str) -> list | None:
    """Events for one render pass; None when the schedule file is missing."""

    if not Path(path).exists():
        return None
    return store.load(path)


def run_views(events: list, day: str) -> dict[str, Any]:
    """Build everything the page shows for ``day`` from one loaded snapshot."""

    view = day_view(events, day)
    return {
        "cards": [
            {
                "title": event.name,
                "day": event.day,
                "time": _time_text(event),
                "deadline": event.is_deadline,
                "depends_on": event.depends_on,
            }
            for event in view["events"]
        ],
        "upcoming": [f"{event.name} — {event.day} by {event.end}" for event in view["upcoming_deadlines"]],
        "dependencies": view["dependencies"],
        "has_cycle": view["has_cycle"],
        "cycle": view["cycle"],
        "warnings": view["warnings"],
        "summary": build_summary(events),
    }


def main() -> None:
    import streamlit as st

    config = TimetableConfig()
    configure_logging(config)

    st.set_page_config(page_title="Smart Timetable", layout="wide")
    st.title("Smart Timetable")

    with st.sidebar:
        st.header("Filter")
        day = st.radio("Day", options=day_choices(), format_func=_label, index=0)
        st.caption(f"Schedule file: {config.schedule_file}")

    events = load_snapshot(config.schedule_file)
    if events is None:
        st.error(f"Unable to load {config.schedule_file}")
        return

    result = run_views(events, day)

    st.subheader(f"Events — {_label(day)}")
    if not result["cards"]:
        st.info(f"No events for {_label(day)}")
    for card in result["cards"]:
        with st.container(border=True):
            icon = "⏰" if card["deadline"] else "📘"
            st.markdown(f"**{icon} {card['title']}** · {card['day']}")
            st.write(f"Time: {card['time']}")
            if card["depends_on"]:
                st.write(f"Depends on: {card['depends_on']}")

    left, right = st.columns(2)
    with left:
        st.subheader("Upcoming deadlines")
        if result["upcoming"]:
            st.markdown("\n".join(f"- {line}" for line in result["upcoming"]))
        else:
            st.write(f"No upcoming deadlines from {_label(day)}")

    with right:
        st.subheader("Dependencies")
        if result["dependencies"]:
            st.markdown("\n".join(f"- {source} ➡️ {target}" for source, target in result["dependencies"]))
        else:
            st.write("No dependencies" if day == ALL_DAYS else f"No dependencies for {day}")
        if result["has_cycle"]:
            st.warning("Circular dependency detected: " + " ➡️ ".join(result["cycle"]))
        for warning in result["warnings"]:
            st.caption(warning)

    st.subheader("Weekly load (minutes)")
    st.bar_chart(result["summary"]["busy_minutes"])


if __name__ == "__main__":
    main()
