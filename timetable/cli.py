"""Command-line entry point for the timetable tool."""

from __future__ import annotations

import argparse
import json
import sys

from timetable import store
from timetable.adapters import json_adapter
from timetable.config import TimetableConfig, configure_logging
from timetable.editor import Editor, list_lines, render_day_lines
from timetable.schema import WEEKDAYS
from timetable.summary import build_summary


def build_parser(config: TimetableConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="timetable", description="Personal weekly timetable")
    parser.add_argument("--file", default=config.schedule_file, help="Path to the schedule JSON file")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level (default: %(default)s)")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("menu", help="Interactive add/edit/delete menu (default)")
    sub.add_parser("list", help="List all events")
    view = sub.add_parser("view", help="Show one day with upcoming deadlines and dependencies")
    view.add_argument("day", choices=WEEKDAYS)
    sub.add_parser("show-json", help="Print the schedule file contents")
    sub.add_parser("summary", help="Print event counts and weekly load")
    return parser


def main(argv: list[str] | None = None) -> int:
    config = TimetableConfig()
    args = build_parser(config).parse_args(argv)
    config.schedule_file = args.file
    config.log_level = args.log_level.upper()
    configure_logging(config)

    command = args.command or "menu"
    if command == "menu":
        try:
            Editor(config.schedule_file).run()
        except (EOFError, KeyboardInterrupt):
            print()
        return 0

    events = store.load(config.schedule_file)
    if command == "list":
        print("\n".join(list_lines(events)))
    elif command == "view":
        print("\n".join(render_day_lines(events, args.day)))
    elif command == "show-json":
        print(json_adapter.dumps(events))
    elif command == "summary":
        print(json.dumps(build_summary(events), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
