"""Runtime configuration for the timetable tools.

Defaults are overridden from the environment; command-line flags override
both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass
class TimetableConfig:
    """Settings shared by the CLI and the web page."""

    schedule_file: str = "schedule.json"
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self) -> None:
        self.schedule_file = os.getenv("TIMETABLE_FILE", self.schedule_file)
        self.log_level = os.getenv("TIMETABLE_LOG_LEVEL", self.log_level).upper()
        self.log_format = os.getenv("TIMETABLE_LOG_FORMAT", self.log_format)


def configure_logging(config: TimetableConfig) -> None:
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=config.log_format)
