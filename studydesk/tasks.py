"""Daily task records and the HH:mm time format used to store them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time
from typing import Optional

_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})")


@dataclass(frozen=True)
class DailyTask:
    """A task scheduled on a day, with optional start and end times."""

    title: str = ""
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    note: str = ""
    id: int = -1


def format_time(value: Optional[time]) -> str:
    """Format a time as ``HH:mm``; a missing time becomes an empty string."""
    if value is None:
        return ""
    return value.strftime("%H:%M")


def parse_time(text: str) -> Optional[time]:
    """Parse an ``HH:mm`` string, returning None when it is not a valid time."""
    match = _TIME_PATTERN.fullmatch(text.strip()) if text else None
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)