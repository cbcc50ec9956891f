"""
Time-of-day helpers.

Every duration in the tracker is computed here so that midnight rollover is
handled the same way by the log codec, the report and the update engine.
"""

import re
from datetime import datetime
from typing import Union

from activity_tracker.models import FULL_DAY_MINUTES

HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_hhmm(s: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    m = HHMM_RE.match(s)
    if not m:
        raise ValueError(f"Bad time: {s}")
    h, mm = int(m.group(1)), int(m.group(2))
    if h > 23 or mm > 59:
        raise ValueError(f"Bad time: {s}")
    return h * 60 + mm


def format_hhmm(minutes: int) -> str:
    minutes = int(minutes) % FULL_DAY_MINUTES
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def now_hhmm(now: Union[datetime, str, None] = None) -> str:
    if now is None:
        now = datetime.now()
    if isinstance(now, datetime):
        return now.strftime("%H:%M")
    return format_hhmm(parse_hhmm(now))


def minutes_between(start: str, end: str) -> int:
    """Elapsed minutes from start to end; an end before the start is on the next day."""
    return (parse_hhmm(end) - parse_hhmm(start)) % FULL_DAY_MINUTES


def add_minutes(hhmm: str, minutes: int) -> str:
    return format_hhmm(parse_hhmm(hhmm) + minutes)


def _round(value: float) -> int:
    return int(value + 0.5)


def humanize_minutes(minutes: float) -> str:
    """Approximate phrase for a duration, e.g. "20 minutes", "an hour"."""
    if minutes < 0.75:
        return "a few seconds"
    if minutes < 1.5:
        return "a minute"
    if minutes < 45:
        return f"{_round(minutes)} minutes"
    if minutes < 90:
        return "an hour"
    hours = minutes / 60
    if hours < 22:
        return f"{_round(hours)} hours"
    if hours < 36:
        return "a day"
    return f"{_round(hours / 24)} days"


def format_duration(minutes: float) -> str:
    """Exact "HH:MM" for a duration; hours are not wrapped."""
    total = _round(minutes)
    return f"{total // 60:02d}:{total % 60:02d}"
