"""
Log block parsing and rendering.

A log line reads ``- 10:00-10:25 (25 minutes); Task; Parent->Child``. The
newest line comes first in the text; in memory the log is oldest-first.
"""

import re
from typing import List

from activity_tracker.models import LogInterval
from activity_tracker.services.clock import (
    parse_hhmm,
    format_hhmm,
    minutes_between,
    humanize_minutes,
)

LOG_LINE_RE = re.compile(
    r"""^-[ \t]*
        (?P<start>\d{1,2}:\d{2})
        (?:[ \t]*-[ \t]*(?P<end>\d{1,2}:\d{2}))?
        (?:[ \t]*\((?P<duration>[^)\n]*)\))?
        [ \t]*;(?P<tasks>.*)$
    """,
    re.MULTILINE | re.VERBOSE,
)


def _normalize(hhmm: str) -> str:
    return format_hhmm(parse_hhmm(hhmm))


def parse_log(text: str) -> List[LogInterval]:
    """Parse log lines into intervals, oldest first. Unparseable lines are skipped."""
    intervals: List[LogInterval] = []
    for match in LOG_LINE_RE.finditer(text):
        try:
            start = _normalize(match.group("start"))
            end = _normalize(match.group("end")) if match.group("end") else None
        except ValueError:
            continue
        tasks = [t.strip() for t in match.group("tasks").split(";")]
        intervals.append(LogInterval(tasks=[t for t in tasks if t], start=start, end=end))
    intervals.reverse()
    return intervals


def stringify_interval(interval: LogInterval) -> str:
    line = f"- {interval.start}"
    if interval.end is not None:
        duration = humanize_minutes(minutes_between(interval.start, interval.end))
        line += f"-{interval.end} ({duration})"
    line += ";"
    if interval.tasks:
        line += " " + "; ".join(interval.tasks)
    return line


def stringify_log(intervals: List[LogInterval]) -> str:
    """Render intervals newest first. Zero-length intervals are dropped."""
    lines = []
    for interval in reversed(intervals):
        if interval.end is not None and interval.end == interval.start:
            continue
        lines.append(stringify_interval(interval))
    return "\n".join(lines)
