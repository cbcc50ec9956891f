"""
Duration report generated from a section's log.
"""

from typing import Dict, List, Optional

from activity_tracker.models import LogInterval
from activity_tracker.services.clock import minutes_between, humanize_minutes, format_duration


def aggregate(log: List[LogInterval]) -> Dict[str, float]:
    """Minutes per task; an interval's time is split evenly across its tasks."""
    totals: Dict[str, float] = {}
    for interval in log:
        if interval.end is None or not interval.tasks:
            continue
        share = minutes_between(interval.start, interval.end) / len(interval.tasks)
        for task in interval.tasks:
            totals[task] = totals.get(task, 0) + share
    return totals


def generate_report(log: List[LogInterval], tasks: Optional[List[str]] = None) -> Optional[str]:
    """
    Render a markdown table of time spent per task, longest first, followed by
    a total row. Returns None when no time has been recorded.

    `tasks` is the checklist order (fullnames) used to break ties.
    """
    totals = aggregate(log)
    total = sum(totals.values())
    if total == 0:
        return None

    order = list(dict.fromkeys(list(tasks or []) + list(totals)))
    rows = [name for name in order if totals.get(name)]
    rows.sort(key=lambda name: -totals[name])

    lines = ["| task | approx | exact |", "| -- | -- | -- |"]
    for name in rows:
        minutes = totals[name]
        lines.append(f"| {name} | {humanize_minutes(minutes)} | {format_duration(minutes)} |")
    lines.append(f"| | {humanize_minutes(total)} | {format_duration(total)} |")
    return "\n".join(lines)
