"""
Update decision engine: closes, splits and opens log intervals of a section.
"""

import logging
from typing import List

from activity_tracker.config import log_event
from activity_tracker.models import LogInterval, Section
from activity_tracker.services.clock import minutes_between, add_minutes
from activity_tracker.services.tasks import (
    checked_fullnames,
    LOG_DELIMITER,
    LOG_DELIMITER_SUBSTITUTE,
)


def effective_tasks(section: Section) -> List[str]:
    """Checked task fullnames, or the placeholder label when nothing is checked and that is enabled."""
    tasks = checked_fullnames(section.tasks)
    if not tasks and section.config.log_if_nothing_selected:
        placeholder = section.config.log_text_if_nothing_selected
        return [placeholder.replace(LOG_DELIMITER, LOG_DELIMITER_SUBSTITUTE)]
    return tasks


def is_logging_needed(section: Section, now: str, remain_active: bool) -> bool:
    if not section.log:
        return True

    active = section.open_interval
    if active is None:
        return remain_active
    if not remain_active:
        return True

    tasks = effective_tasks(section)
    if len(tasks) != len(active.tasks):
        return True
    if any(a != b for a, b in zip(tasks, active.tasks)):
        return True

    return minutes_between(active.start, now) >= section.config.max_interval


def update_section(section: Section, now: str, remain_active: bool) -> bool:
    """
    Bring the section's log up to date at time `now` ("HH:MM").

    Mutates `section.log` in place and returns True when the log changed.
    """
    tasks = effective_tasks(section)
    if not tasks:
        remain_active = False

    if not is_logging_needed(section, now, remain_active):
        return False

    config = section.config
    before = [LogInterval(list(i.tasks), i.start, i.end) for i in section.log]
    resume_at = now

    active = section.open_interval
    if active is not None:
        section.log.pop()
        elapsed = minutes_between(active.start, now)
        if elapsed > config.max_interval:
            active.end = add_minutes(active.start, config.max_interval)
            resume_at = active.end
            elapsed = config.max_interval
        else:
            active.end = now

        if elapsed < config.min_interval:
            log_event(logging.DEBUG, "interval_discarded", start=active.start, end=active.end, minutes=elapsed)
        else:
            section.log.append(active)
            log_event(logging.INFO, "interval_closed", start=active.start, end=active.end, minutes=elapsed)

    if remain_active:
        section.log.append(LogInterval(tasks=tasks, start=resume_at))
        log_event(logging.INFO, "interval_opened", start=resume_at, tasks=len(tasks))

    return section.log != before
