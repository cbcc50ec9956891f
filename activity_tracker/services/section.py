"""
Section codec: checklist, report and log zones of one tracker region.
"""

import re
from typing import Optional

from activity_tracker.config import REPORT_MARKER, LOG_MARKER
from activity_tracker.models import Section, SectionConfig
from activity_tracker.services.tasks import parse_tasks, stringify_tasks
from activity_tracker.services.log import parse_log, stringify_log
from activity_tracker.services.report import generate_report

SECTION_ZONES_RE = re.compile(
    rf"\A(?P<tasks>.*?)"
    rf"(?:{re.escape(REPORT_MARKER)}(?P<report>.*?))?"
    rf"(?:{re.escape(LOG_MARKER)}(?P<log>.*?))?\Z",
    re.DOTALL,
)


def parse_section(
    inner: str,
    config: Optional[SectionConfig] = None,
    attributes: str = "",
    raw_outer: str = "",
) -> Section:
    """Split a region into its zones. The report zone is regenerated, never parsed."""
    parts = SECTION_ZONES_RE.match(inner)
    log_text = parts.group("log")
    return Section(
        tasks=parse_tasks(parts.group("tasks")),
        log=parse_log(log_text) if log_text else [],
        config=config or SectionConfig(),
        attributes=attributes,
        raw_outer=raw_outer,
        raw_inner=inner,
    )


def stringify_section(section: Section) -> str:
    text = stringify_tasks(section.tasks)
    report = generate_report(section.log, [t.fullname for t in section.tasks])
    if report is not None:
        text += f"\n\n{REPORT_MARKER}\n{report}"
    log_text = stringify_log(section.log)
    if log_text:
        text += f"\n\n{LOG_MARKER}\n{log_text}"
    return text
