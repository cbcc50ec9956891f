"""
Document scanning: tracker regions and abrupt-exit markers inside a note.

Patterns are built per marker name and carry no state between documents.
"""

import re
import json
import logging
from dataclasses import replace
from functools import lru_cache
from typing import List, Optional

from activity_tracker.config import log_event, ABRUPT_EXIT_LABEL
from activity_tracker.models import (
    AbruptExitMark,
    FULL_DAY_MINUTES,
    Section,
    SectionConfig,
    TrackerSettings,
)
from activity_tracker.services.clock import parse_hhmm, format_hhmm
from activity_tracker.services.section import parse_section

ATTRIBUTE_RE = re.compile(
    r"""(?P<key>[A-Za-z_]\w*)[ \t]*=[ \t]*
        (?P<value>"(?:[^"\\]|\\.)*"|[^\s,]+)
    """,
    re.VERBOSE,
)

ABRUPT_EXIT_RE = re.compile(
    rf"<!--[ \t]*{re.escape(ABRUPT_EXIT_LABEL)}[ \t]+(?P<time>\d{{1,2}}:\d{{2}})[ \t]*-->"
)
ABRUPT_EXIT_LINE_RE = re.compile(
    rf"^[ \t]*{ABRUPT_EXIT_RE.pattern}[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE,
)


@lru_cache(maxsize=16)
def section_pattern(marker: str) -> re.Pattern:
    """Non-greedy matcher for `<!-- marker attrs -->...<!-- /marker -->`."""
    m = re.escape(marker)
    return re.compile(
        rf"<!--[ \t]*{m}(?:[ \t]+(?P<attrs>[^\n]*?))?[ \t]*-->"
        rf"(?P<inner>.*?)"
        rf"<!--[ \t]*/{m}[ \t]*-->",
        re.DOTALL,
    )


# --- ATTRIBUTES ---

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_attributes(text: Optional[str], defaults: SectionConfig) -> SectionConfig:
    """
    Apply `key=value` attributes to a copy of the defaults.

    Values are JSON literals: `maxInterval=25 logIfNothingSelected=true
    logTextIfNothingSelected="break"`. Unknown keys are ignored; malformed
    values are logged and skipped.
    """
    config = replace(defaults)
    if not text:
        return config

    for match in ATTRIBUTE_RE.finditer(text):
        key, raw = match.group("key"), match.group("value")
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            log_event(logging.WARNING, "section_attribute_malformed", key=key, value=raw)
            continue

        if key == "maxInterval":
            if value is None:
                config.max_interval = FULL_DAY_MINUTES
            elif _is_number(value) and value > 0:
                config.max_interval = int(value)
            else:
                log_event(logging.WARNING, "section_attribute_invalid", key=key, value=raw)
        elif key == "minInterval":
            if _is_number(value) and value >= 0:
                config.min_interval = int(value)
            else:
                log_event(logging.WARNING, "section_attribute_invalid", key=key, value=raw)
        elif key == "logIfNothingSelected":
            if isinstance(value, bool):
                config.log_if_nothing_selected = value
            else:
                log_event(logging.WARNING, "section_attribute_invalid", key=key, value=raw)
        elif key == "logTextIfNothingSelected":
            if isinstance(value, str) and value.strip():
                config.log_text_if_nothing_selected = value.strip()
            else:
                log_event(logging.WARNING, "section_attribute_invalid", key=key, value=raw)
        else:
            log_event(logging.DEBUG, "section_attribute_unknown", key=key)
    return config


# --- SECTIONS ---

def find_sections(text: str, settings: TrackerSettings) -> List[Section]:
    """Parse every tracker region of a document, in document order."""
    defaults = SectionConfig.from_settings(settings)
    sections = []
    for match in section_pattern(settings.tracker_label).finditer(text):
        attributes = (match.group("attrs") or "").strip()
        sections.append(parse_section(
            match.group("inner"),
            config=parse_attributes(attributes, defaults),
            attributes=attributes,
            raw_outer=match.group(0),
        ))
    log_event(logging.DEBUG, "tracker_sections_parsed", sections=len(sections))
    return sections


def wrap_section(inner: str, marker: str, attributes: str = "") -> str:
    opening = f"{marker} {attributes}" if attributes else marker
    return f"<!-- {opening} -->\n{inner}\n<!-- /{marker} -->"


def replace_sections(text: str, marker: str, replacements: List[Optional[str]]) -> str:
    """
    Substitute the i-th tracker region with replacements[i]; None keeps the
    region as it is. Text outside the regions is passed through unchanged.
    """
    out = []
    cursor = 0
    for i, match in enumerate(section_pattern(marker).finditer(text)):
        if i >= len(replacements) or replacements[i] is None:
            continue
        out.append(text[cursor:match.start()])
        out.append(replacements[i])
        cursor = match.end()
    out.append(text[cursor:])
    return "".join(out)


# --- ABRUPT EXIT MARKERS ---

def find_abrupt_exits(text: str) -> List[AbruptExitMark]:
    marks = []
    for match in ABRUPT_EXIT_RE.finditer(text):
        try:
            time = format_hhmm(parse_hhmm(match.group("time")))
        except ValueError:
            log_event(logging.WARNING, "abrupt_exit_bad_time", raw=match.group(0))
            continue
        marks.append(AbruptExitMark(time=time, raw_outer=match.group(0)))
    return marks


def strip_abrupt_exits(text: str) -> str:
    """Remove every abrupt-exit marker; a marker alone on its line takes the line with it."""
    text = ABRUPT_EXIT_LINE_RE.sub("", text)
    return ABRUPT_EXIT_RE.sub("", text)
