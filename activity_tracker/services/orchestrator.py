"""
One tracker run over a document: wait, read, update every section, write back.
"""

import time
import logging
from datetime import datetime
from typing import List, Optional, Union

from activity_tracker.config import log_event, load_settings, QUIESCENCE_POLL_SECONDS
from activity_tracker.models import TrackerSettings
from activity_tracker.services.clock import now_hhmm, minutes_between
from activity_tracker.services.document import (
    find_sections,
    find_abrupt_exits,
    strip_abrupt_exits,
    replace_sections,
    wrap_section,
)
from activity_tracker.services.engine import update_section
from activity_tracker.services.section import stringify_section
from activity_tracker.services.store import DocumentStore, PathLike


def wait_until_quiescent(store: DocumentStore, path: PathLike, poll_seconds: Optional[float] = None):
    """Block until no editor holds unsaved changes to the document."""
    poll = QUIESCENCE_POLL_SECONDS if poll_seconds is None else poll_seconds
    waited = False
    while not store.is_quiescent(path):
        if not waited:
            log_event(logging.INFO, "waiting_for_clean_note", path=str(path))
            waited = True
        time.sleep(poll)


def earliest_mark(times: List[str], since: str) -> str:
    """The first of `times` to occur after `since`, following midnight rollover."""
    return min(times, key=lambda t: minutes_between(since, t))


def process_document(
    text: str,
    now: Union[datetime, str, None] = None,
    remain_active: bool = True,
    settings: Optional[TrackerSettings] = None,
) -> Optional[str]:
    """
    Apply one update to every tracker section of a document.

    Abrupt-exit markers are consumed first: an open interval is closed at the
    first mark after its start before the regular update at `now`. Returns the new
    document text, or None when nothing needs to be written.
    """
    settings = settings or load_settings()
    current = now_hhmm(now)

    marks = find_abrupt_exits(text)
    if marks:
        text = strip_abrupt_exits(text)

    sections = find_sections(text, settings)

    replacements = []
    changed = 0
    for section in sections:
        updated = False
        active = section.open_interval
        if marks and active is not None:
            earliest = earliest_mark([m.time for m in marks], active.start)
            updated = update_section(section, earliest, remain_active=False)
        updated = update_section(section, current, remain_active) or updated
        if updated:
            inner = stringify_section(section)
            replacements.append(wrap_section(inner, settings.tracker_label, section.attributes))
            changed += 1
        else:
            replacements.append(None)

    log_event(
        logging.INFO,
        "document_processed",
        sections=len(sections),
        changed=changed,
        abrupt_exits=len(marks),
        now=current,
        remain_active=remain_active,
    )

    if not changed and not marks:
        return None
    return replace_sections(text, settings.tracker_label, replacements)


def write_log_record(
    store: DocumentStore,
    path: PathLike,
    remain_active: bool,
    now: Union[datetime, str, None] = None,
    settings: Optional[TrackerSettings] = None,
    poll_seconds: Optional[float] = None,
) -> bool:
    """
    Run the tracker over one note. Returns True when the note was rewritten.
    Store failures propagate to the caller.
    """
    wait_until_quiescent(store, path, poll_seconds)
    content = store.read(path)

    updated = process_document(content, now=now, remain_active=remain_active, settings=settings)
    if updated is None:
        return False

    # an editor may have picked up the note since it was read
    wait_until_quiescent(store, path, poll_seconds)
    store.write(path, updated)
    return True
