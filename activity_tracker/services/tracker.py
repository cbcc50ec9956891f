"""
Tracker controller: start/stop transitions and periodic ticks.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from activity_tracker.config import log_event, load_settings
from activity_tracker.models import TrackerError
from activity_tracker.state import TRACKER_STATE, PROCESSING_LOCK
from activity_tracker.services.orchestrator import write_log_record
from activity_tracker.services.store import DocumentStore, FileDocumentStore


def _run(store: DocumentStore, path: Path, remain_active: bool, now: Optional[datetime]) -> Dict:
    """Run the orchestrator once and record the outcome in the tracker state."""
    now = now or datetime.now()
    try:
        updated = write_log_record(store, path, remain_active, now=now, settings=load_settings())
    except TrackerError as e:
        TRACKER_STATE.last_error = str(e)
        log_event(logging.ERROR, "tracker_run_failed", path=str(path), error=str(e))
        return {"status": "error", "error": str(e), "active": TRACKER_STATE.active}

    TRACKER_STATE.last_error = None
    if updated:
        TRACKER_STATE.last_update = now
        log_event(logging.INFO, "activity_logged", path=str(path))
    return {"status": "ok", "updated": updated, "active": TRACKER_STATE.active}


def start(path: Path, store: Optional[DocumentStore] = None, now: Optional[datetime] = None) -> Dict:
    store = store or FileDocumentStore()
    with PROCESSING_LOCK:
        if TRACKER_STATE.active:
            return {"status": "ok", "updated": False, "active": True}
        TRACKER_STATE.active = True
        TRACKER_STATE.started_at = now or datetime.now()
        TRACKER_STATE.last_update = TRACKER_STATE.started_at
        TRACKER_STATE.note = str(path)
        log_event(logging.INFO, "tracker_started", path=str(path))
        return _run(store, path, True, now)


def stop(path: Path, store: Optional[DocumentStore] = None, now: Optional[datetime] = None) -> Dict:
    store = store or FileDocumentStore()
    with PROCESSING_LOCK:
        if not TRACKER_STATE.active:
            return {"status": "ok", "updated": False, "active": False}
        TRACKER_STATE.active = False
        TRACKER_STATE.started_at = None
        TRACKER_STATE.note = None
        log_event(logging.INFO, "tracker_paused", path=str(path))
        return _run(store, path, False, now)


def toggle(path: Path, store: Optional[DocumentStore] = None, now: Optional[datetime] = None) -> Dict:
    if TRACKER_STATE.active:
        return stop(path, store, now)
    return start(path, store, now)


def shutdown(store: Optional[DocumentStore] = None, now: Optional[datetime] = None) -> Dict:
    """Close the running interval in the note it was started on. Called when the server exits."""
    if not TRACKER_STATE.active or not TRACKER_STATE.note:
        return {"status": "idle", "updated": False, "active": False}
    log_event(logging.INFO, "tracker_shutdown", path=TRACKER_STATE.note)
    return stop(Path(TRACKER_STATE.note), store, now)


def tick(path: Path, store: Optional[DocumentStore] = None, now: Optional[datetime] = None) -> Dict:
    """Periodic check; does nothing while the tracker is idle."""
    store = store or FileDocumentStore()
    with PROCESSING_LOCK:
        if not TRACKER_STATE.active:
            return {"status": "idle", "updated": False, "active": False}
        return _run(store, path, True, now)


def status(now: Optional[datetime] = None) -> Dict:
    """Snapshot of the tracker for display, `since_update` as HH:MM:SS."""
    now = now or datetime.now()
    since = None
    if TRACKER_STATE.active and TRACKER_STATE.last_update:
        seconds = max(0, int((now - TRACKER_STATE.last_update).total_seconds()))
        since = f"{seconds // 3600:02d}:{seconds // 60 % 60:02d}:{seconds % 60:02d}"
    return {
        "active": TRACKER_STATE.active,
        "state": "rec" if TRACKER_STATE.active else "idle",
        "note": TRACKER_STATE.note,
        "started_at": TRACKER_STATE.started_at.isoformat() if TRACKER_STATE.started_at else None,
        "last_update": TRACKER_STATE.last_update.isoformat() if TRACKER_STATE.last_update else None,
        "since_update": since,
        "last_error": TRACKER_STATE.last_error,
    }
