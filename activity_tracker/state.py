"""
Application state management.
Runtime state of the tracker controller; the notes themselves are the only persistent store.
"""

from threading import Lock

from activity_tracker.models import TrackerState

# --- STATE CONTAINERS ---

TRACKER_STATE: TrackerState = TrackerState()

# Serializes tracker runs; the HTTP server is threaded
PROCESSING_LOCK: Lock = Lock()


def reset_state() -> TrackerState:
    """Reset runtime state in place (used on shutdown and in tests)."""
    TRACKER_STATE.active = False
    TRACKER_STATE.started_at = None
    TRACKER_STATE.note = None
    TRACKER_STATE.last_update = None
    TRACKER_STATE.last_error = None
    return TRACKER_STATE
