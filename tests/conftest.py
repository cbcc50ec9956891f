"""Shared fixtures for the activity tracker tests."""

import pytest

from activity_tracker.models import StoreError, TrackerSettings
from activity_tracker.state import reset_state

SETTINGS_ENV = (
    "MAX_INTERVAL",
    "MIN_INTERVAL",
    "TRACKER_LABEL",
    "LOG_IF_NOTHING_SELECTED",
    "LOG_TEXT_IF_NOTHING_SELECTED",
)


class MemoryStore:
    """In-memory document store that records the calls made to it."""

    def __init__(self, documents=None, quiescent=None):
        self.documents = dict(documents or {})
        self.quiescent = list(quiescent or [])
        self.calls = []

    def is_quiescent(self, path):
        self.calls.append("is_quiescent")
        return self.quiescent.pop(0) if self.quiescent else True

    def read(self, path):
        self.calls.append("read")
        try:
            return self.documents[str(path)]
        except KeyError:
            raise StoreError(f"Could not read {path}")

    def write(self, path, text):
        self.calls.append("write")
        self.documents[str(path)] = text


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def tracker_state():
    state = reset_state()
    yield state
    reset_state()


@pytest.fixture
def settings():
    return TrackerSettings()


@pytest.fixture
def make_store():
    return MemoryStore
