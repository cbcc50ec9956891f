"""
Data structures (dataclasses) for the activity tracker.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

FULL_DAY_MINUTES = 24 * 60


class TrackerError(Exception):
    """Base class for errors surfaced to the caller of a tracker run."""


class StoreError(TrackerError):
    """A document could not be read from or written to the store."""


@dataclass
class TrackerSettings:
    """Engine-wide defaults."""
    max_interval: int = FULL_DAY_MINUTES  # minutes; a full day never splits
    min_interval: int = 4  # minutes
    tracker_label: str = "activity tracker"
    log_if_nothing_selected: bool = False
    log_text_if_nothing_selected: str = "nothing selected"


@dataclass
class SectionConfig:
    """Per-section configuration, defaults overridden by the marker attributes."""
    max_interval: int = FULL_DAY_MINUTES
    min_interval: int = 4
    log_if_nothing_selected: bool = False
    log_text_if_nothing_selected: str = "nothing selected"

    @classmethod
    def from_settings(cls, settings: TrackerSettings) -> "SectionConfig":
        return cls(
            max_interval=settings.max_interval,
            min_interval=settings.min_interval,
            log_if_nothing_selected=settings.log_if_nothing_selected,
            log_text_if_nothing_selected=settings.log_text_if_nothing_selected,
        )


@dataclass
class TaskItem:
    """One checkbox line of the checklist."""
    checked: bool
    label: str
    level: int  # indentation units
    fullname: str  # ancestor path joined with "->"


@dataclass
class LogInterval:
    """A span of time attributed to one or more tasks. Times are "HH:MM"."""
    tasks: List[str]
    start: str
    end: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.end is None


@dataclass
class Section:
    """A delimited tracker region of a document."""
    tasks: List[TaskItem] = field(default_factory=list)
    log: List[LogInterval] = field(default_factory=list)
    config: SectionConfig = field(default_factory=SectionConfig)
    attributes: str = ""  # raw attribute text, re-emitted on rewrite
    raw_outer: str = ""
    raw_inner: str = ""

    @property
    def open_interval(self) -> Optional[LogInterval]:
        if self.log and self.log[-1].is_open:
            return self.log[-1]
        return None


@dataclass
class AbruptExitMark:
    """Last known-good time left behind by an ungraceful shutdown."""
    time: str
    raw_outer: str


@dataclass
class TrackerState:
    """Runtime state of the tracker controller. Never persisted."""
    active: bool = False
    started_at: Optional[datetime] = None
    note: Optional[str] = None  # note the running tracker logs into
    last_update: Optional[datetime] = None
    last_error: Optional[str] = None
