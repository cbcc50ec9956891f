"""Activity Tracker: a time log kept inside markdown daily notes."""

__version__ = "0.3.0"
