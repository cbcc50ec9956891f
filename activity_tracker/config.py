"""
Configuration, constants, and logging.
"""

import os
import re
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from activity_tracker.models import TrackerSettings

# --- LOAD ENV ---
load_dotenv()

# --- LOGGING ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("activity_tracker")


def log_event(level: int, message: str, **data):
    """Lightweight structured logging helper."""
    try:
        serialized = " | ".join(f"{k}={v}" for k, v in data.items())
        logger.log(level, f"{message}{' | ' + serialized if serialized else ''}")
    except Exception:
        logger.log(level, message)


# --- PATHS ---
NOTES_DIR = Path(os.getenv("NOTES_DIR", Path.cwd() / "notes"))

# --- CONSTANTS ---
DEFAULT_PORT = 5055
QUIESCENCE_POLL_SECONDS = float(os.getenv("QUIESCENCE_POLL_SECONDS", "0.5"))
ABRUPT_EXIT_LABEL = "abrupt exit"
REPORT_MARKER = "<!-- report -->"
LOG_MARKER = "<!-- log -->"


# --- SETTINGS ---

def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        log_event(logging.WARNING, "config_bad_number", key=name, value=value, default=default)
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> TrackerSettings:
    """Engine-wide defaults; every field can be overridden per section except the label."""
    defaults = TrackerSettings()
    return TrackerSettings(
        max_interval=_env_int("MAX_INTERVAL", defaults.max_interval),
        min_interval=_env_int("MIN_INTERVAL", defaults.min_interval),
        tracker_label=os.getenv("TRACKER_LABEL", "").strip() or defaults.tracker_label,
        log_if_nothing_selected=_env_bool("LOG_IF_NOTHING_SELECTED", defaults.log_if_nothing_selected),
        log_text_if_nothing_selected=(
            os.getenv("LOG_TEXT_IF_NOTHING_SELECTED", "").strip()
            or defaults.log_text_if_nothing_selected
        ),
    )


# --- NOTE HELPERS ---

def get_daily_note_path(day: Optional[date] = None) -> Path:
    """Get the file path for a day's note."""
    day = day or date.today()
    return NOTES_DIR / f"{day.isoformat()}.md"


def resolve_note_path(value: Optional[str]) -> Path:
    """Resolve a note name from input, falling back to today's daily note."""
    if not value or not value.strip():
        return get_daily_note_path()
    cleaned = re.sub(r"[\\/]+", "-", value.strip()).strip(".-")
    if not cleaned:
        return get_daily_note_path()
    if not cleaned.endswith(".md"):
        cleaned += ".md"
    return NOTES_DIR / cleaned
