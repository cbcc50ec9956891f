"""
Activity Tracker - time log kept inside daily notes.

Checked checklist items are logged into a delimited region of the day's note;
this server exposes start/stop/tick controls for it.
"""

import os
import sys
import atexit
import signal
import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from activity_tracker.config import log_event, load_settings, get_daily_note_path, DEFAULT_PORT, NOTES_DIR
from activity_tracker.routes import api
from activity_tracker.services import tracker
from activity_tracker.services.store import DocumentStore


def create_app(store: Optional[DocumentStore] = None) -> Flask:
    app = Flask(__name__)
    CORS(app)
    app.config["DOCUMENT_STORE"] = store
    app.register_blueprint(api)
    return app


def close_on_exit(store: Optional[DocumentStore] = None):
    """Close the open interval when the server goes away."""
    result = tracker.shutdown(store)
    if result.get("status") == "error":
        log_event(logging.ERROR, "shutdown_close_failed", error=result.get("error"))
    return result


def main():
    port = int(os.getenv("PORT", DEFAULT_PORT))
    settings = load_settings()
    log_event(
        logging.INFO,
        "server_startup",
        notes_dir=str(NOTES_DIR),
        tracker_label=settings.tracker_label,
        max_interval=settings.max_interval,
        min_interval=settings.min_interval,
        port=port,
    )

    print(f"""
    Activity Tracker
      Notes dir:   {NOTES_DIR}
      Today:       {get_daily_note_path().name}
      Marker:      <!-- {settings.tracker_label} -->
      Server:      http://localhost:{port}
    """)
    atexit.register(close_on_exit)
    signal.signal(signal.SIGTERM, lambda signum, frame: sys.exit(0))
    create_app().run(port=port, threaded=True)


if __name__ == '__main__':
    main()
