"""
Flask routes for the activity tracker API.
"""

import logging
from dataclasses import asdict

from flask import Blueprint, current_app, request, jsonify

from activity_tracker.config import log_event, load_settings, resolve_note_path
from activity_tracker.models import TrackerError
from activity_tracker.services import tracker
from activity_tracker.services.document import find_sections
from activity_tracker.services.store import FileDocumentStore

# Create blueprint
api = Blueprint('api', __name__)


def _store():
    return current_app.config.get("DOCUMENT_STORE") or FileDocumentStore()


def _respond(result):
    """Turn a tracker result into a response; failed runs are 500s."""
    if result.get("status") == "error":
        return jsonify(result), 500
    return jsonify(result)


@api.route('/health')
def health():
    """Health check endpoint."""
    path = resolve_note_path(request.args.get("note"))
    return jsonify({
        "status": "ok",
        "note": str(path),
        "note_exists": path.exists(),
        "tracker_label": load_settings().tracker_label,
    })


@api.route('/api/status')
def get_status():
    """Current tracker state, the equivalent of a status bar."""
    path = resolve_note_path(request.args.get("note"))
    result = tracker.status()
    result["note"] = str(path)
    return jsonify(result)


@api.route('/api/start', methods=['POST'])
def start_tracking():
    path = resolve_note_path(request.args.get("note"))
    log_event(logging.INFO, "api_start", note=str(path))
    return _respond(tracker.start(path, _store()))


@api.route('/api/stop', methods=['POST'])
def stop_tracking():
    path = resolve_note_path(request.args.get("note"))
    log_event(logging.INFO, "api_stop", note=str(path))
    return _respond(tracker.stop(path, _store()))


@api.route('/api/toggle', methods=['POST'])
def toggle_tracking():
    path = resolve_note_path(request.args.get("note"))
    log_event(logging.INFO, "api_toggle", note=str(path))
    return _respond(tracker.toggle(path, _store()))


@api.route('/api/tick', methods=['POST'])
def tick():
    """Periodic entry point for an external scheduler."""
    path = resolve_note_path(request.args.get("note"))
    return _respond(tracker.tick(path, _store()))


@api.route('/api/sections')
def get_sections():
    """Parsed tracker sections of a note."""
    path = resolve_note_path(request.args.get("note"))
    try:
        content = _store().read(path)
    except TrackerError as e:
        log_event(logging.ERROR, "api_sections_error", error=str(e))
        return jsonify({"status": "error", "error": str(e)}), 500

    sections = find_sections(content, load_settings())
    return jsonify({
        "note": str(path),
        "sections": [
            {
                "tasks": [asdict(t) for t in s.tasks],
                "log": [asdict(i) for i in s.log],
                "config": asdict(s.config),
                "attributes": s.attributes,
            }
            for s in sections
        ],
    })
