"""Services package for the activity tracker."""

from activity_tracker.services.tasks import (
    parse_tasks,
    stringify_tasks,
    checked_fullnames,
)

from activity_tracker.services.log import (
    parse_log,
    stringify_log,
)

from activity_tracker.services.report import generate_report

from activity_tracker.services.section import (
    parse_section,
    stringify_section,
)

from activity_tracker.services.document import (
    parse_attributes,
    find_sections,
    find_abrupt_exits,
    strip_abrupt_exits,
    wrap_section,
    replace_sections,
)

from activity_tracker.services.engine import (
    is_logging_needed,
    update_section,
)

from activity_tracker.services.store import (
    DocumentStore,
    FileDocumentStore,
)

from activity_tracker.services.orchestrator import (
    process_document,
    write_log_record,
)

__all__ = [
    # Checklist
    "parse_tasks",
    "stringify_tasks",
    "checked_fullnames",
    # Log
    "parse_log",
    "stringify_log",
    # Report
    "generate_report",
    # Section
    "parse_section",
    "stringify_section",
    # Document
    "parse_attributes",
    "find_sections",
    "find_abrupt_exits",
    "strip_abrupt_exits",
    "wrap_section",
    "replace_sections",
    # Engine
    "is_logging_needed",
    "update_section",
    # Store
    "DocumentStore",
    "FileDocumentStore",
    # Orchestration
    "process_document",
    "write_log_record",
]
