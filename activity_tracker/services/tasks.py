"""
Checklist parsing and rendering.
"""

import re
from typing import List

from activity_tracker.models import TaskItem

TASK_LINE_RE = re.compile(
    r"^(?P<spaces>[ \t]*)[*-][ \t]+\[(?P<check>.)\](?P<label>.*)$",
    re.MULTILINE,
)

FULLNAME_SEPARATOR = "->"
# ";" separates tasks inside a log line
LOG_DELIMITER = ";"
LOG_DELIMITER_SUBSTITUTE = ","


def indent_level(spaces: str) -> int:
    """Count indentation units: a tab, four spaces, or any shorter run of spaces."""
    spaces = spaces.replace("    ", "\t")
    spaces = re.sub(r" +", "\t", spaces)
    return len(spaces)


def parse_tasks(text: str) -> List[TaskItem]:
    """
    Extract the checkbox hierarchy from a block of text.
    Lines that are not checkbox items are skipped.
    """
    items: List[TaskItem] = []
    for match in TASK_LINE_RE.finditer(text):
        label = match.group("label").strip()
        level = indent_level(match.group("spaces"))
        name = label.replace(LOG_DELIMITER, LOG_DELIMITER_SUBSTITUTE)

        fullname = name
        if level > 0:
            for parent in reversed(items):
                if parent.level < level:
                    fullname = parent.fullname + FULLNAME_SEPARATOR + name
                    break

        items.append(TaskItem(
            checked=match.group("check") != " ",
            label=label,
            level=level,
            fullname=fullname,
        ))
    return items


def stringify_tasks(items: List[TaskItem]) -> str:
    lines = []
    for item in items:
        indent = "\t" * item.level
        mark = "x" if item.checked else " "
        lines.append(f"{indent}- [{mark}] {item.label}")
    return "\n".join(lines)


def checked_fullnames(items: List[TaskItem]) -> List[str]:
    """Fullnames of checked items in document order; unnamed items cannot be logged."""
    return [item.fullname for item in items if item.checked and item.fullname]
