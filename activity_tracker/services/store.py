"""
Document store: where tracked notes are read from and written back to.
"""

import logging
from pathlib import Path
from typing import Protocol, Union

from activity_tracker.config import log_event
from activity_tracker.models import StoreError

PathLike = Union[str, Path]


class DocumentStore(Protocol):
    """What the orchestrator needs from the host application."""

    def read(self, path: PathLike) -> str: ...

    def write(self, path: PathLike, text: str) -> None: ...

    def is_quiescent(self, path: PathLike) -> bool: ...


class FileDocumentStore:
    """
    Notes on the local filesystem.

    An editor that holds unsaved changes signals it with a `<name>.lock`
    file next to the note; the note is not quiescent while it exists.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @staticmethod
    def lock_path(path: PathLike) -> Path:
        path = Path(path)
        return path.with_name(path.name + ".lock")

    def is_quiescent(self, path: PathLike) -> bool:
        return not self.lock_path(path).exists()

    def read(self, path: PathLike) -> str:
        path = Path(path)
        try:
            content = path.read_text(encoding=self.encoding)
        except OSError as e:
            log_event(logging.ERROR, "note_read_failed", path=str(path), error=str(e))
            raise StoreError(f"Could not read {path}: {e}") from e
        log_event(logging.DEBUG, "note_read", path=str(path), bytes=len(content))
        return content

    def write(self, path: PathLike, text: str) -> None:
        path = Path(path)
        try:
            path.write_text(text, encoding=self.encoding)
        except OSError as e:
            log_event(logging.ERROR, "note_write_failed", path=str(path), error=str(e))
            raise StoreError(f"Could not write {path}: {e}") from e
        log_event(logging.INFO, "note_written", path=str(path), bytes=len(text))
