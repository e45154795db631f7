# src/task_tracker/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskTrackerError(Exception):
    """Base class for every failure the CLI reports to the user."""


class StorageError(TaskTrackerError):
    """I/O or format fault in the backing file."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message} ({self.path})")


class ReadError(StorageError):
    pass


class WriteError(StorageError):
    pass


class ParseError(StorageError):
    pass


class ValidationError(TaskTrackerError, ValueError):
    """Bad user input: empty description, unknown status/filter, bad id."""


class NotFoundError(TaskTrackerError, LookupError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"task {task_id} not found")
