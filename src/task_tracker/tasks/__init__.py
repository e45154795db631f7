from .errors import (
    NotFoundError,
    ParseError,
    ReadError,
    StorageError,
    TaskTrackerError,
    ValidationError,
    WriteError,
)
from .task_models import Task, TaskStatus

__all__ = [
    "NotFoundError",
    "ParseError",
    "ReadError",
    "StorageError",
    "Task",
    "TaskStatus",
    "TaskTrackerError",
    "ValidationError",
    "WriteError",
]
