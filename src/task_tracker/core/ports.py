# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task service.

The service depends on this Protocol instead of the concrete JSON store,
which keeps tests free to swap in an in-memory storage.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Whole-collection storage: read everything, write everything."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
