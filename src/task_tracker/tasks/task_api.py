# src/task_tracker/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from ..core.ports import TaskStorage
from . import task_repo
from .task_models import Task, TaskStatus, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Mutation = Callable[[list[Task], datetime], tuple[list[Task], Task]]


class TaskService:
    """
    One load -> apply -> save cycle per call.

    Any error (storage, validation, missing id) propagates before save(),
    so the file on disk is left exactly as it was.
    """

    def __init__(self, storage: TaskStorage, *, clock: Clock = utc_now) -> None:
        self._storage = storage
        self._clock = clock

    def _mutate(self, op_name: str, op: Mutation) -> Task:
        tasks = self._storage.load()
        new_tasks, task = op(tasks, self._clock())
        self._storage.save(new_tasks)
        logger.info("%s task id=%s status=%s", op_name, task.id, task.status.value)
        return task

    def add(self, description: str) -> Task:
        return self._mutate(
            "Added",
            lambda tasks, now: task_repo.add_task(tasks, description, now=now),
        )

    def update(self, task_id: int, description: str) -> Task:
        return self._mutate(
            "Updated",
            lambda tasks, now: task_repo.update_task(tasks, task_id, description, now=now),
        )

    def delete(self, task_id: int) -> Task:
        return self._mutate(
            "Deleted",
            lambda tasks, now: task_repo.delete_task(tasks, task_id),
        )

    def mark_status(self, task_id: int, status: TaskStatus | str) -> Task:
        return self._mutate(
            "Marked",
            lambda tasks, now: task_repo.mark_status(tasks, task_id, status, now=now),
        )

    def list_tasks(self, status_filter: str | TaskStatus | None = None) -> task_repo.TaskListing:
        # Validate the filter before touching the file.
        if not isinstance(status_filter, TaskStatus):
            status_filter = task_repo.parse_filter(status_filter)
        tasks: Sequence[Task] = self._storage.load()
        return task_repo.list_tasks(tasks, status_filter)
