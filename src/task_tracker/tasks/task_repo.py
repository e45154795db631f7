# src/task_tracker/tasks/task_repo.py

"""
Pure operations on an in-memory task collection.

Every mutating function takes the current collection and returns a new list
plus the affected task; the input list and its tasks are never modified, so a
failed operation cannot leave a half-applied state behind. Persistence is the
caller's job (see task_api.TaskService).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from datetime import datetime

from .errors import NotFoundError, ValidationError
from .task_models import Task, TaskStatus


def next_id(tasks: Sequence[Task]) -> int:
    """1 for an empty collection, otherwise one past the highest id (deleted ids are not reused)."""
    return max((t.id for t in tasks), default=0) + 1


def clean_description(description: str | None) -> str:
    text = (description or "").strip()
    if not text:
        raise ValidationError("description must not be empty")
    return text


def parse_filter(raw: str | None) -> TaskStatus | None:
    """Empty/None means "all tasks"; anything else must be a known status."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        return TaskStatus.parse(raw)
    except ValidationError:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise ValidationError(f"invalid filter {raw!r} (expected one of: {allowed})") from None


def _index_of(tasks: Sequence[Task], task_id: int) -> int:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    raise NotFoundError(task_id)


def _touch(task: Task, now: datetime, **changes) -> Task:
    # updated_at never goes below created_at, even if the clock stepped back.
    return replace(task, updated_at=max(now, task.created_at), **changes)


def add_task(tasks: Sequence[Task], description: str, *, now: datetime) -> tuple[list[Task], Task]:
    text = clean_description(description)
    task = Task(
        id=next_id(tasks),
        description=text,
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    return [*tasks, task], task


def update_task(
    tasks: Sequence[Task], task_id: int, description: str, *, now: datetime
) -> tuple[list[Task], Task]:
    text = clean_description(description)
    idx = _index_of(tasks, task_id)
    updated = _touch(tasks[idx], now, description=text)
    out = list(tasks)
    out[idx] = updated
    return out, updated


def delete_task(tasks: Sequence[Task], task_id: int) -> tuple[list[Task], Task]:
    idx = _index_of(tasks, task_id)
    out = list(tasks)
    removed = out.pop(idx)
    return out, removed


def mark_status(
    tasks: Sequence[Task], task_id: int, status: TaskStatus | str, *, now: datetime
) -> tuple[list[Task], Task]:
    # Status is validated before the id is looked up.
    new_status = status if isinstance(status, TaskStatus) else TaskStatus.parse(status)
    idx = _index_of(tasks, task_id)
    updated = _touch(tasks[idx], now, status=new_status)
    out = list(tasks)
    out[idx] = updated
    return out, updated


@dataclass(frozen=True, slots=True)
class TaskListing:
    """
    Lazy, restartable view of the tasks matching `status` (None = all).

    Iterating filters on the fly; each iteration starts over from the
    beginning of the snapshot.
    """

    tasks: tuple[Task, ...]
    status: TaskStatus | None = None

    def __iter__(self) -> Iterator[Task]:
        return (t for t in self.tasks if self.status is None or t.status == self.status)

    @property
    def is_empty(self) -> bool:
        return next(iter(self), None) is None


def list_tasks(tasks: Sequence[Task], status_filter: str | TaskStatus | None = None) -> TaskListing:
    status = status_filter if isinstance(status_filter, TaskStatus) else parse_filter(status_filter)
    return TaskListing(tasks=tuple(tasks), status=status)
