# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from task_tracker.tasks.task_models import Task


class FakeClock:
    """
    Deterministic clock for unit tests.

    Each call returns a time `step` later than the previous one, starting at `start`.
    """

    def __init__(
        self,
        start: datetime = datetime(2026, 1, 1, 12, 0, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start - step
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


class FakeTaskStorage:
    """
    In-memory TaskStorage that records every save.

    Useful for asserting the "no save on failure" rule without touching disk.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self.tasks: list[Task] = list(tasks)
        self.loads = 0
        self.saves: list[list[Task]] = []

    def load(self) -> list[Task]:
        self.loads += 1
        return list(self.tasks)

    def save(self, tasks: Iterable[Task]) -> None:
        snapshot = list(tasks)
        self.saves.append(snapshot)
        self.tasks = snapshot
