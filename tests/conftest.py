# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_api import TaskService
from task_tracker.tasks.task_store import JsonTaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-cli",
        log_level="WARNING",
        log_dir=None,
        tasks_file=tmp_path / "tasks.json",
        atomic_writes=True,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(settings: SimpleNamespace) -> JsonTaskStore:
    return JsonTaskStore(settings.tasks_file)


@pytest.fixture()
def service(store: JsonTaskStore, clock: FakeClock) -> TaskService:
    """
    TaskService over a real JSON file in tmp_path.

    The store is real on purpose: the load/save protocol against the file is
    part of what we want to test.
    """
    return TaskService(store, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, service: TaskService) -> AppState:
    return AppState(settings=settings, tasks=service)
