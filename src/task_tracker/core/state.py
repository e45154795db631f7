# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_api import TaskService


@dataclass
class AppState:
    # Settings are kept on the state so command handlers can report paths.
    settings: object

    tasks: TaskService
