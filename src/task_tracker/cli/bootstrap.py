# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings for this
invocation and wires the JSON store into the task service.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_api import Clock, TaskService
from ..tasks.task_models import utc_now
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, clock: Clock = utc_now) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable lets tests point the store at a temporary file.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = JsonTaskStore(
        settings.tasks_file,
        atomic_writes=getattr(settings, "atomic_writes", True),
    )
    logger.debug("Using task file %s", store.path)
    return AppState(settings=settings, tasks=TaskService(store, clock=clock))
