# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation, passed explicitly to the storage layer.
- Every value has a usable default; a bare `task-cli` works in any directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Storage ----
    tasks_file: Path
    atomic_writes: bool

    @staticmethod
    def from_env() -> Settings:
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"), None)

        tasks_file = _env_path(_k("TASKS_FILE"), Path("tasks.json")) or Path("tasks.json")
        atomic_writes = _env_bool(_k("ATOMIC_WRITES"), True)

        return Settings(
            app_name="task-cli",
            log_level=log_level,
            log_dir=log_dir,
            tasks_file=tasks_file,
            atomic_writes=atomic_writes,
        )


def get_settings() -> Settings:
    return Settings.from_env()
