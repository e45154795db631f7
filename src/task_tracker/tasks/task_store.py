# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from .errors import ParseError, ReadError, WriteError
from .task_models import Task

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    Whole-file JSON task store.

    The file holds a bare JSON array of task records; every save rewrites it
    in full. A missing or empty file is the first-run state and loads as an
    empty collection.

    With atomic_writes the new content goes to a sibling "<name>.tmp" file
    which then replaces the target, so an interrupted save leaves the old
    file in place.
    """

    def __init__(self, path: str | Path = "tasks.json", *, atomic_writes: bool = True) -> None:
        self._path = Path(path)
        self._atomic_writes = atomic_writes

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_text(self) -> str | None:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ReadError(self._path, f"cannot read task file: {e.strerror or e}") from e
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(self._path, "task file is not valid UTF-8") from e

    def _decode(self, text: str) -> list[Task]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(self._path, f"invalid JSON at line {e.lineno} column {e.colno}") from e
        except RecursionError as e:
            raise ParseError(self._path, "task file is nested too deeply") from e

        if not isinstance(data, list):
            raise ParseError(self._path, "task file must contain a JSON array")

        tasks: list[Task] = []
        seen: set[int] = set()
        for idx, item in enumerate(data):
            try:
                task = Task.from_record(item)
            except KeyError as e:
                raise ParseError(self._path, f"record #{idx}: missing field {e.args[0]!r}") from e
            except (TypeError, ValueError) as e:
                raise ParseError(self._path, f"record #{idx}: {e}") from e
            if task.id in seen:
                raise ParseError(self._path, f"record #{idx}: duplicate id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    @staticmethod
    def _encode(tasks: Iterable[Task]) -> str:
        records = [t.to_record() for t in tasks]
        return json.dumps(records, ensure_ascii=False, indent=2) + "\n"

    # ---- public API ----

    def load(self) -> list[Task]:
        text = self._read_text()
        if text is None:
            logger.debug("Task file %s does not exist; starting empty.", self._path)
            return []
        if not text.strip():
            logger.debug("Task file %s is empty; starting empty.", self._path)
            return []

        tasks = self._decode(text)
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        payload = self._encode(tasks)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic_writes:
                # Replace the symlink target, not the link itself.
                target = self._path.resolve()
                tmp = target.with_name(target.name + ".tmp")
                try:
                    tmp.write_text(payload, "utf-8")
                    if target.exists():
                        os.chmod(tmp, stat.S_IMODE(target.stat().st_mode))
                    os.replace(tmp, target)
                except OSError:
                    with contextlib.suppress(OSError):
                        tmp.unlink()
                    raise
            else:
                self._path.write_text(payload, "utf-8")
        except OSError as e:
            raise WriteError(self._path, f"cannot write task file: {e.strerror or e}") from e

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
