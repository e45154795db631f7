# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from .errors import ValidationError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The stored value is the lowercase key ("in-progress" keeps its hyphen);
    `label` is the uppercase form shown in listings.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return self.value.upper()

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus:
        """Strict lookup used for user input; unknown values are a ValidationError."""
        allowed = ", ".join(s.value for s in cls)
        if raw is not None and not isinstance(raw, str):
            raise ValidationError(f"invalid status {raw!r} (expected one of: {allowed})")
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            raise ValidationError(f"invalid status {raw!r} (expected one of: {allowed})") from None


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_ts(ts: datetime) -> str:
    return ts.astimezone(UTC).isoformat()


def parse_ts(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not isinstance(raw, str):
        raise TypeError(f"timestamp must be a string, got {type(raw).__name__}")
    s = raw.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    ts = datetime.fromisoformat(s)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_record(self) -> dict[str, Any]:
        # Key order is the on-disk field order.
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": format_ts(self.created_at),
            "updatedAt": format_ts(self.updated_at),
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON object.

        Raises ValueError/TypeError/KeyError on schema violations; the store
        turns those into ParseError with the file path attached.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id <= 0:
            raise ValueError(f"id must be a positive integer, got {task_id!r}")

        description = raw["description"]
        if not isinstance(description, str) or not description.strip():
            raise ValueError(f"task {task_id}: description must be a non-empty string")

        status_raw = raw["status"]
        if not isinstance(status_raw, str):
            raise TypeError(f"task {task_id}: status must be a string")
        status = TaskStatus(status_raw)

        created_at = parse_ts(raw["createdAt"])
        updated_at = parse_ts(raw["updatedAt"])
        if updated_at < created_at:
            raise ValueError(f"task {task_id}: updatedAt is earlier than createdAt")

        return cls(
            id=task_id,
            description=description,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
