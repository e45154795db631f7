# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from task_tracker.tasks.errors import ValidationError
from task_tracker.tasks.task_models import Task, TaskStatus, format_ts, parse_ts


def _record(**overrides):
    rec = {
        "id": 1,
        "description": "Buy milk",
        "status": "todo",
        "createdAt": "2026-01-01T12:00:00+00:00",
        "updatedAt": "2026-01-01T12:00:05+00:00",
    }
    rec.update(overrides)
    return rec


def test_status_parse_accepts_known_values_case_insensitively() -> None:
    assert TaskStatus.parse("todo") is TaskStatus.TODO
    assert TaskStatus.parse(" In-Progress ") is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse("DONE") is TaskStatus.DONE
    assert TaskStatus.IN_PROGRESS.label == "IN-PROGRESS"


@pytest.mark.parametrize("raw", ["", None, "bogus", "in_progress", "doing", 1, ["done"]])
def test_status_parse_rejects_unknown_values(raw) -> None:
    with pytest.raises(ValidationError):
        TaskStatus.parse(raw)


def test_to_record_uses_fixed_key_order() -> None:
    ts = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    task = Task(id=7, description="x", status=TaskStatus.DONE, created_at=ts, updated_at=ts)

    rec = task.to_record()

    assert list(rec) == ["id", "description", "status", "createdAt", "updatedAt"]
    assert rec["status"] == "done"
    assert rec["createdAt"] == "2026-01-01T12:00:00+00:00"


def test_from_record_parses_valid_record() -> None:
    task = Task.from_record(_record(status="in-progress"))

    assert task.id == 1
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.updated_at - task.created_at == timedelta(seconds=5)
    assert Task.from_record(task.to_record()) == task


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": 0},
        {"id": -3},
        {"id": "1"},
        {"id": True},
        {"description": ""},
        {"description": 42},
        {"status": "bogus"},
        {"status": 1},
        {"createdAt": "yesterday"},
        {"updatedAt": "2025-12-31T00:00:00+00:00"},
    ],
)
def test_from_record_rejects_schema_violations(overrides) -> None:
    with pytest.raises((TypeError, ValueError)):
        Task.from_record(_record(**overrides))


def test_from_record_requires_every_field() -> None:
    rec = _record()
    del rec["updatedAt"]
    with pytest.raises(KeyError):
        Task.from_record(rec)


def test_parse_ts_normalizes_to_utc() -> None:
    assert parse_ts("2026-01-01T12:00:00Z") == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    assert parse_ts("2026-01-01T12:00:00") == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    plus_two = datetime(2026, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_ts(plus_two) == "2026-01-01T12:00:00+00:00"
