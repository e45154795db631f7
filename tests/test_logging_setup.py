# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_tracker.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_without_dir_installs_console_only(restore_root_logging) -> None:
    setup_logging(console_level=logging.INFO)

    handlers = restore_root_logging.handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.INFO


def test_setup_logging_with_dir_writes_file(restore_root_logging, tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    setup_logging(console_level=logging.WARNING, log_dir=log_dir)

    logging.getLogger("task_tracker.test").debug("hello file")
    for h in restore_root_logging.handlers:
        h.flush()

    assert "hello file" in (log_dir / "task-cli.log").read_text("utf-8")
