# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import AppState
from ..tasks.errors import (
    NotFoundError,
    ParseError,
    ReadError,
    TaskTrackerError,
    ValidationError,
    WriteError,
)
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Missing/unknown command or wrong number of arguments."""


class CommandRegistry:
    """Maps sub-command names (add, list, mark-done, ...) to handlers."""

    def __init__(self, prog: str = "task-cli") -> None:
        self.prog = prog
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, str] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._usage[key] = usage
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run one command given as argv (without the program name).
        Returns the text to print; raises UsageError or TaskTrackerError.
        """
        if not argv:
            raise UsageError("missing command")

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"unknown command: {argv[0]}")

        logger.debug("Dispatching command=%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        width = max((len(u) for u in self._usage.values()), default=0)
        lines = [f"Usage: {self.prog} <command> [args...]", "", "Commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {self._usage[name]:<{width}}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _ts_local(ts: datetime) -> str:
    return ts.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def parse_task_id(raw: str) -> int:
    # ASCII digits only: int() would also take "1_0" or non-Latin digits.
    text = raw.strip().removeprefix("+")
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(f"invalid task id {raw!r} (expected a positive integer)")
    task_id = int(text)
    if task_id <= 0:
        raise ValidationError(f"invalid task id {raw!r} (expected a positive integer)")
    return task_id


def format_task(task: Task) -> str:
    return (
        f"[{task.id}] {task.status.label:<11} {task.description}"
        f"  (created {_ts_local(task.created_at)}, updated {_ts_local(task.updated_at)})"
    )


def format_error(exc: TaskTrackerError) -> str:
    """One distinct message per failure kind."""
    if isinstance(exc, NotFoundError):
        return f"Error: task {exc.task_id} not found."
    if isinstance(exc, ValidationError):
        return f"Error: invalid input: {exc}."
    if isinstance(exc, ParseError):
        return f"Error: task file is corrupted: {exc}"
    if isinstance(exc, ReadError):
        return f"Error: could not read task file: {exc}"
    if isinstance(exc, WriteError):
        return f"Error: could not save tasks: {exc}"
    return f"Error: {exc}"


def _require(args: list[str], *, min_args: int, max_args: int | None, usage: str) -> None:
    if len(args) < min_args or (max_args is not None and len(args) > max_args):
        raise UsageError(f"usage: {registry.prog} {usage}")


def cmd_add(state: AppState, args: list[str]) -> str:
    _require(args, min_args=1, max_args=None, usage="add <description...>")
    task = state.tasks.add(" ".join(args))
    return f"Task added successfully (ID: {task.id})"


def cmd_update(state: AppState, args: list[str]) -> str:
    _require(args, min_args=2, max_args=None, usage="update <id> <description...>")
    task_id = parse_task_id(args[0])
    task = state.tasks.update(task_id, " ".join(args[1:]))
    return f"Task {task.id} updated successfully"


def cmd_delete(state: AppState, args: list[str]) -> str:
    _require(args, min_args=1, max_args=1, usage="delete <id>")
    task = state.tasks.delete(parse_task_id(args[0]))
    return f"Task {task.id} deleted successfully"


def _make_mark(status: TaskStatus) -> CommandHandler:
    def cmd_mark(state: AppState, args: list[str]) -> str:
        _require(args, min_args=1, max_args=1, usage=f"mark-{status.value} <id>")
        task = state.tasks.mark_status(parse_task_id(args[0]), status)
        return f"Task {task.id} marked as {task.status.label}"

    cmd_mark.__name__ = f"cmd_mark_{status.name.lower()}"
    return cmd_mark


def cmd_list(state: AppState, args: list[str]) -> str:
    _require(args, min_args=0, max_args=1, usage="list [todo|in-progress|done]")
    raw_filter = args[0] if args else ""
    listing = state.tasks.list_tasks(raw_filter)

    if listing.is_empty:
        if listing.status is None:
            return "No tasks found."
        return f"No tasks with status '{listing.status.value}'."

    return "\n".join(format_task(t) for t in listing)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


registry.register("add", cmd_add, "add <description...>", "Add a new task.")
registry.register("update", cmd_update, "update <id> <description...>", "Change a task's description.")
registry.register("delete", cmd_delete, "delete <id>", "Delete a task.")
registry.register(
    "mark-in-progress",
    _make_mark(TaskStatus.IN_PROGRESS),
    "mark-in-progress <id>",
    "Mark a task as in progress.",
)
registry.register("mark-done", _make_mark(TaskStatus.DONE), "mark-done <id>", "Mark a task as done.")
registry.register("mark-todo", _make_mark(TaskStatus.TODO), "mark-todo <id>", "Move a task back to todo.")
registry.register(
    "list",
    cmd_list,
    "list [todo|in-progress|done]",
    "List tasks, optionally filtered by status.",
)
registry.register("help", cmd_help, "help", "Show this help.", aliases=["-h", "--help"])
