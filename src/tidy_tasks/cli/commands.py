# src/tidy_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import AppState
from ..tasks.task_api import (
    TaskValidationError,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskValidationError as e:
            return f"Invalid input: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _ts_local(ts: float) -> str:
    return datetime.fromtimestamp(ts).astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_task(task: Task) -> str:
    mark = "x" if task.status is TaskStatus.COMPLETED else " "
    return f"[{mark}] {task.id} ({task.category or '-'}) {task.title}: {task.description}"


def _split_fields(args: list[str]) -> list[str]:
    return [p.strip() for p in " ".join(args).split("|")]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    remote = "ON" if state.categorizer.is_available() else "OFF (keyword fallback only)"
    model = getattr(state.settings, "classifier_model", "-")
    return (
        "Status:\n"
        f"  Tasks: {state.task_store.count()}\n"
        f"  Remote categorization: {remote}\n"
        f"  Model: {model}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> | <description> [| <category>]
    """
    fields = _split_fields(args)
    if len(fields) < 2:
        return "Usage: /add <title> | <description> [| <category>]"

    payload = {"title": fields[0], "description": fields[1]}
    if len(fields) > 2 and fields[2]:
        payload["category"] = fields[2]

    task = create_task(state, payload)
    return f"Created: {format_task(task)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = list_tasks(state)
    if not tasks:
        return "No tasks."
    lines = [f"Tasks ({len(tasks)}):"]
    lines.extend(f"  {format_task(t)}" for t in tasks)
    return "\n".join(lines)


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show <id>"
    task = get_task(state, args[0])
    if task is None:
        return f"Task not found: {args[0]}"
    return (
        f"{format_task(task)}\n"
        f"  created: {_ts_local(task.created_at)}\n"
        f"  updated: {_ts_local(task.updated_at)}"
    )


def _set_status(state: AppState, args: list[str], status: TaskStatus) -> str:
    if not args:
        return f"Usage: /{'done' if status is TaskStatus.COMPLETED else 'reopen'} <id>"
    task = update_task(state, args[0], {"status": status.value})
    if task is None:
        return f"Task not found: {args[0]}"
    return f"Updated: {format_task(task)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_status(state, args, TaskStatus.COMPLETED)


def cmd_reopen(state: AppState, args: list[str]) -> str:
    return _set_status(state, args, TaskStatus.PENDING)


def cmd_rename(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /rename <id> <new title>"
    task = update_task(state, args[0], {"title": " ".join(args[1:])})
    if task is None:
        return f"Task not found: {args[0]}"
    return f"Updated: {format_task(task)}"


def cmd_category(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /category <id> <name>"
    task = update_task(state, args[0], {"category": " ".join(args[1:])})
    if task is None:
        return f"Task not found: {args[0]}"
    return f"Updated: {format_task(task)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <id>"
    if not delete_task(state, args[0]):
        return f"Task not found: {args[0]}"
    return f"Deleted: {args[0]}"


def cmd_categorize(state: AppState, args: list[str]) -> str:
    """Dry run: show which category a text would get, without storing anything."""
    if not args:
        return "Usage: /categorize <text>"
    return f"Category: {state.categorizer.categorize(' '.join(args))}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count and categorizer mode.")
registry.register("add", cmd_add, help_text="Add a task: /add <title> | <description> [| <category>].")
registry.register("list", cmd_list, help_text="List tasks in creation order.", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("reopen", cmd_reopen, help_text="Mark a task pending again: /reopen <id>.")
registry.register("rename", cmd_rename, help_text="Change a task title: /rename <id> <title>.")
registry.register("category", cmd_category, help_text="Override a task category: /category <id> <name>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("categorize", cmd_categorize, help_text="Preview categorization: /categorize <text>.")
