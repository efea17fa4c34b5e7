# src/tidy_tasks/tasks/task_api.py

"""
Task service: request validation in front of the store.

Connectors hand raw payloads (parsed JSON, CLI args) to these helpers.
Invalid input raises TaskValidationError; a missing task is a plain None/False.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..categorization.lexicon import DEFAULT_CATEGORY
from ..core.state import AppState
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

_STATUS_ERROR = 'Status must be either "pending" or "completed"'


class TaskValidationError(ValueError):
    """Payload failed validation; the message is safe to show to the user."""


def _require_text(payload: Mapping[str, Any], field: str) -> str:
    value = payload.get(field)
    if not value or not isinstance(value, str) or not value.strip():
        raise TaskValidationError(f"{field.capitalize()} is required and must be a string")
    return value.strip()


def _parse_status(raw: Any) -> TaskStatus:
    try:
        return TaskStatus.parse(raw)
    except ValueError:
        raise TaskValidationError(_STATUS_ERROR) from None


def _resolve_category(state: AppState, description: str, title: str) -> str:
    try:
        return state.categorizer.categorize(description, title)
    except Exception:
        logger.exception("Categorization error; using %s", DEFAULT_CATEGORY.value)
        return DEFAULT_CATEGORY.value


def create_task(state: AppState, payload: Mapping[str, Any]) -> Task:
    """
    Validate a creation payload and store the task.

    A missing/empty category is filled in by the categorizer.
    """
    title = _require_text(payload, "title")
    description = _require_text(payload, "description")
    status = _parse_status(payload.get("status") or None)

    category = payload.get("category")
    if not category or not isinstance(category, str) or not category.strip():
        category = _resolve_category(state, description, title)

    task = state.task_store.create(
        title=title,
        description=description,
        status=status,
        category=category.strip(),
    )
    logger.info("Task created id=%s category=%s", task.id, task.category)
    return task


def update_task(state: AppState, task_id: str, payload: Mapping[str, Any]) -> Task | None:
    """
    Validate an update payload and apply it.

    Only non-empty string fields are forwarded; status is validated when present.
    Returns None if the task does not exist.
    """
    status_raw = payload.get("status")
    if status_raw:
        status_raw = _parse_status(status_raw)

    changes: dict[str, Any] = {}
    for field in ("title", "description", "category"):
        value = payload.get(field)
        if value and isinstance(value, str) and value.strip():
            changes[field] = value.strip()
    if status_raw:
        changes["status"] = status_raw

    task = state.task_store.update(task_id, changes)
    if task is None:
        logger.info("Task update: not found id=%s", task_id)
    return task


def list_tasks(state: AppState) -> list[Task]:
    return state.task_store.get_all()


def get_task(state: AppState, task_id: str) -> Task | None:
    return state.task_store.get_by_id(task_id)


def delete_task(state: AppState, task_id: str) -> bool:
    deleted = state.task_store.delete(task_id)
    if deleted:
        logger.info("Task deleted id=%s", task_id)
    return deleted
