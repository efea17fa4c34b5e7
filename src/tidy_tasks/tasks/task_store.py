# src/tidy_tasks/tasks/task_store.py

from __future__ import annotations

import dataclasses
import logging
import threading
import time
from collections.abc import Mapping
from typing import Any

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

ID_PREFIX = "task_"

# Keys a partial update may carry. Anything else (id, created_at, ...) is ignored.
_UPDATABLE_FIELDS = frozenset({"title", "description", "status", "category"})


class TaskStore:
    """
    In-memory task store.

    Layout:
    - _index: id -> Task (lookup)
    - _order: append-only list of ids in creation order (listing)

    Thread-safety:
    - every public method runs under one re-entrant lock
    - Task objects are frozen, so a returned record is a snapshot
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._index: dict[str, Task] = {}
        self._order: list[str] = []
        self._next_id = 1
        self._last_ts = 0.0
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _now(self) -> float:
        # Wall clock, forced strictly increasing so every mutation gets a newer stamp.
        now = time.time()
        if now <= self._last_ts:
            now = self._last_ts + 1e-6
        self._last_ts = now
        return now

    def _generate_id(self) -> str:
        task_id = f"{ID_PREFIX}{self._next_id}"
        self._next_id += 1
        return task_id

    @staticmethod
    def _clean_text(value: Any) -> str:
        return str(value).strip()

    @staticmethod
    def _clean_category(value: Any) -> str | None:
        if value is None:
            return None
        return str(value).strip()

    # ---- public API ----

    def create(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus | str | None = None,
        category: str | None = None,
    ) -> Task:
        task_status = TaskStatus.parse(status)

        with self._lock:
            now = self._now()
            task = Task(
                id=self._generate_id(),
                title=self._clean_text(title),
                description=self._clean_text(description),
                status=task_status,
                category=self._clean_category(category),
                created_at=now,
                updated_at=now,
            )
            self._index[task.id] = task
            self._order.append(task.id)

        logger.debug("Task created id=%s status=%s category=%s", task.id, task.status.value, task.category)
        return task

    def get_all(self) -> list[Task]:
        with self._lock:
            return [self._index[task_id] for task_id in self._order]

    def get_by_id(self, task_id: str) -> Task | None:
        with self._lock:
            return self._index.get(task_id)

    def update(self, task_id: str, changes: Mapping[str, Any] | None = None) -> Task | None:
        """
        Apply a partial update.

        Only keys present in `changes` are touched; id/created_at/updated_at are
        never taken from the caller. updated_at is refreshed even if nothing
        else changed. Returns None when the id is unknown.
        """
        changes = dict(changes or {})

        fields: dict[str, Any] = {}
        for key, value in changes.items():
            if key not in _UPDATABLE_FIELDS:
                logger.debug("Task update id=%s: ignoring field %s", task_id, key)
                continue
            if key == "status":
                fields["status"] = TaskStatus.parse(value)
            elif key == "category":
                fields["category"] = self._clean_category(value)
            else:
                fields[key] = self._clean_text(value)

        with self._lock:
            current = self._index.get(task_id)
            if current is None:
                return None

            updated = dataclasses.replace(current, **fields, updated_at=self._now())
            self._index[task_id] = updated

        logger.debug("Task updated id=%s fields=%s", task_id, sorted(fields))
        return updated

    def delete(self, task_id: str) -> bool:
        with self._lock:
            if self._index.pop(task_id, None) is None:
                return False
            self._order.remove(task_id)

        logger.debug("Task deleted id=%s", task_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._index)

    def clear(self) -> None:
        """Drop every task and restart id generation. Meant for test isolation."""
        with self._lock:
            self._index.clear()
            self._order.clear()
            self._next_id = 1
        logger.debug("TaskStore cleared")
