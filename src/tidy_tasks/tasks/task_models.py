# src/tidy_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: TaskStatus | str | None) -> TaskStatus:
        """
        Coerce a raw value into a TaskStatus.

        None means "not supplied" and maps to PENDING.
        Anything else outside the enum raises ValueError.
        """
        if raw is None:
            return cls.PENDING
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw))
        except ValueError:
            raise ValueError(f"Invalid task status: {raw!r}") from None


def _iso(ts: float) -> str:
    return datetime.fromtimestamp(ts, tz=UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: float
    updated_at: float

    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Wire representation (camelCase keys, ISO-8601 UTC timestamps)."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "category": self.category,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }
