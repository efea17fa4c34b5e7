# src/tidy_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task service and the categorizer depend on Protocols instead of concrete
implementations, so the remote classifier and the store stay swappable in tests.
"""

from collections.abc import Mapping
from typing import Any, Protocol

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class RemoteClassifier(Protocol):
    """
    Remote text classifier strategy.

    `available` is a static capability flag decided at construction time.
    `classify` returns the raw answer text; it may raise on any failure.
    """

    @property
    def available(self) -> bool: ...

    def classify(self, text: str) -> str | None: ...


class Categorizer(Protocol):
    def categorize(self, description: str, title: str | None = None) -> str: ...
    def is_available(self) -> bool: ...


class TaskRepo(Protocol):
    def create(
            self,
            *,
            title: str,
            description: str,
            status: Any = None,  # TaskStatus | str (kept as Any to avoid import coupling)
            category: str | None = None,
    ) -> Any: ...

    def get_all(self) -> list[Any]: ...
    def get_by_id(self, task_id: str) -> Any | None: ...
    def update(self, task_id: str, changes: Mapping[str, Any] | None = None) -> Any | None: ...
    def delete(self, task_id: str) -> bool: ...
    def count(self) -> int: ...
    def clear(self) -> None: ...
