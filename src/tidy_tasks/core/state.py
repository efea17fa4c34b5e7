# src/tidy_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import Categorizer, TaskRepo


@dataclass
class AppState:
    """Everything a request handler needs, wired once by the composition root."""

    settings: Any
    task_store: TaskRepo
    categorizer: Categorizer
