# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tidy_tasks.categorization.engine import TaskCategorizer
from tidy_tasks.core.state import AppState
from tidy_tasks.tasks.task_store import TaskStore

from .fakes import FakeClassifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment/.env.
    """
    return SimpleNamespace(
        app_name="tidy-test",
        log_level="INFO",
        data_dir=tmp_path / "data",
        console_enabled=True,
        openai_api_key=None,
        openai_base_url=None,
        classifier_model="test-model",
        classifier_max_tokens=10,
        classifier_temperature=0.3,
        classifier_connect_timeout=1.0,
        classifier_read_timeout=2.0,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def remote() -> FakeClassifier:
    """Remote classifier that is NOT configured (keyword fallback only)."""
    return FakeClassifier(available=False)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, remote: FakeClassifier) -> AppState:
    """
    AppState wired with a real in-memory store and a fake remote classifier.
    """
    return AppState(
        settings=settings,
        task_store=store,
        categorizer=TaskCategorizer(remote),
    )
