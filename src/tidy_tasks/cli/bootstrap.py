# src/tidy_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the remote classifier strategy (OpenAI or offline),
- wires the categorizer and a fresh task store into AppState.
"""

from __future__ import annotations

import logging

from ..categorization.engine import TaskCategorizer
from ..config import get_settings
from ..core.ports import RemoteClassifier
from ..core.state import AppState
from ..llm.client import OpenAIClassifier
from ..llm.offline import OfflineClassifier
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def build_remote_classifier(settings) -> RemoteClassifier:
    """Select the remote strategy once; missing credentials mean offline mode."""
    if not getattr(settings, "openai_api_key", None):
        logger.info("No API key configured; using keyword categorization only.")
        return OfflineClassifier()

    try:
        classifier = OpenAIClassifier(settings)
    except RuntimeError as e:
        logger.warning("Remote categorization disabled (%s); using keyword categorization only.", e)
        return OfflineClassifier()

    logger.info("Remote categorization enabled (model=%s).", classifier.model)
    return classifier


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        categorizer=TaskCategorizer(build_remote_classifier(settings)),
    )
