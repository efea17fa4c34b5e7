# src/tidy_tasks/categorization/engine.py

from __future__ import annotations

import logging

from ..core.ports import RemoteClassifier
from ..llm.client import describe_llm_error
from .keywords import categorize_by_keywords, combine_text
from .lexicon import is_valid_category

logger = logging.getLogger(__name__)


def normalize_answer(raw: str | None) -> str | None:
    """Trim + lowercase a remote answer; None if it is not a known category."""
    if not isinstance(raw, str):
        return None
    answer = raw.strip().lower()
    return answer if is_valid_category(answer) else None


class TaskCategorizer:
    """
    Hybrid categorizer.

    Pipeline (first success wins):
    1. remote classifier, if configured (exactly one attempt)
    2. whitelist check of the remote answer
    3. local keyword scoring

    categorize() never raises because of the remote side: any error,
    timeout or unexpected answer is logged and replaced by the local result.
    """

    def __init__(self, remote: RemoteClassifier) -> None:
        self._remote = remote

    def is_available(self) -> bool:
        return bool(self._remote.available)

    def categorize(self, description: str, title: str | None = None) -> str:
        text = combine_text(description, title)

        if self.is_available():
            category = self._try_remote(text)
            if category is not None:
                return category

        category = categorize_by_keywords(text)
        logger.debug("Keyword fallback -> %s", category.value)
        return category.value

    def _try_remote(self, text: str) -> str | None:
        try:
            raw = self._remote.classify(text)
        except Exception as e:
            logger.warning("Remote categorization failed (%s), falling back to keywords", describe_llm_error(e))
            logger.debug("Remote categorization error details", exc_info=True)
            return None

        category = normalize_answer(raw)
        if category is None:
            logger.warning("Remote categorization returned invalid category %r, falling back to keywords", raw)
            return None

        logger.debug("Remote categorization -> %s", category)
        return category
