# src/tidy_tasks/llm/offline.py

from __future__ import annotations


class OfflineClassifier:
    """
    Classifier used when no remote API is configured.

    The categorizer checks `available` first and never calls `classify` on it;
    the method only exists to satisfy the RemoteClassifier port.
    """

    @property
    def available(self) -> bool:
        return False

    def classify(self, text: str) -> str | None:
        raise RuntimeError("Remote classifier is not configured. Set TIDY_OPENAI_API_KEY in your .env.")
