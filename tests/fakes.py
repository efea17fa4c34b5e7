# tests/fakes.py

from __future__ import annotations

from types import SimpleNamespace
from typing import Any


class FakeClassifier:
    """
    Deterministic RemoteClassifier for unit tests.

    - Captures calls for assertions
    - Returns a predefined answer, or raises `error` if set
    """

    def __init__(
        self,
        next_text: str | None = "work",
        *,
        available: bool = True,
        error: Exception | None = None,
    ) -> None:
        self.next_text = next_text
        self.error = error
        self._available = available
        self.calls: list[str] = []

    @property
    def available(self) -> bool:
        return self._available

    def classify(self, text: str) -> str | None:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.next_text


class FakeCompletions:
    def __init__(self, content: str | None = "work", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.content is None:
            return SimpleNamespace(choices=[])
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))])


class FakeOpenAISDK:
    """Mimics the `client.chat.completions.create(...)` shape of the OpenAI SDK."""

    def __init__(self, content: str | None = "work", error: Exception | None = None) -> None:
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)


class ExplodingCategorizer:
    """Categorizer that violates its contract, to test the service-level guard."""

    def is_available(self) -> bool:
        return False

    def categorize(self, description: str, title: str | None = None) -> str:
        raise RuntimeError("boom")
