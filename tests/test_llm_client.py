# tests/test_llm_client.py

from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest
from openai import OpenAI

from tidy_tasks.categorization.engine import TaskCategorizer
from tidy_tasks.llm.client import SYSTEM_PROMPT, OpenAIClassifier, describe_llm_error
from tidy_tasks.llm.offline import OfflineClassifier

from .fakes import FakeOpenAISDK


def _request() -> httpx.Request:
    return httpx.Request("POST", "https://api.example.test/v1/chat/completions")


def test_classify_sends_bounded_request(settings: SimpleNamespace) -> None:
    sdk = FakeOpenAISDK(" Health ")
    classifier = OpenAIClassifier(settings, client=sdk)

    assert classifier.available is True
    assert classifier.classify("Gym: leg day") == " Health "

    (call,) = sdk.completions.calls
    assert call["model"] == "test-model"
    assert call["max_tokens"] == 10
    assert call["temperature"] == 0.3
    assert isinstance(call["timeout"], httpx.Timeout)
    assert call["timeout"].read == 2.0
    assert call["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert call["messages"][1]["content"] == 'Categorize this task: "Gym: leg day"'


def test_system_prompt_lists_every_category() -> None:
    for name in ("work", "personal", "shopping", "finance", "health", "education", "home", "entertainment", "general"):
        assert name in SYSTEM_PROMPT


def test_classify_without_choices_returns_none(settings: SimpleNamespace) -> None:
    assert OpenAIClassifier(settings, client=FakeOpenAISDK(None)).classify("x") is None


def test_missing_api_key_is_rejected(settings: SimpleNamespace) -> None:
    with pytest.raises(RuntimeError, match="API key"):
        OpenAIClassifier(settings)


def test_real_sdk_client_is_built_without_retries(settings: SimpleNamespace) -> None:
    settings.openai_api_key = "sk-test"
    classifier = OpenAIClassifier(settings)

    assert isinstance(classifier._client, OpenAI)
    assert classifier._client.max_retries == 0


def test_sdk_timeout_falls_back_to_keywords(settings: SimpleNamespace) -> None:
    sdk = FakeOpenAISDK(error=openai.APITimeoutError(request=_request()))
    categorizer = TaskCategorizer(OpenAIClassifier(settings, client=sdk))

    assert categorizer.categorize("Buy groceries and pay the electricity bill") == "shopping"
    assert len(sdk.completions.calls) == 1


def test_describe_llm_error() -> None:
    assert describe_llm_error(openai.APITimeoutError(request=_request())) == "network/timeout error"
    assert describe_llm_error(openai.APIConnectionError(request=_request())) == "network/timeout error"
    assert describe_llm_error(ValueError("x")) == "ValueError"


def test_offline_classifier_is_unavailable() -> None:
    offline = OfflineClassifier()
    assert offline.available is False
    with pytest.raises(RuntimeError):
        offline.classify("anything")
