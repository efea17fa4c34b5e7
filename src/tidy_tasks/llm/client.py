# src/tidy_tasks/llm/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx
import openai
from openai import OpenAI

from ..categorization.lexicon import TaskCategory

logger = logging.getLogger(__name__)

CATEGORY_LIST = ", ".join(c.value for c in TaskCategory if c is not TaskCategory.GENERAL)

SYSTEM_PROMPT = (
    "You are a task categorization assistant. "
    f"Categorize tasks into one of these categories: {CATEGORY_LIST}, or general. "
    "Respond with only the category name in lowercase."
)


def build_user_prompt(text: str) -> str:
    return f'Categorize this task: "{text}"'


def _is_auth_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return True
    return exc.__class__.__name__ in {"AuthenticationError", "PermissionDeniedError", "UnauthorizedError"}


def _is_rate_limit_error(exc: Exception) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    return exc.__class__.__name__ in {"RateLimitError", "TooManyRequestsError"}


def _is_connection_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.APIConnectionError, httpx.TimeoutException, TimeoutError)):
        return True
    return exc.__class__.__name__ in {
        "APIConnectionError",
        "APITimeoutError",
        "Timeout",
        "ConnectTimeout",
        "ReadTimeout",
        "WriteTimeout",
    }


def describe_llm_error(err: Exception) -> str:
    """Short, log-friendly reason for a failed classification call."""
    if _is_auth_error(err):
        return "authentication failed (check TIDY_OPENAI_API_KEY)"
    if _is_rate_limit_error(err):
        return "rate-limited"
    if _is_connection_error(err):
        return "network/timeout error"
    return err.__class__.__name__


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


def _extract_content(completion: Any) -> str | None:
    try:
        choice0 = completion.choices[0]
        message = getattr(choice0, "message", None)
        content = getattr(message, "content", None) if message is not None else None
    except (AttributeError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


class OpenAIClassifier:
    """
    Remote classifier backed by an OpenAI-compatible chat completion API.

    Behavior:
    - One request per classify() call; SDK retries are disabled.
    - Every request carries an explicit connect/read timeout.
    - Returns the raw answer text (None if the response had no content).
      Validation against the category whitelist is the caller's job.
    - Errors are raised to the caller unchanged.
    """

    def __init__(self, settings: Any, *, client: Any | None = None) -> None:
        api_key = getattr(settings, "openai_api_key", None)
        if client is None and (not api_key or not str(api_key).strip()):
            raise RuntimeError("LLM API key is not set. Set TIDY_OPENAI_API_KEY in your .env.")

        self.model: str = str(getattr(settings, "classifier_model", "") or "gpt-3.5-turbo")
        self.max_tokens = int(getattr(settings, "classifier_max_tokens", 10))
        self.temperature = float(getattr(settings, "classifier_temperature", 0.3))
        self.timeout = _make_timeout(
            connect_s=float(getattr(settings, "classifier_connect_timeout", 5.0)),
            read_s=float(getattr(settings, "classifier_read_timeout", 15.0)),
        )

        if client is None:
            base_url = getattr(settings, "openai_base_url", None) or None
            client = OpenAI(
                api_key=str(api_key),
                base_url=base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        self._client = client

    @property
    def available(self) -> bool:
        return True

    def classify(self, text: str) -> str | None:
        logger.debug("LLM: classify model=%s chars=%d", self.model, len(text))
        completion = self._client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(text)},
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            timeout=self.timeout,
        )
        content = _extract_content(completion)
        logger.debug("LLM: raw answer=%r", content)
        return content
