# src/tidy_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time: without an API key the app runs with
  the local keyword categorizer only.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TIDY"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Remote classifier (OpenAI-compatible) ----
    openai_api_key: str | None
    openai_base_url: str | None
    classifier_model: str
    classifier_max_tokens: int
    classifier_temperature: float
    classifier_connect_timeout: float
    classifier_read_timeout: float

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "tidy-tasks") or "tidy-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tidy"))

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        openai_api_key = _first_env(_k("OPENAI_API_KEY"), "OPENAI_API_KEY", default=None)
        openai_base_url = _first_env(_k("OPENAI_BASE_URL"), "OPENAI_BASE_URL", default=None)
        classifier_model = _env(_k("CLASSIFIER_MODEL"), "gpt-3.5-turbo").strip() or "gpt-3.5-turbo"
        classifier_max_tokens = _env_int(_k("CLASSIFIER_MAX_TOKENS"), 10)
        classifier_temperature = _env_float(_k("CLASSIFIER_TEMPERATURE"), 0.3)

        connect_timeout = _env_float(_k("CLASSIFIER_CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout = _env_float(_k("CLASSIFIER_READ_TIMEOUT_SECONDS"), 15.0)
        # keep read >= connect as a sane baseline
        read_timeout = max(read_timeout, connect_timeout)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            console_enabled=console_enabled,
            openai_api_key=openai_api_key,
            openai_base_url=openai_base_url,
            classifier_model=classifier_model,
            classifier_max_tokens=max(1, classifier_max_tokens),
            classifier_temperature=classifier_temperature,
            classifier_connect_timeout=connect_timeout,
            classifier_read_timeout=read_timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
