# tests/test_categorizer.py

from __future__ import annotations

import logging

import pytest

from tidy_tasks.categorization.engine import TaskCategorizer, normalize_answer
from tidy_tasks.categorization.lexicon import VALID_CATEGORIES

from .fakes import FakeClassifier

GROCERIES = "Buy groceries and pay the electricity bill"


def test_unconfigured_remote_is_never_called() -> None:
    remote = FakeClassifier(available=False)
    categorizer = TaskCategorizer(remote)

    assert categorizer.is_available() is False
    assert categorizer.categorize(GROCERIES) == "shopping"
    assert categorizer.categorize("") == "general"
    assert remote.calls == []


def test_remote_answer_is_trimmed_and_lowercased() -> None:
    remote = FakeClassifier("  Work \n")
    categorizer = TaskCategorizer(remote)

    assert categorizer.is_available() is True
    assert categorizer.categorize("Water the plants") == "work"
    assert remote.calls == ["Water the plants"]


def test_remote_receives_title_and_description() -> None:
    remote = FakeClassifier("education")
    TaskCategorizer(remote).categorize("Complete project report", "Need to finish this today")

    assert remote.calls == ["Need to finish this today: Complete project report"]


def test_remote_answer_outside_whitelist_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    remote = FakeClassifier("urgent")

    with caplog.at_level(logging.WARNING, logger="tidy_tasks"):
        result = TaskCategorizer(remote).categorize(GROCERIES)

    assert result == "shopping"
    assert len(remote.calls) == 1
    assert "invalid category" in caplog.text


@pytest.mark.parametrize(
    "error",
    [TimeoutError("slow"), ConnectionError("down"), RuntimeError("bad payload")],
)
def test_remote_errors_fall_back_without_raising(error: Exception) -> None:
    remote = FakeClassifier(error=error)

    assert TaskCategorizer(remote).categorize("Clean the kitchen and do the laundry") == "home"
    assert len(remote.calls) == 1


def test_remote_empty_answer_falls_back() -> None:
    assert TaskCategorizer(FakeClassifier(None)).categorize("Watch a movie") == "entertainment"
    assert TaskCategorizer(FakeClassifier("")).categorize("Watch a movie") == "entertainment"


def test_remote_general_is_accepted() -> None:
    # Remote "general" wins even when keywords would pick something else.
    assert TaskCategorizer(FakeClassifier("general")).categorize(GROCERIES) == "general"


def test_result_is_always_a_known_category() -> None:
    categorizer = TaskCategorizer(FakeClassifier("Shopping list"))
    for text in ("", GROCERIES, "xyz", "Book a concert"):
        assert categorizer.categorize(text) in VALID_CATEGORIES


def test_normalize_answer() -> None:
    assert normalize_answer(" FINANCE ") == "finance"
    assert normalize_answer("finance.") is None
    assert normalize_answer(None) is None
