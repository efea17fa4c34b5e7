# src/tidy_tasks/categorization/lexicon.py

"""
Category lexicon: the fixed category set and the trigger keywords used by the
local keyword scorer.

Declaration order matters: the scorer breaks ties in favor of the category
declared first.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class TaskCategory(StrEnum):
    WORK = "work"
    PERSONAL = "personal"
    SHOPPING = "shopping"
    FINANCE = "finance"
    HEALTH = "health"
    EDUCATION = "education"
    HOME = "home"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"


DEFAULT_CATEGORY: Final = TaskCategory.GENERAL

VALID_CATEGORIES: Final[frozenset[str]] = frozenset(c.value for c in TaskCategory)

CATEGORY_KEYWORDS: Final[tuple[tuple[TaskCategory, tuple[str, ...]], ...]] = (
    (
        TaskCategory.WORK,
        ("meeting", "project", "deadline", "presentation", "report", "email", "client", "office", "team", "boss"),
    ),
    (
        TaskCategory.PERSONAL,
        ("family", "friend", "birthday", "vacation", "hobby", "exercise", "health", "doctor", "appointment"),
    ),
    (
        TaskCategory.SHOPPING,
        ("buy", "purchase", "order", "shopping", "groceries", "store", "amazon", "market"),
    ),
    (
        TaskCategory.FINANCE,
        ("pay", "bill", "invoice", "tax", "budget", "bank", "money", "payment", "subscription"),
    ),
    (
        TaskCategory.HEALTH,
        ("doctor", "hospital", "medicine", "exercise", "gym", "workout", "diet", "fitness", "medical"),
    ),
    (
        TaskCategory.EDUCATION,
        ("study", "learn", "course", "class", "homework", "assignment", "exam", "school", "university"),
    ),
    (
        TaskCategory.HOME,
        ("clean", "repair", "maintenance", "garden", "laundry", "cook", "dishes", "organize"),
    ),
    (
        TaskCategory.ENTERTAINMENT,
        ("movie", "game", "book", "music", "concert", "show", "watch", "play", "read"),
    ),
    # general: no keywords, used when nothing matches
)


def is_valid_category(value: str | None) -> bool:
    return value is not None and value in VALID_CATEGORIES
