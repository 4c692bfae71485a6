"""
execution/lessons/lesson_registry.py

Canonical lesson catalogue for the R Lessons curriculum.

No database access. No file I/O. Pure constants and lookup helpers only.
The registry is built once at import time and never mutated; every
lookup is keyed by the lesson's id slug.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict


class UnknownLessonError(ValueError):
    """Raised when a lesson id is not present in the registry."""


@dataclass(frozen=True)
class LessonDescriptor:
    """One registered lesson.

    content_path is relative to the lesson content root
    (see execution/lessons/resolve_lesson_content.py).
    """

    id: str
    title: str
    description: str
    content_path: str


def _lesson(lesson_id: str, title: str, description: str) -> LessonDescriptor:
    return LessonDescriptor(
        id=lesson_id,
        title=title,
        description=description,
        content_path=f"tutorials/{lesson_id}/{lesson_id}.md",
    )


# ---------------------------------------------------------------------------
# Display order is the tuple order.  Ids are stable; do not rename an entry
# without also renaming its directory under execution/lessons/content/tutorials/.
# ---------------------------------------------------------------------------
LESSONS: tuple[LessonDescriptor, ...] = (
    _lesson(
        "module1-environment",
        "Module 1: The R Environment",
        "Learn about the R statistical environment and its core components",
    ),
    _lesson(
        "module2-variables",
        "Module 2: Creating Variables in R",
        "Learn how to create and work with variables in R",
    ),
    _lesson(
        "module3-data-types",
        "Module 3: Numeric, Character, and Logical Data Types",
        "Learn about the basic data types in R: numeric, character, and logical",
    ),
    _lesson(
        "module4-vectors",
        "Module 4: Vectors in R",
        "Learn how to create and manipulate vectors in R",
    ),
    _lesson(
        "module5-matrices",
        "Module 5: Matrices in R",
        "Learn how to create and manipulate matrices in R",
    ),
    _lesson(
        "module6-lists",
        "Module 6: Lists in R",
        "Learn how to create and work with lists in R",
    ),
    _lesson(
        "module7-data-frames",
        "Module 7: Data Frames in R",
        "Learn how to create and manipulate data frames in R",
    ),
    _lesson(
        "module8-factors",
        "Module 8: Factors in R",
        "Learn how to create and work with factors in R",
    ),
    _lesson(
        "module9-data-input",
        "Module 9: Data Input in R",
        "Learn how to input, read, write, and explore data in R",
    ),
    _lesson(
        "module10-data-visualization",
        "Module 10: Data Visualization in R",
        "Learn how to create effective data visualizations in R",
    ),
    _lesson(
        "module11-descriptive-statistics",
        "Module 11: Descriptive Statistics in R",
        "Learn how to calculate and interpret descriptive statistics in R",
    ),
    _lesson(
        "module12-exploratory-data-analysis",
        "Module 12: Exploratory Data Analysis in R",
        "Learn how to conduct exploratory data analysis in R",
    ),
)

_LESSONS_BY_ID: dict[str, LessonDescriptor] = {lesson.id: lesson for lesson in LESSONS}

# Immutable set of all valid lesson ids.
LESSON_IDS: frozenset[str] = frozenset(_LESSONS_BY_ID)

TOTAL_LESSONS: int = len(LESSONS)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def list_lessons() -> tuple[LessonDescriptor, ...]:
    """Return every registered lesson in display order."""
    return LESSONS


def find_lesson(lesson_id: str) -> LessonDescriptor:
    """Return the descriptor registered under lesson_id.

    Args:
        lesson_id: Lesson slug (e.g. "module4-vectors").

    Returns:
        The matching LessonDescriptor.

    Raises:
        UnknownLessonError: If lesson_id is not a registered lesson.
    """
    try:
        return _LESSONS_BY_ID[lesson_id]
    except (KeyError, TypeError):
        raise UnknownLessonError(
            f"Invalid lesson_id: {lesson_id!r}. "
            "Open the lesson menu to see available lessons."
        ) from None


def is_valid_lesson_id(lesson_id: str) -> bool:
    """Return True if lesson_id is a registered lesson."""
    return lesson_id in LESSON_IDS


def get_lesson_data() -> list[dict]:
    """Return the full lesson table as plain dicts, one per lesson.

    Each dict has the keys id, title, description and path.  A fresh list
    is built on every call so callers may mutate the result freely.
    """
    rows = []
    for lesson in LESSONS:
        row = asdict(lesson)
        row["path"] = row.pop("content_path")
        rows.append(row)
    return rows
