"""
execution/progress/progress_store.py

In-memory record of which lessons a learner has completed in the current
session.  One store per learner session; callers receive it explicitly
rather than reading shared global state.

Every member is a registered lesson id.  No database access here; see
execution/progress/persist_progress.py for loading and saving a store.
"""

from __future__ import annotations

from typing import Iterable

from execution.lessons.lesson_registry import find_lesson


class ProgressStore:
    """Ordered set of completed lesson ids."""

    def __init__(self, completed: Iterable[str] = ()) -> None:
        self._completed: dict[str, None] = {}
        self.replace(completed)

    def __contains__(self, lesson_id: object) -> bool:
        return lesson_id in self._completed

    def __len__(self) -> int:
        return len(self._completed)

    def __repr__(self) -> str:
        return f"ProgressStore({self.completed()!r})"

    def completed(self) -> list[str]:
        """Return completed lesson ids in first-completion order."""
        return list(self._completed)

    def is_completed(self, lesson_id: str) -> bool:
        return lesson_id in self._completed

    def mark_completed(self, lesson_id: str) -> bool:
        """Add lesson_id to the completed set.

        Returns:
            True when the id was added; False when it was already present.

        Raises:
            UnknownLessonError: If lesson_id is not a registered lesson.
        """
        find_lesson(lesson_id)
        if lesson_id in self._completed:
            return False  # idempotent: completion is a set, not a counter
        self._completed[lesson_id] = None
        return True

    def replace(self, lesson_ids: Iterable[str]) -> None:
        """Overwrite the whole completed set with lesson_ids.

        Duplicates are collapsed.  Every id is validated before anything is
        written, so an unknown id leaves the store unchanged.

        Raises:
            UnknownLessonError: If any id is not a registered lesson.
        """
        lesson_ids = list(lesson_ids)
        for lesson_id in lesson_ids:
            find_lesson(lesson_id)
        self._completed = dict.fromkeys(lesson_ids)
