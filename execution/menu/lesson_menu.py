"""
execution/menu/lesson_menu.py

State behind the lesson menu: which lesson is selected, what the lesson
table and progress checklist show, and the single-shot launch.

No Streamlit import here; ui/lesson_menu/menu_app.py owns rendering and
keeps one LessonMenu per browser session.

States:
    IDLE     : menu displayed, no launch committed (initial state).
    LAUNCHING: a launch succeeded; the menu view is finished.

A failed launch records last_error and stays IDLE.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Mapping

from execution.lessons.lesson_registry import (
    LessonDescriptor,
    UnknownLessonError,
    find_lesson,
    list_lessons,
)
from execution.lessons.resolve_lesson_content import ContentNotFoundError
from execution.progress.progress_store import ProgressStore

logger = logging.getLogger(__name__)

CHECK_MARK = "✓"


class MenuState(enum.Enum):
    IDLE = "idle"
    LAUNCHING = "launching"


class MenuClosedError(RuntimeError):
    """Raised when the menu is used after a launch was committed."""


class LessonMenu:
    """Menu over the lesson registry and one learner's ProgressStore.

    Args:
        store:    Progress store read for display and written by checkbox
                  commits and by the launcher.
        launcher: Callable taking (lesson_id, store=...) and raising
                  UnknownLessonError or ContentNotFoundError on failure;
                  normally a functools.partial over launch_lesson.
    """

    def __init__(
        self,
        store: ProgressStore,
        launcher: Callable[..., object],
    ) -> None:
        self.store = store
        self._launcher = launcher
        self.state = MenuState.IDLE
        self.selected_id: str = list_lessons()[0].id
        self.last_error: str | None = None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, lesson_id: str) -> LessonDescriptor:
        """Make lesson_id the current selection and return its descriptor."""
        self._require_idle()
        lesson = find_lesson(lesson_id)
        self.selected_id = lesson.id
        return lesson

    @property
    def selected(self) -> LessonDescriptor:
        return find_lesson(self.selected_id)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def rows(self) -> list[dict]:
        """Return the lesson table joined with the current progress."""
        return [
            {
                "Module": lesson.title,
                "Description": lesson.description,
                "Completed": CHECK_MARK if self.store.is_completed(lesson.id) else "",
            }
            for lesson in list_lessons()
        ]

    def checklist(self) -> list[tuple[str, str, bool]]:
        """Return (lesson_id, title, checked) for each progress checkbox."""
        return [
            (lesson.id, lesson.title, self.store.is_completed(lesson.id))
            for lesson in list_lessons()
        ]

    # ------------------------------------------------------------------
    # Progress checkboxes
    # ------------------------------------------------------------------
    def commit_checkboxes(self, states: Mapping[str, bool]) -> list[str]:
        """Overwrite the store with every lesson whose checkbox is ticked.

        Lessons missing from states count as unticked.  The result is in
        registry order.

        Raises:
            UnknownLessonError: If states names an unregistered lesson.
        """
        for lesson_id in states:
            find_lesson(lesson_id)
        checked = [lesson.id for lesson in list_lessons() if states.get(lesson.id)]
        self.store.replace(checked)
        return checked

    def toggle(self, lesson_id: str, checked: bool) -> list[str]:
        """Apply one checkbox change and commit the full checklist."""
        find_lesson(lesson_id)
        states = {lid: is_checked for lid, _title, is_checked in self.checklist()}
        states[lesson_id] = checked
        return self.commit_checkboxes(states)

    # ------------------------------------------------------------------
    # Launch
    # ------------------------------------------------------------------
    def launch(self) -> str | None:
        """Launch the selected lesson.

        Returns:
            The launched lesson id, or None when the launch failed (the
            reason is kept in last_error and the menu stays IDLE).

        Raises:
            MenuClosedError: If a launch was already committed.
        """
        self._require_idle()
        lesson_id = self.selected_id
        try:
            self._launcher(lesson_id, store=self.store)
        except (UnknownLessonError, ContentNotFoundError) as exc:
            logger.warning("Launch of %s failed: %s", lesson_id, exc)
            self.last_error = str(exc)
            return None

        self.last_error = None
        self.state = MenuState.LAUNCHING
        return lesson_id

    def _require_idle(self) -> None:
        if self.state is not MenuState.IDLE:
            raise MenuClosedError("The lesson menu is closed; a lesson was already launched.")
