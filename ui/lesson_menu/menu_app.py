"""
ui/lesson_menu/menu_app.py

R Lessons Menu: pick a lesson, launch it, and track completion.

Run from the repository root:
    streamlit run ui/lesson_menu/menu_app.py
"""

import functools
import logging
import sqlite3
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so execution.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.lessons.launch_lesson import launch_lesson                          # noqa: E402
from execution.lessons.lesson_registry import TOTAL_LESSONS, list_lessons           # noqa: E402
from execution.lessons.renderers import SessionLessonRenderer                       # noqa: E402
from execution.menu.lesson_menu import LessonMenu, MenuState                        # noqa: E402
from execution.progress.persist_progress import (                                   # noqa: E402
    DEFAULT_LEARNER_ID,
    load_progress,
    save_progress,
)
from execution.progress.progress_store import ProgressStore                         # noqa: E402
from ui.theme import apply_lessons_theme, completion_caption                        # noqa: E402

LESSONS = list_lessons()
TITLES = {lesson.id: lesson.title for lesson in LESSONS}

# ---------------------------------------------------------------------------
# Page config: must be the first Streamlit call in the file.
# ---------------------------------------------------------------------------
st.set_page_config(page_title="R Lessons Menu", layout="wide")
apply_lessons_theme("R Lessons Menu", "Interactive R programming and statistics")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _new_menu(store: ProgressStore) -> LessonMenu:
    launcher = functools.partial(
        launch_lesson, renderer=SessionLessonRenderer(st.session_state)
    )
    return LessonMenu(store, launcher)


def _load_store(learner_id: str) -> ProgressStore:
    """Load saved progress, falling back to an empty store on DB errors."""
    try:
        return load_progress(learner_id)
    except sqlite3.OperationalError:
        st.warning("Saved progress unavailable. Check that tmp/app.db is accessible.")
    except Exception:
        logging.exception("Unexpected error loading progress")
        st.warning("Saved progress could not be loaded. See console for details.")
    return ProgressStore()


def _save_store(menu: LessonMenu) -> None:
    try:
        save_progress(menu.store, st.session_state["menu_learner_id"])
    except Exception:
        logging.exception("Unexpected error saving progress")
        st.session_state["menu_flash"] = "Progress could not be saved. See console for details."


def _on_checkbox_change(lesson_id: str) -> None:
    menu: LessonMenu = st.session_state["menu"]
    menu.toggle(lesson_id, st.session_state[f"check_{lesson_id}"])
    _save_store(menu)


# ---------------------------------------------------------------------------
# Session state initialisation
# ---------------------------------------------------------------------------
if "menu_flash" not in st.session_state:
    st.session_state["menu_flash"] = None  # error message shown once, or None

with st.sidebar:
    raw_learner_id = st.text_input("Learner ID", value=DEFAULT_LEARNER_ID)
    learner_id = raw_learner_id.strip()
    if not learner_id:
        st.error("Learner ID is required.")
        st.stop()

# A new learner gets their own store; a finished launch reopens the menu.
if st.session_state.get("menu_learner_id") != learner_id:
    st.session_state["menu_learner_id"] = learner_id
    st.session_state["menu"] = _new_menu(_load_store(learner_id))
elif st.session_state["menu"].state is MenuState.LAUNCHING:
    st.session_state["menu"] = _new_menu(st.session_state["menu"].store)

menu: LessonMenu = st.session_state["menu"]

# ---------------------------------------------------------------------------
# Sidebar: selection, launch, progress checklist
# ---------------------------------------------------------------------------
with st.sidebar:
    st.header("Select a Lesson")
    selected_id = st.selectbox(
        "Choose a Lesson:",
        options=[lesson.id for lesson in LESSONS],
        index=[lesson.id for lesson in LESSONS].index(menu.selected_id),
        format_func=TITLES.__getitem__,
    )
    menu.select(selected_id)

    launch_clicked = st.button(
        "Launch Selected Lesson", type="primary", use_container_width=True
    )

    st.divider()
    st.subheader("Lesson Progress")
    st.write("Track your progress through the modules:")

    # Checkbox values are rebuilt from the store on every run.
    for lesson_id, title, checked in menu.checklist():
        st.session_state[f"check_{lesson_id}"] = checked
        st.checkbox(
            title,
            key=f"check_{lesson_id}",
            on_change=_on_checkbox_change,
            args=(lesson_id,),
        )
    st.markdown(
        completion_caption(len(menu.store), TOTAL_LESSONS), unsafe_allow_html=True
    )

# ---------------------------------------------------------------------------
# Launch action
# ---------------------------------------------------------------------------
if launch_clicked:
    launched_id = None
    try:
        launched_id = menu.launch()
    except Exception:
        logging.exception("Unexpected error launching lesson")
        st.session_state["menu_flash"] = "An unexpected error occurred. See console for details."

    if launched_id is not None:
        _save_store(menu)
        st.switch_page("pages/1_Lesson_Viewer.py")
    elif menu.last_error is not None:
        st.session_state["menu_flash"] = menu.last_error

# ---------------------------------------------------------------------------
# Main panel: selected lesson + full table
# ---------------------------------------------------------------------------
if st.session_state["menu_flash"] is not None:
    st.error(st.session_state["menu_flash"])
    st.session_state["menu_flash"] = None

selected = menu.selected
st.header(selected.title)
st.subheader("Description:")
st.write(selected.description)

st.divider()
st.subheader("All Available Lessons:")
st.table(menu.rows())
