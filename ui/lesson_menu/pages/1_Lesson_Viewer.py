"""
ui/lesson_menu/pages/1_Lesson_Viewer.py

Lesson viewer page reached from the lesson menu after a launch.

Run from the repository root:
    streamlit run ui/lesson_menu/menu_app.py
"""

import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# sys.path bootstrap: this file lives three levels below repo root
# (ui/lesson_menu/pages/).
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[3]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.lessons.lesson_registry import find_lesson        # noqa: E402
from execution.lessons.renderers import VIEWER_SESSION_KEY       # noqa: E402
from ui.lesson_viewer.render_lesson import render_lesson         # noqa: E402
from ui.theme import apply_lessons_theme                         # noqa: E402

st.set_page_config(page_title="R Lesson", layout="wide")

handed_off = st.session_state.get(VIEWER_SESSION_KEY)
if handed_off is None:
    apply_lessons_theme("R Lessons")
    st.info("No lesson launched yet. Pick one from the lesson menu.")
    st.stop()

lesson = find_lesson(handed_off["lesson_id"])
apply_lessons_theme("R Lessons", lesson.title)
render_lesson(lesson.id, handed_off["content_path"])
