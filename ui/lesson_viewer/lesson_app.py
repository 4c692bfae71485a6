"""
ui/lesson_viewer/lesson_app.py

Standalone lesson viewer, started by StreamlitLessonRenderer for one lesson.

Run from the repository root:
    streamlit run ui/lesson_viewer/lesson_app.py -- --lesson-id module1-environment \
        --content-path execution/lessons/content/tutorials/module1-environment/module1-environment.md
"""

import argparse
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# sys.path bootstrap: this file lives two levels below repo root.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.lessons.lesson_registry import UnknownLessonError, find_lesson  # noqa: E402
from ui.lesson_viewer.render_lesson import render_lesson                       # noqa: E402
from ui.theme import apply_lessons_theme                                       # noqa: E402

parser = argparse.ArgumentParser()
parser.add_argument("--lesson-id")
parser.add_argument("--content-path")
args, _unknown = parser.parse_known_args()

st.set_page_config(page_title="R Lesson", layout="wide")

if not args.lesson_id or not args.content_path:
    st.error("Start the viewer with --lesson-id and --content-path, or use the lesson menu.")
    st.stop()

try:
    lesson = find_lesson(args.lesson_id)
except UnknownLessonError as exc:
    st.error(str(exc))
    st.stop()

apply_lessons_theme("R Lessons", lesson.title)
render_lesson(lesson.id, args.content_path)
