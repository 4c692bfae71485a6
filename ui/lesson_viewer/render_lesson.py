"""
ui/lesson_viewer/render_lesson.py

Draws one lesson page-by-page.  Shared by the standalone viewer
(ui/lesson_viewer/lesson_app.py) and the menu's viewer page
(ui/lesson_menu/pages/1_Lesson_Viewer.py).
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

from execution.lessons.chunk_lesson_markdown import chunk_lesson_markdown, page_caption
from execution.lessons.lesson_registry import find_lesson


@st.cache_data
def _cached_pages(content_path: str) -> list[str]:
    return chunk_lesson_markdown(Path(content_path).read_text(encoding="utf-8"))


def render_lesson(lesson_id: str, content_path: str) -> None:
    """Render lesson_id's content with previous/next page navigation."""
    lesson = find_lesson(lesson_id)

    try:
        pages = _cached_pages(content_path)
    except OSError:
        logging.exception("Failed to read lesson content %s", content_path)
        st.error("Lesson content could not be read. See console for details.")
        return

    # Reset paging when a different lesson is opened in the same session.
    if st.session_state.get("viewer_page_lesson") != lesson.id:
        st.session_state["viewer_page_lesson"] = lesson.id
        st.session_state["viewer_page_idx"] = 0

    idx = min(st.session_state["viewer_page_idx"], len(pages) - 1)

    st.caption(page_caption(lesson.title, idx, len(pages)))
    st.progress((idx + 1) / len(pages))
    st.markdown(pages[idx])

    st.divider()
    col_prev, col_next = st.columns(2)
    with col_prev:
        if st.button("← Previous", disabled=idx == 0, use_container_width=True):
            st.session_state["viewer_page_idx"] = idx - 1
            st.rerun()
    with col_next:
        if st.button(
            "Next →",
            type="primary",
            disabled=idx >= len(pages) - 1,
            use_container_width=True,
        ):
            st.session_state["viewer_page_idx"] = idx + 1
            st.rerun()
