"""
ui/theme.py

Shared theme helper for the lesson menu and lesson viewer.
Call apply_lessons_theme() immediately after st.set_page_config() in any
page to inject styling and render the consistent header bar.

Colour tokens:
    R blue:      #276DC3
    dark slate:  #1F2A36
    light gray:  #EEF1F4
    mid gray:    #5B6670
"""

from __future__ import annotations

import streamlit as st

# ---------------------------------------------------------------------------
# Colour tokens
# ---------------------------------------------------------------------------
_R_BLUE      = "#276DC3"
_DARK_SLATE  = "#1F2A36"
_LIGHT_GRAY  = "#EEF1F4"
_MID_GRAY    = "#5B6670"

# ---------------------------------------------------------------------------
# CSS: injected once per page render.
# Double braces {{ }} produce literal CSS braces in the f-string.
# ---------------------------------------------------------------------------
_CSS = f"""
<style>
.block-container {{
    padding-top: 0.75rem !important;
    padding-bottom: 2rem !important;
}}

#MainMenu {{ visibility: hidden; }}
footer {{ visibility: hidden; }}

section[data-testid="stSidebar"] > div:first-child {{
    background-color: {_LIGHT_GRAY};
    padding-top: 0.75rem;
}}

.stButton > button[kind="primary"] {{
    background-color: {_R_BLUE} !important;
    color: white !important;
    border: none !important;
    border-radius: 10px !important;
}}
.stButton > button[kind="primary"]:hover {{
    background-color: #1d559c !important;
}}

.stButton > button {{
    border-radius: 10px !important;
}}

hr {{
    border: none !important;
    border-top: 1px solid #E1E5EA !important;
    margin: 1rem 0 !important;
}}
</style>
"""

def apply_lessons_theme(
    page_title: str,
    subtitle: str | None = None,
) -> None:
    """Inject the shared CSS and render the top header bar.

    Must be called immediately after st.set_page_config() in each page.
    """
    st.markdown(_CSS, unsafe_allow_html=True)

    subtitle_html = (
        f"<div style='color:{_LIGHT_GRAY}; font-size:0.85rem; margin-top:0.15rem;'>{subtitle}</div>"
        if subtitle else
        ""
    )

    st.markdown(
        f"""
        <div style="
            background: {_DARK_SLATE};
            border-bottom: 3px solid {_R_BLUE};
            padding: 0.65rem 1.25rem;
            margin: -0.75rem -1rem 1.0rem -1rem;
            display: flex;
            flex-direction: column;
            line-height: 1.1;
        ">
            <div style="color:white; font-size:1.25rem; font-weight:650;">
                {page_title}
            </div>
            {subtitle_html}
        </div>
        """,
        unsafe_allow_html=True,
    )

def completion_caption(completed: int, total: int) -> str:
    """Return the 'n of m lessons completed' caption used under the checklist."""
    return (
        f"<span style='color:{_MID_GRAY}; font-size:0.85rem;'>"
        f"{completed} of {total} lessons completed</span>"
    )
