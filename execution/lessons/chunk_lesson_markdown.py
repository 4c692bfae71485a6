"""
execution/lessons/chunk_lesson_markdown.py

Splits a lesson's Markdown into the pages the lesson viewer steps through
and builds the per-page caption.

Pure functions, no I/O, no randomness.
"""

from __future__ import annotations

import re

# Upper bound on pages produced by the paragraph fallback.
MAX_PARAGRAPH_PAGES = 5


def chunk_lesson_markdown(text: str) -> list[str]:
    """Split markdown into deterministic pages for the lesson viewer.

    Strategy 1: heading split: each H1/H2/H3 heading plus its body becomes
    one page.  Requires at least 2 headings; single-heading documents fall
    through to Strategy 2.

    Strategy 2: paragraph groups: blank-line-separated paragraphs are
    merged into at most MAX_PARAGRAPH_PAGES evenly sized pages.

    Returns at least one string.  Lines inside fenced ``` code blocks are
    never treated as headings, so R comments survive intact.
    """
    text = text.replace("\r\n", "\n").strip()
    if not text:
        return [""]

    # Strategy 1: collect heading line offsets outside code fences.
    starts: list[int] = []
    in_fence = False
    offset = 0
    for line in text.split("\n"):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
        elif not in_fence and re.match(r"#{1,3} ", line):
            starts.append(offset)
        offset += len(line) + 1

    if len(starts) >= 2:
        bounds = starts + [len(text)]
        pages = [text[:starts[0]].strip()] if starts[0] > 0 else []
        pages += [text[bounds[i]:bounds[i + 1]].strip() for i in range(len(starts))]
        return [p for p in pages if p]

    # Strategy 2: blank-line paragraph groups, capped at MAX_PARAGRAPH_PAGES.
    paragraphs = [p.strip() for p in re.split(r"\n\s*\n", text) if p.strip()]
    n = len(paragraphs)
    if n <= MAX_PARAGRAPH_PAGES:
        return paragraphs or [text]
    size = (n + MAX_PARAGRAPH_PAGES - 1) // MAX_PARAGRAPH_PAGES  # ceiling division
    return ["\n\n".join(paragraphs[i : i + size]) for i in range(0, n, size)]


def page_caption(title: str, page_idx: int, total_pages: int) -> str:
    """Return the viewer caption for zero-based page_idx of total_pages."""
    return f"{title} (page {page_idx + 1} of {total_pages})"
