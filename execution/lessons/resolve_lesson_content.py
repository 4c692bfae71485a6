"""
execution/lessons/resolve_lesson_content.py

Resolves a lesson's relative content_path to an absolute, readable file
inside the packaged execution.lessons.content tree.

No database access. A missing file means a broken install, so resolution
failures are raised immediately and never retried.
"""

from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path

from execution.lessons.lesson_registry import LessonDescriptor

logger = logging.getLogger(__name__)

# Package holding tutorials/<lesson_id>/<lesson_id>.md as package data.
CONTENT_PACKAGE = "execution.lessons.content"

CONTENT_ROOT_ENV_VAR = "RLESSONS_CONTENT_ROOT"


class ContentNotFoundError(FileNotFoundError):
    """Raised when a registered lesson's content file cannot be located."""


def get_content_root() -> Path:
    """Return the directory lesson content_path values are relative to.

    RLESSONS_CONTENT_ROOT overrides the packaged content directory.
    """
    override = os.environ.get(CONTENT_ROOT_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return Path(resources.files(CONTENT_PACKAGE)).resolve()


def resolve_lesson_content(
    lesson: LessonDescriptor,
    content_root: str | Path | None = None,
) -> Path:
    """Return the absolute path of lesson's content file.

    Args:
        lesson:       Descriptor from the lesson registry.
        content_root: Directory to resolve against; defaults to
                      get_content_root().

    Returns:
        Absolute Path to an existing file.

    Raises:
        ContentNotFoundError: If the file is absent, is not a regular file,
                              or the relative path escapes content_root.
    """
    root = Path(content_root).resolve() if content_root is not None else get_content_root()
    candidate = (root / lesson.content_path).resolve()

    if root not in candidate.parents:
        raise ContentNotFoundError(
            f"Lesson {lesson.id!r} content path escapes the content root: "
            f"{lesson.content_path}"
        )

    if not candidate.is_file():
        logger.warning("Content for lesson %s missing at %s", lesson.id, candidate)
        raise ContentNotFoundError(
            f"Lesson file not found for {lesson.id!r}: {candidate}. "
            "The package may be corrupt or the lesson was not installed correctly."
        )

    return candidate
