"""
execution/lessons/launch_lesson.py

Launches one lesson: validates the id, resolves its content file, hands it
to a renderer, then records the lesson as completed in the given store.

The store is only updated after the renderer returns without raising.

Run from the repository root:
    python -m execution.lessons.launch_lesson module1-environment
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from execution.lessons.lesson_registry import (
    LessonDescriptor,
    UnknownLessonError,
    find_lesson,
)
from execution.lessons.renderers import LessonRenderer, StreamlitLessonRenderer
from execution.lessons.resolve_lesson_content import (
    ContentNotFoundError,
    resolve_lesson_content,
)
from execution.progress.persist_progress import (
    DEFAULT_LEARNER_ID,
    load_progress,
    save_progress,
)
from execution.progress.progress_store import ProgressStore

logger = logging.getLogger(__name__)


def launch_lesson(
    lesson_id: str,
    *,
    store: ProgressStore,
    renderer: LessonRenderer | None = None,
    content_root: str | Path | None = None,
) -> LessonDescriptor:
    """Open lesson_id in the renderer and mark it completed.

    Args:
        lesson_id:    Lesson slug (e.g. "module1-environment").
        store:        Progress store that receives the completion.
        renderer:     Presentation collaborator; defaults to a
                      StreamlitLessonRenderer.
        content_root: Directory lesson content paths are relative to;
                      defaults to the packaged lesson content.

    Returns:
        The launched lesson's descriptor.

    Raises:
        UnknownLessonError:   lesson_id is not registered (nothing changes).
        ContentNotFoundError: the content file is missing (nothing changes).
        Any renderer exception propagates unchanged and the store is left
        untouched.
    """
    lesson = find_lesson(lesson_id)
    content_path = resolve_lesson_content(lesson, content_root)

    if renderer is None:
        renderer = StreamlitLessonRenderer()

    logger.info("Launching lesson %s from %s", lesson.id, content_path)
    renderer.render(content_path, lesson.id)

    if store.mark_completed(lesson.id):
        logger.info("Marked lesson %s completed", lesson.id)
    return lesson


# ---------------------------------------------------------------------------
# Command-line entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, renderer: LessonRenderer | None = None) -> int:
    """Launch one lesson for a learner and persist the updated progress.

    Returns the process exit status: 0 on success, 2 for an unknown lesson
    id or a blank learner id, 1 when the lesson content is missing.
    """
    parser = argparse.ArgumentParser(description="Launch an R lesson by id.")
    parser.add_argument("lesson_id", help='Lesson id, e.g. "module1-environment"')
    parser.add_argument("--learner-id", default=DEFAULT_LEARNER_ID)
    parser.add_argument("--db-path", default=None)
    parser.add_argument(
        "--headless", action="store_true", help="Do not open a browser tab."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if renderer is None:
        renderer = StreamlitLessonRenderer(headless=args.headless)

    try:
        store = load_progress(args.learner_id, db_path=args.db_path)
        launch_lesson(args.lesson_id, store=store, renderer=renderer)
    except UnknownLessonError as exc:
        print(exc, file=sys.stderr)
        return 2
    except ContentNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    except ValueError as exc:
        # Blank --learner-id.
        print(exc, file=sys.stderr)
        return 2

    save_progress(store, args.learner_id, db_path=args.db_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
