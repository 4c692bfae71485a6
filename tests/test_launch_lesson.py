"""
tests/test_launch_lesson.py

Unit tests for execution/lessons/launch_lesson.py.

A recording renderer stands in for the Streamlit viewer, so nothing is
spawned.  CLI tests use an isolated database (tmp/test_launch_lesson.db)
and never touch the application database (tmp/app.db).
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.lessons.launch_lesson import launch_lesson, main          # noqa: E402
from execution.lessons.lesson_registry import UnknownLessonError        # noqa: E402
from execution.lessons.resolve_lesson_content import ContentNotFoundError  # noqa: E402
from execution.progress.persist_progress import load_progress           # noqa: E402
from execution.progress.progress_store import ProgressStore             # noqa: E402

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_launch_lesson.db")


class RecordingRenderer:
    """Collects (content_path, lesson_id) for every render call."""

    def __init__(self):
        self.calls = []

    def render(self, content_path, lesson_id):
        self.calls.append((content_path, lesson_id))


class FailingRenderer:
    def render(self, content_path, lesson_id):
        raise RuntimeError("viewer crashed")


# ---------------------------------------------------------------------------
# 1. Successful launches
# ---------------------------------------------------------------------------

class TestLaunchLessonSuccess(unittest.TestCase):

    def test_launch_from_empty_records_completion(self):
        """Launching module1 from an empty store leaves exactly that id."""
        store = ProgressStore()
        renderer = RecordingRenderer()

        lesson = launch_lesson("module1-environment", store=store, renderer=renderer)

        self.assertEqual(lesson.id, "module1-environment")
        self.assertEqual(store.completed(), ["module1-environment"])

    def test_renderer_receives_resolved_absolute_path(self):
        renderer = RecordingRenderer()
        launch_lesson("module4-vectors", store=ProgressStore(), renderer=renderer)

        self.assertEqual(len(renderer.calls), 1)
        content_path, lesson_id = renderer.calls[0]
        self.assertEqual(lesson_id, "module4-vectors")
        self.assertTrue(content_path.is_absolute())
        self.assertTrue(content_path.is_file())
        self.assertEqual(content_path.name, "module4-vectors.md")

    def test_launch_twice_keeps_single_entry(self):
        store = ProgressStore()
        renderer = RecordingRenderer()
        launch_lesson("module2-variables", store=store, renderer=renderer)
        launch_lesson("module2-variables", store=store, renderer=renderer)

        self.assertEqual(store.completed(), ["module2-variables"])
        self.assertEqual(len(renderer.calls), 2)


# ---------------------------------------------------------------------------
# 2. Failures leave the store untouched
# ---------------------------------------------------------------------------

class TestLaunchLessonFailures(unittest.TestCase):

    def test_unknown_lesson_raises_and_skips_render(self):
        store = ProgressStore()
        renderer = RecordingRenderer()
        with self.assertRaises(UnknownLessonError):
            launch_lesson("module99-fake", store=store, renderer=renderer)
        self.assertEqual(store.completed(), [])
        self.assertEqual(renderer.calls, [])

    def test_missing_content_raises_and_skips_render(self):
        store = ProgressStore(["module1-environment"])
        renderer = RecordingRenderer()
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ContentNotFoundError):
                launch_lesson(
                    "module3-data-types", store=store, renderer=renderer, content_root=td
                )
        self.assertEqual(store.completed(), ["module1-environment"])
        self.assertEqual(renderer.calls, [])

    def test_renderer_error_propagates_without_recording(self):
        store = ProgressStore()
        with self.assertRaises(RuntimeError):
            launch_lesson("module5-matrices", store=store, renderer=FailingRenderer())
        self.assertEqual(store.completed(), [])


# ---------------------------------------------------------------------------
# 3. Command-line entry point
# ---------------------------------------------------------------------------

class TestLaunchLessonCli(unittest.TestCase):

    def setUp(self):
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)

    def tearDown(self):
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)

    def test_success_exits_zero_and_persists(self):
        renderer = RecordingRenderer()
        status = main(
            ["module6-lists", "--learner-id", "cli-learner", "--db-path", TEST_DB_PATH],
            renderer=renderer,
        )
        self.assertEqual(status, 0)
        self.assertEqual(
            load_progress("cli-learner", db_path=TEST_DB_PATH).completed(),
            ["module6-lists"],
        )

    def test_progress_accumulates_across_runs(self):
        for lesson_id in ("module1-environment", "module2-variables", "module1-environment"):
            main([lesson_id, "--db-path", TEST_DB_PATH], renderer=RecordingRenderer())
        self.assertEqual(
            load_progress(db_path=TEST_DB_PATH).completed(),
            ["module1-environment", "module2-variables"],
        )

    def test_unknown_lesson_exits_two(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            status = main(["module99-fake", "--db-path", TEST_DB_PATH],
                          renderer=RecordingRenderer())
        self.assertEqual(status, 2)
        self.assertIn("module99-fake", stderr.getvalue())
        self.assertEqual(load_progress(db_path=TEST_DB_PATH).completed(), [])

    def test_blank_learner_id_exits_two_with_message(self):
        renderer = RecordingRenderer()
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            status = main(
                ["module1-environment", "--learner-id", "   ", "--db-path", TEST_DB_PATH],
                renderer=renderer,
            )
        self.assertEqual(status, 2)
        self.assertIn("Learner ID is required", stderr.getvalue())
        self.assertEqual(renderer.calls, [])


if __name__ == "__main__":
    unittest.main()
