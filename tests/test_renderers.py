"""
tests/test_renderers.py

Unit tests for execution/lessons/renderers.py.

The subprocess runner is replaced with a recorder; no process is spawned.
"""

import subprocess
import sys
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.lessons.renderers import (  # noqa: E402
    VIEWER_SCRIPT,
    VIEWER_SESSION_KEY,
    SessionLessonRenderer,
    StreamlitLessonRenderer,
)

CONTENT = Path("/srv/lessons/tutorials/module4-vectors/module4-vectors.md")


class TestStreamlitLessonRenderer(unittest.TestCase):

    def test_viewer_script_ships_with_repo(self):
        self.assertTrue(VIEWER_SCRIPT.is_file())

    def test_command_runs_viewer_with_lesson_arguments(self):
        cmd = StreamlitLessonRenderer().build_command(CONTENT, "module4-vectors")
        self.assertEqual(cmd[:5], [sys.executable, "-m", "streamlit", "run", str(VIEWER_SCRIPT)])
        self.assertEqual(
            cmd[cmd.index("--"):],
            ["--", "--lesson-id", "module4-vectors", "--content-path", str(CONTENT)],
        )
        self.assertNotIn("--server.headless", cmd)

    def test_headless_flag_precedes_script_arguments(self):
        cmd = StreamlitLessonRenderer(headless=True).build_command(CONTENT, "module4-vectors")
        self.assertLess(cmd.index("--server.headless"), cmd.index("--"))

    def test_render_invokes_runner_with_check(self):
        calls = []

        def runner(cmd, **kwargs):
            calls.append((cmd, kwargs))

        renderer = StreamlitLessonRenderer(runner=runner)
        renderer.render(CONTENT, "module4-vectors")

        self.assertEqual(len(calls), 1)
        cmd, kwargs = calls[0]
        self.assertEqual(cmd, renderer.build_command(CONTENT, "module4-vectors"))
        self.assertEqual(kwargs, {"check": True})

    def test_ctrl_c_ends_render_normally(self):
        def runner(cmd, **kwargs):
            raise KeyboardInterrupt

        StreamlitLessonRenderer(runner=runner).render(CONTENT, "module4-vectors")

    def test_viewer_failure_propagates(self):
        def runner(cmd, **kwargs):
            raise subprocess.CalledProcessError(1, cmd)

        with self.assertRaises(subprocess.CalledProcessError):
            StreamlitLessonRenderer(runner=runner).render(CONTENT, "module4-vectors")


class TestSessionLessonRenderer(unittest.TestCase):

    def test_render_stores_lesson_for_viewer_page(self):
        session_state = {}
        SessionLessonRenderer(session_state).render(CONTENT, "module4-vectors")
        self.assertEqual(
            session_state[VIEWER_SESSION_KEY],
            {"lesson_id": "module4-vectors", "content_path": str(CONTENT)},
        )

    def test_later_render_replaces_earlier_lesson(self):
        session_state = {}
        renderer = SessionLessonRenderer(session_state)
        renderer.render(CONTENT, "module4-vectors")
        renderer.render(Path("/x/module5-matrices.md"), "module5-matrices")
        self.assertEqual(session_state[VIEWER_SESSION_KEY]["lesson_id"], "module5-matrices")


if __name__ == "__main__":
    unittest.main()
