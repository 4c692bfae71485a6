"""
execution/lessons/renderers.py

Renderer collaborators for the lesson launcher.

A renderer receives an already-resolved content file and the lesson id and
takes over presentation.  The launcher never inspects what a renderer does
and never catches its errors.

    StreamlitLessonRenderer: starts `streamlit run` on the lesson viewer
                              page in a child process and blocks until the
                              viewer server exits.
    SessionLessonRenderer  : used from inside a running Streamlit session:
                              stores the lesson for the viewer page, which
                              the calling page then switches to.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Callable, MutableMapping, Protocol

logger = logging.getLogger(__name__)

# Repo root: execution/lessons/ -> execution/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]

VIEWER_SCRIPT: Path = _REPO_ROOT / "ui" / "lesson_viewer" / "lesson_app.py"

# Session-state key shared with ui/lesson_viewer/lesson_app.py.
VIEWER_SESSION_KEY = "viewer_lesson"


class LessonRenderer(Protocol):
    def render(self, content_path: Path, lesson_id: str) -> None:
        ...


class StreamlitLessonRenderer:
    """Serve one lesson through the Streamlit lesson viewer.

    Args:
        viewer_script: Streamlit page to run; defaults to VIEWER_SCRIPT.
        headless:      Pass --server.headless so no browser tab is opened.
        runner:        Callable with subprocess.run's signature; injectable
                       so tests can capture the command instead of spawning.
    """

    def __init__(
        self,
        viewer_script: Path | None = None,
        headless: bool = False,
        runner: Callable[..., object] = subprocess.run,
    ) -> None:
        self.viewer_script = viewer_script or VIEWER_SCRIPT
        self.headless = headless
        self._runner = runner

    def build_command(self, content_path: Path, lesson_id: str) -> list[str]:
        """Return the argv used to start the viewer for one lesson."""
        cmd = [sys.executable, "-m", "streamlit", "run", str(self.viewer_script)]
        if self.headless:
            cmd += ["--server.headless", "true"]
        # Everything after "--" is passed to the viewer script itself.
        cmd += ["--", "--lesson-id", lesson_id, "--content-path", str(content_path)]
        return cmd

    def render(self, content_path: Path, lesson_id: str) -> None:
        cmd = self.build_command(content_path, lesson_id)
        logger.info("Starting lesson viewer for %s", lesson_id)
        try:
            self._runner(cmd, check=True)
        except KeyboardInterrupt:
            # Ctrl+C is how a learner closes the viewer server.
            logger.info("Lesson viewer for %s stopped", lesson_id)


class SessionLessonRenderer:
    """Hand a lesson to the viewer page of the current Streamlit session.

    Only records the lesson; page navigation is left to the caller so the
    launcher can finish recording progress before the script reruns.
    """

    def __init__(self, session_state: MutableMapping) -> None:
        self._session_state = session_state

    def render(self, content_path: Path, lesson_id: str) -> None:
        self._session_state[VIEWER_SESSION_KEY] = {
            "lesson_id": lesson_id,
            "content_path": str(content_path),
        }
