"""
execution/progress/persist_progress.py

Loads and saves a learner's ProgressStore to the lesson_progress table.
Progress is keyed by learner_id so several learners can share one database.

Rows for lessons no longer in the registry are skipped on load.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from execution.db.sqlite import connect, init_db
from execution.lessons.lesson_registry import is_valid_lesson_id
from execution.progress.progress_store import ProgressStore

logger = logging.getLogger(__name__)

DEFAULT_LEARNER_ID = "local"


def _utc_now() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def _clean_learner_id(learner_id: str) -> str:
    learner_id = learner_id.strip()
    if not learner_id:
        raise ValueError("Learner ID is required.")
    return learner_id


def load_progress(
    learner_id: str = DEFAULT_LEARNER_ID,
    db_path: str | None = None,
) -> ProgressStore:
    """Return a ProgressStore populated from the learner's saved rows.

    A learner with no saved rows gets an empty store.

    Args:
        learner_id: Learner key; whitespace is trimmed.
        db_path:    Path to the SQLite file; defaults to tmp/app.db.

    Raises:
        ValueError: If learner_id is empty after trimming.
    """
    learner_id = _clean_learner_id(learner_id)

    conn = connect(db_path)
    try:
        init_db(conn)
        rows = conn.execute(
            """
            SELECT lesson_id
            FROM lesson_progress
            WHERE learner_id = ?
            ORDER BY position ASC
            """,
            (learner_id,),
        ).fetchall()
    finally:
        conn.close()

    lesson_ids = []
    for row in rows:
        if is_valid_lesson_id(row["lesson_id"]):
            lesson_ids.append(row["lesson_id"])
        else:
            logger.warning(
                "Skipping saved progress for unknown lesson %r (learner %s)",
                row["lesson_id"], learner_id,
            )

    return ProgressStore(lesson_ids)


def save_progress(
    store: ProgressStore,
    learner_id: str = DEFAULT_LEARNER_ID,
    db_path: str | None = None,
) -> int:
    """Overwrite the learner's saved rows with the contents of store.

    completed_at is kept for lessons that were already saved and set to
    now for newly completed ones.

    Args:
        store:      Progress to persist.
        learner_id: Learner key; whitespace is trimmed.
        db_path:    Path to the SQLite file; defaults to tmp/app.db.

    Returns:
        Number of rows now saved for the learner.

    Raises:
        ValueError: If learner_id is empty after trimming.
    """
    learner_id = _clean_learner_id(learner_id)
    completed = store.completed()

    conn = connect(db_path)
    try:
        init_db(conn)

        existing = {
            row["lesson_id"]: row["completed_at"]
            for row in conn.execute(
                "SELECT lesson_id, completed_at FROM lesson_progress WHERE learner_id = ?",
                (learner_id,),
            ).fetchall()
        }

        now = _utc_now()
        conn.execute("DELETE FROM lesson_progress WHERE learner_id = ?", (learner_id,))
        conn.executemany(
            """
            INSERT INTO lesson_progress (learner_id, lesson_id, position, completed_at)
            VALUES (?, ?, ?, ?)
            """,
            [
                (learner_id, lesson_id, position, existing.get(lesson_id, now))
                for position, lesson_id in enumerate(completed)
            ],
        )
        conn.commit()
    finally:
        conn.close()

    logger.info("Saved %d completed lesson(s) for learner %s", len(completed), learner_id)
    return len(completed)
