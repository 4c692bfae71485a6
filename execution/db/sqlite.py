"""
execution/db/sqlite.py

SQLite helper module for local progress persistence.
Provides only infrastructure: path resolution, connection setup, and schema initialization.
No business logic lives here.
"""

import os
import sqlite3
from pathlib import Path

DB_PATH_ENV_VAR = "RLESSONS_DB_PATH"

# Repo root when running from a checkout: execution/db/ -> execution/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]


def get_db_path() -> str:
    """Return the absolute path to the local SQLite database file.

    RLESSONS_DB_PATH overrides the default.  Running from a repo checkout,
    the file lives under the repo's /tmp folder (which is safe to delete and
    is never committed); an installed copy uses ~/.rlessons/app.db instead.
    Creates the parent directory if it does not exist.

    Returns:
        str: Absolute path to the database file.
    """
    override = os.environ.get(DB_PATH_ENV_VAR)
    if override:
        path = Path(override).expanduser().resolve()
    elif (_REPO_ROOT / "pyproject.toml").is_file():
        path = _REPO_ROOT / "tmp" / "app.db"
    else:
        path = Path.home() / ".rlessons" / "app.db"
    path.parent.mkdir(parents=True, exist_ok=True)
    return str(path)


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """Open and return a sqlite3 connection with rows accessible by column name.

    Args:
        db_path: Path to the SQLite file. Defaults to the result of get_db_path().

    Returns:
        sqlite3.Connection: An open connection using sqlite3.Row rows.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row  # rows accessible by column name
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create all application tables if they do not already exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    Does not drop or migrate existing tables.

    Schema:
        lesson_progress: one row per (learner, completed lesson); position
                          keeps the learner's completion order.

    Args:
        conn: An open sqlite3.Connection.
    """
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS lesson_progress (
            learner_id    TEXT NOT NULL,
            lesson_id     TEXT NOT NULL,
            position      INTEGER NOT NULL,
            completed_at  TEXT NOT NULL,
            PRIMARY KEY (learner_id, lesson_id)
        );

        CREATE INDEX IF NOT EXISTS idx_lesson_progress_learner_id
            ON lesson_progress (learner_id);
    """)
    conn.commit()
