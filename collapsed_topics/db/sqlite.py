"""
collapsed_topics/db/sqlite.py

SQLite helper module standing in for the host LMS database.
Provides only infrastructure: path resolution, connection setup, and schema initialization.
No format logic lives here.
"""

import sqlite3
from pathlib import Path


def get_db_path() -> str:
    """Return the absolute path to the local SQLite database file.

    The file lives under the repo's /tmp folder (which is safe to delete
    and is never committed). Creates the directory if it does not exist.

    Returns:
        str: Absolute path to tmp/app.db relative to the repo root.
    """
    repo_root = Path(__file__).resolve().parents[2]  # collapsed_topics/db/sqlite.py -> repo root
    tmp_dir = repo_root / "tmp"
    tmp_dir.mkdir(parents=True, exist_ok=True)
    return str(tmp_dir / "app.db")


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """Open and return a sqlite3 connection with foreign key enforcement enabled.

    Args:
        db_path: Path to the SQLite file. Defaults to the result of get_db_path().

    Returns:
        sqlite3.Connection: An open connection with PRAGMA foreign_keys = ON.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    conn.row_factory = sqlite3.Row  # rows accessible by column name
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create all host tables if they do not already exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    Does not drop or migrate existing tables.

    Schema:
        courses               - course record (format, start date, highlighted marker)
        course_sections       - numbered sections of a course (0 = general section)
        course_format_options - name/value option rows per (course, format)
        user_preferences      - per-user name/value preferences (toggle state strings)

    Args:
        conn: An open sqlite3.Connection (foreign keys should already be ON).
    """
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS courses (
            id          INTEGER PRIMARY KEY,
            format      TEXT NOT NULL,
            start_date  INTEGER NOT NULL DEFAULT 0,
            marker      INTEGER NOT NULL DEFAULT 0,
            created_at  TEXT,
            updated_at  TEXT
        );

        CREATE TABLE IF NOT EXISTS course_sections (
            id         INTEGER PRIMARY KEY AUTOINCREMENT,
            course_id  INTEGER NOT NULL,
            section    INTEGER NOT NULL,
            name       TEXT,
            FOREIGN KEY (course_id) REFERENCES courses (id) ON DELETE CASCADE,
            UNIQUE (course_id, section)
        );

        CREATE TABLE IF NOT EXISTS course_format_options (
            id         INTEGER PRIMARY KEY AUTOINCREMENT,
            course_id  INTEGER NOT NULL,
            format     TEXT NOT NULL,
            name       TEXT NOT NULL,
            value      TEXT,
            UNIQUE (course_id, format, name)
        );

        CREATE TABLE IF NOT EXISTS user_preferences (
            id       INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id  INTEGER NOT NULL,
            name     TEXT NOT NULL,
            value    TEXT,
            UNIQUE (user_id, name)
        );

        CREATE INDEX IF NOT EXISTS idx_course_format_options_format
            ON course_format_options (format, course_id);

        CREATE INDEX IF NOT EXISTS idx_user_preferences_name
            ON user_preferences (name);
    """)
    conn.commit()
