"""
collapsed_topics/settings/load_format_options.py

Reads a course's stored format options and resolves them against the
format defaults. Read-only; no writes happen here.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping

from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import FORMAT_NAME
from collapsed_topics.format.format_options import (
    DEFAULTS,
    FORMAT_OPTIONS,
    OPTION_KEYS,
    clean_option_value,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Connection-level helpers (shared by the write operations)
# ---------------------------------------------------------------------------

def fetch_option_rows(
    conn: sqlite3.Connection,
    format_name: str = FORMAT_NAME,
    course_id: int | None = None,
) -> list[sqlite3.Row]:
    """Return option rows for one course, or for every course when course_id is None.

    Rows are ordered by row id so rows of the same course stay in insertion order.
    """
    if course_id is None:
        return conn.execute(
            """
            SELECT id, course_id, name, value
            FROM course_format_options
            WHERE format = ?
            ORDER BY id ASC
            """,
            (format_name,),
        ).fetchall()
    return conn.execute(
        """
        SELECT id, course_id, name, value
        FROM course_format_options
        WHERE format = ? AND course_id = ?
        ORDER BY id ASC
        """,
        (format_name, course_id),
    ).fetchall()


def read_stored_options(
    conn: sqlite3.Connection,
    course_id: int,
    format_name: str = FORMAT_NAME,
) -> dict[str, Any]:
    """Return the stored, type-cast options of a course (recognized keys only).

    If storage holds more than one row for the same option, the first row wins.
    """
    stored: dict[str, Any] = {}
    for row in fetch_option_rows(conn, format_name, course_id):
        name = row["name"]
        if name not in FORMAT_OPTIONS:
            continue
        if name in stored:
            logger.warning(
                "Duplicate format option row %s for course %s; keeping the first.",
                name,
                course_id,
            )
            continue
        stored[name] = clean_option_value(name, row["value"])
    return stored


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_effective(stored: Mapping[str, Any]) -> dict[str, Any]:
    """Return a complete settings dict: stored values over the format defaults.

    Every option key is always present. Keys that are not format options are dropped.
    """
    return {key: stored[key] if key in stored else DEFAULTS[key] for key in OPTION_KEYS}


def get_stored_format_options(
    course_id: int,
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> dict[str, Any]:
    """Return only the options actually stored for a course (may be partial).

    Args:
        course_id:   Course whose options are read.
        format_name: Format the options belong to. Defaults to "topcoll".
        db_path:     Path to the SQLite file; defaults to tmp/app.db.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        return read_stored_options(conn, course_id, format_name)
    finally:
        conn.close()


def get_format_settings(
    course_id: int,
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> dict[str, Any]:
    """Return the effective settings of a course (every key populated).

    Args:
        course_id:   Course whose settings are resolved.
        format_name: Format the options belong to. Defaults to "topcoll".
        db_path:     Path to the SQLite file; defaults to tmp/app.db.
    """
    return resolve_effective(
        get_stored_format_options(course_id, format_name, db_path=db_path)
    )
