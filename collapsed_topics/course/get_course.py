"""
collapsed_topics/course/get_course.py

Read-only host accessors for courses and sections.

get_course() returns the course merged with its effective format options,
the same shape the resolver functions expect.
"""

from __future__ import annotations

import sqlite3

from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import FORMAT_NAME
from collapsed_topics.settings.load_format_options import read_stored_options, resolve_effective


def max_section_number(conn: sqlite3.Connection, course_id: int) -> int | None:
    """Return the highest section number stored for a course, or None if it has none."""
    row = conn.execute(
        "SELECT MAX(section) AS max_section FROM course_sections WHERE course_id = ?",
        (course_id,),
    ).fetchone()
    return row["max_section"]


def get_max_section_number(course_id: int, db_path: str | None = None) -> int | None:
    """Return the highest section number stored for a course, or None.

    Args:
        course_id: Course to inspect.
        db_path:   Path to the SQLite file; defaults to tmp/app.db.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        return max_section_number(conn, course_id)
    finally:
        conn.close()


def get_course(course_id: int, db_path: str | None = None) -> dict | None:
    """Return the course row merged with its effective format options.

    Format options are only merged when the course uses this format.

    Args:
        course_id: Course to load.
        db_path:   Path to the SQLite file; defaults to tmp/app.db.

    Returns:
        dict with id, format, start_date, marker (plus every format option
        key for Collapsed Topics courses), or None if the course does not exist.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        row = conn.execute(
            "SELECT id, format, start_date, marker FROM courses WHERE id = ?",
            (course_id,),
        ).fetchone()
        if row is None:
            return None

        course = dict(row)
        if course["format"] == FORMAT_NAME:
            course.update(resolve_effective(read_stored_options(conn, course_id)))
        return course
    finally:
        conn.close()


def get_section(course_id: int, section: int, db_path: str | None = None) -> dict | None:
    """Return a section dict {course_id, section, name}, or None if it does not exist.

    Args:
        course_id: Course the section belongs to.
        section:   Section number (0 = general section).
        db_path:   Path to the SQLite file; defaults to tmp/app.db.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        row = conn.execute(
            """
            SELECT course_id, section, name
            FROM course_sections
            WHERE course_id = ? AND section = ?
            """,
            (course_id, section),
        ).fetchone()
        return dict(row) if row is not None else None
    finally:
        conn.close()


def list_sections(course_id: int, db_path: str | None = None) -> list[dict]:
    """Return every section of a course ordered by section number."""
    conn = connect(db_path)
    try:
        init_db(conn)
        rows = conn.execute(
            """
            SELECT course_id, section, name
            FROM course_sections
            WHERE course_id = ?
            ORDER BY section ASC
            """,
            (course_id,),
        ).fetchall()
        return [dict(row) for row in rows]
    finally:
        conn.close()


def list_courses(db_path: str | None = None) -> list[dict]:
    """Return every course row {id, format, start_date, marker} ordered by id."""
    conn = connect(db_path)
    try:
        init_db(conn)
        rows = conn.execute(
            "SELECT id, format, start_date, marker FROM courses ORDER BY id ASC"
        ).fetchall()
        return [dict(row) for row in rows]
    finally:
        conn.close()
