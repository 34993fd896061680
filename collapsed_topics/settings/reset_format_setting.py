"""
collapsed_topics/settings/reset_format_setting.py

Resets groups of format options (layout, colour, toggle alignment, toggle
icon set) to their defaults for one course or for every course using the format.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterable

from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import (
    ALL_COURSES,
    CATEGORY_DEFAULTS,
    FORMAT_NAME,
    RESET_CATEGORIES,
)
from collapsed_topics.settings.load_format_options import fetch_option_rows
from collapsed_topics.settings.update_format_options import write_format_options

logger = logging.getLogger(__name__)


def _validate_categories(categories: Iterable[str]) -> frozenset[str]:
    requested = frozenset(categories)
    unknown = requested - RESET_CATEGORIES
    if unknown:
        raise ValueError(
            f"Unknown reset categories: {sorted(unknown)}. "
            f"Known categories: {sorted(RESET_CATEGORIES)}"
        )
    return requested


def category_defaults(categories: Iterable[str]) -> dict[str, int | str]:
    """Return option key -> default for every option in *categories*."""
    update: dict[str, int | str] = {}
    for category in sorted(_validate_categories(categories)):
        update.update(CATEGORY_DEFAULTS[category])
    return update


def reset_on(
    conn: sqlite3.Connection,
    course_id: int,
    categories: Iterable[str],
    format_name: str = FORMAT_NAME,
) -> int:
    """Reset *categories* on an open connection. Does not commit.

    Courses are discovered from the stored option rows, in row order, and
    each course is reset once no matter how many rows it has.

    Returns:
        Number of courses reset.
    """
    update = category_defaults(categories)
    if not update:
        return 0

    if course_id == ALL_COURSES:
        rows = fetch_option_rows(conn, format_name)
    else:
        rows = fetch_option_rows(conn, format_name, course_id)

    reset_courses: list[int] = []
    for row in rows:
        if row["course_id"] in reset_courses:
            continue
        reset_courses.append(row["course_id"])
        write_format_options(conn, row["course_id"], update, format_name)

    return len(reset_courses)


def reset_format_setting(
    course_id: int,
    categories: Iterable[str],
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> int:
    """Reset the options of *categories* to their defaults.

    Args:
        course_id:   Course to reset, or ALL_COURSES (0) for every course
                     that has stored options for the format.
        categories:  Any of "layout", "colour", "togglealignment",
                     "toggleiconset". Empty means nothing to do.
        format_name: Format the options belong to. Defaults to "topcoll".
        db_path:     Path to the SQLite file; defaults to tmp/app.db.

    Returns:
        Number of courses reset. A course with no stored options is not
        reset (there is nothing to overwrite; reads already give defaults).

    Raises:
        ValueError: If *categories* contains an unknown category or
                    course_id is negative.
    """
    if course_id < 0:
        raise ValueError(f"course_id must be a positive id or ALL_COURSES, got {course_id}.")
    requested = _validate_categories(categories)

    conn = connect(db_path)
    try:
        init_db(conn)
        reset_count = reset_on(conn, course_id, requested, format_name)
        conn.commit()
    finally:
        conn.close()

    if requested:
        logger.info(
            "Reset %s to defaults for %s course(s) (scope=%s).",
            sorted(requested),
            reset_count,
            "all" if course_id == ALL_COURSES else course_id,
        )
    return reset_count
