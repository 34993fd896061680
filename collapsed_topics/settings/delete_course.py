"""
collapsed_topics/settings/delete_course.py

Removes everything this format stores for a course when the course is deleted:
the per-user toggle state preferences and the course's format option rows.

The course and section rows themselves belong to the host and are never deleted here.
"""

import logging

from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import FORMAT_NAME, toggle_preference_name

logger = logging.getLogger(__name__)


def delete_course_format_data(
    course_id: int,
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> dict:
    """Delete toggle preferences and format options for a course.

    Args:
        course_id:   Course being deleted.
        format_name: Format whose option rows are removed. Defaults to "topcoll".
        db_path:     Path to the SQLite file; defaults to tmp/app.db.

    Returns:
        dict with keys:
            preferences_deleted (int) Toggle preference rows removed (all users).
            options_deleted     (int) Format option rows removed.
    """
    conn = connect(db_path)
    try:
        init_db(conn)

        cursor = conn.execute(
            "DELETE FROM user_preferences WHERE name = ?",
            (toggle_preference_name(course_id),),
        )
        preferences_deleted: int = cursor.rowcount

        cursor = conn.execute(
            "DELETE FROM course_format_options WHERE course_id = ? AND format = ?",
            (course_id, format_name),
        )
        options_deleted: int = cursor.rowcount

        conn.commit()
    finally:
        conn.close()

    logger.info(
        "Deleted %s toggle preference(s) and %s option row(s) for course %s.",
        preferences_deleted,
        options_deleted,
        course_id,
    )
    return {
        "preferences_deleted": preferences_deleted,
        "options_deleted": options_deleted,
    }
