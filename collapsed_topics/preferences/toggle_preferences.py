"""
collapsed_topics/preferences/toggle_preferences.py

Stores and reads a user's toggle open/closed state for one course.

The state is an opaque string owned by the client-side toggle script, one
"0"/"1" character per section. Only its alphabet is validated here.
"""

import re

from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import toggle_preference_name

_TOGGLE_STATE = re.compile(r"^[01]*$")


def set_toggle_preference(
    user_id: int,
    course_id: int,
    value: str,
    db_path: str | None = None,
) -> None:
    """Insert or replace the toggle state of *user_id* for *course_id*.

    Args:
        user_id:   User the preference belongs to.
        course_id: Course the toggle state describes.
        value:     String of "0" (closed) / "1" (open) characters; may be empty.
        db_path:   Path to the SQLite file; defaults to tmp/app.db.

    Raises:
        ValueError: If value contains anything other than "0" and "1".
    """
    if not isinstance(value, str) or not _TOGGLE_STATE.match(value):
        raise ValueError(f"Toggle state must be a string of 0/1 characters, got {value!r}.")

    conn = connect(db_path)
    try:
        init_db(conn)
        conn.execute(
            """
            INSERT INTO user_preferences (user_id, name, value)
            VALUES (?, ?, ?)
            ON CONFLICT (user_id, name) DO UPDATE SET value = excluded.value
            """,
            (user_id, toggle_preference_name(course_id), value),
        )
        conn.commit()
    finally:
        conn.close()


def get_toggle_preference(
    user_id: int,
    course_id: int,
    db_path: str | None = None,
) -> str | None:
    """Return the stored toggle state, or None when the user has none for the course."""
    conn = connect(db_path)
    try:
        init_db(conn)
        row = conn.execute(
            "SELECT value FROM user_preferences WHERE user_id = ? AND name = ?",
            (user_id, toggle_preference_name(course_id)),
        ).fetchone()
        return row["value"] if row is not None else None
    finally:
        conn.close()
