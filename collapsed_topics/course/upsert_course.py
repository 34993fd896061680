"""
collapsed_topics/course/upsert_course.py

Inserts or updates host course and section rows without overwriting
fields that were not supplied. No format logic lives here.
"""

from datetime import datetime, timezone

from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import FORMAT_NAME


def _utc_now() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def upsert_course(
    course_id: int,
    format_name: str | None = None,
    start_date: int | None = None,
    marker: int | None = None,
    db_path: str | None = None,
) -> None:
    """Insert a new course row or update an existing one.

    - On insert: missing fields fall back to format "topcoll", start_date 0
      and marker 0; created_at and updated_at are set to now.
    - On update: only non-None arguments overwrite existing column values;
      created_at is never touched; updated_at is always refreshed.

    Args:
        course_id:   Course identifier (INTEGER PRIMARY KEY).
        format_name: Course format name; ignored on update when None.
        start_date:  Course start as epoch seconds; ignored on update when None.
        marker:      Highlighted section number (0 = none); ignored on update when None.
        db_path:     Path to the SQLite file; defaults to the repo tmp/app.db.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        now = _utc_now()

        existing = conn.execute(
            "SELECT id FROM courses WHERE id = ?", (course_id,)
        ).fetchone()

        if existing is None:
            conn.execute(
                """
                INSERT INTO courses (id, format, start_date, marker, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    course_id,
                    format_name or FORMAT_NAME,
                    start_date or 0,
                    marker or 0,
                    now,
                    now,
                ),
            )
        else:
            # Build SET clause dynamically; only include fields that were supplied.
            updates: list[tuple[str, object]] = [("updated_at", now)]
            if format_name is not None:
                updates.append(("format", format_name))
            if start_date is not None:
                updates.append(("start_date", start_date))
            if marker is not None:
                updates.append(("marker", marker))

            set_clause = ", ".join(f"{col} = ?" for col, _ in updates)
            values = [val for _, val in updates]
            values.append(course_id)

            conn.execute(
                f"UPDATE courses SET {set_clause} WHERE id = ?",  # noqa: S608
                values,
            )

        conn.commit()
    finally:
        conn.close()


def upsert_section(
    course_id: int,
    section: int,
    name: str | None = None,
    db_path: str | None = None,
) -> None:
    """Insert a section or replace its name override.

    Passing name=None stores no override, so the section is labelled by the format.

    Args:
        course_id: Course the section belongs to (must exist).
        section:   Section number, 0 or greater.
        name:      Optional display name override.
        db_path:   Path to the SQLite file; defaults to the repo tmp/app.db.

    Raises:
        ValueError: If section is negative.
        sqlite3.IntegrityError: If the course does not exist.
    """
    if section < 0:
        raise ValueError(f"section must be 0 or greater, got {section}.")

    conn = connect(db_path)
    try:
        init_db(conn)
        conn.execute(
            """
            INSERT INTO course_sections (course_id, section, name)
            VALUES (?, ?, ?)
            ON CONFLICT (course_id, section) DO UPDATE SET name = excluded.name
            """,
            (course_id, section, name),
        )
        conn.commit()
    finally:
        conn.close()
