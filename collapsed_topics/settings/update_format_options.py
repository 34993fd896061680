"""
collapsed_topics/settings/update_format_options.py

Upserts format option values for one course without touching options that
were not supplied. No reset or migration logic lives here.
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
from collapsed_topics.settings.load_format_options import read_stored_options

logger = logging.getLogger(__name__)

_UPSERT_SQL = """
    INSERT INTO course_format_options (course_id, format, name, value)
    VALUES (?, ?, ?, ?)
    ON CONFLICT (course_id, format, name) DO UPDATE SET value = excluded.value
"""


def write_format_options(
    conn: sqlite3.Connection,
    course_id: int,
    data: Mapping[str, Any],
    format_name: str = FORMAT_NAME,
) -> bool:
    """Upsert *data* for a course on an open connection. Does not commit.

    - Keys that are not format options are ignored.
    - Supplied values are cleaned by option type before comparison and storage.
    - An option absent from *data* keeps its stored value; if it has none
      yet, its default is stored.

    Returns:
        True if any stored value was inserted or changed.
    """
    ignored = sorted(key for key in data if key not in FORMAT_OPTIONS)
    if ignored:
        logger.debug("Ignoring unknown format option keys for course %s: %s", course_id, ignored)

    stored = read_stored_options(conn, course_id, format_name)
    changed = False

    for key in OPTION_KEYS:
        if key in data:
            new_value = clean_option_value(key, data[key])
        elif key in stored:
            continue
        else:
            new_value = DEFAULTS[key]

        if key in stored and stored[key] == new_value:
            continue

        conn.execute(_UPSERT_SQL, (course_id, format_name, key, str(new_value)))
        changed = True

    return changed


def update_format_options(
    course_id: int,
    data: Mapping[str, Any],
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> bool:
    """Upsert format option values for a course in a single transaction.

    Args:
        course_id:   Course whose options are written.
        data:        Option key -> new value. Unknown keys are ignored.
        format_name: Format the options belong to. Defaults to "topcoll".
        db_path:     Path to the SQLite file; defaults to tmp/app.db.

    Returns:
        True if any stored value changed.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        changed = write_format_options(conn, course_id, data, format_name)
        conn.commit()
    finally:
        conn.close()
    return changed
