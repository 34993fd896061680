"""
collapsed_topics/settings/update_course_format_options.py

Applies a course edit-form submission to the stored format options.

Order of work, all inside one transaction:
    1. Pull the transient reset flags out of the payload.
    2. When switching from another format, carry missing options over.
    3. Upsert the remaining option values.
    4. Apply the requested resets (every course first, else this course).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from collapsed_topics.course.get_course import max_section_number
from collapsed_topics.db.sqlite import connect, init_db
from collapsed_topics.format.format_defaults import (
    ALL_COURSES,
    FORMAT_NAME,
    RESET_ALL_FLAGS,
    RESET_FLAGS,
)
from collapsed_topics.format.format_options import OPTION_KEYS
from collapsed_topics.settings.reset_format_setting import reset_on
from collapsed_topics.settings.update_format_options import write_format_options

logger = logging.getLogger(__name__)


def _is_set(value: Any) -> bool:
    """Checkbox semantics: absent, empty, False, 0 and "0" all mean unticked."""
    return value not in (None, False, 0, "", "0")


def extract_reset_flags(
    data: Mapping[str, Any],
) -> tuple[dict[str, Any], frozenset[str], frozenset[str]]:
    """Split reset flags from an edit-form payload.

    Returns:
        (payload without any reset flag,
         categories to reset for this course,
         categories to reset for every course)
    """
    payload = dict(data)
    course_categories: set[str] = set()
    all_categories: set[str] = set()

    for flag, category in RESET_FLAGS.items():
        if _is_set(payload.pop(flag, None)):
            course_categories.add(category)
    for flag, category in RESET_ALL_FLAGS.items():
        if _is_set(payload.pop(flag, None)):
            all_categories.add(category)

    return payload, frozenset(course_categories), frozenset(all_categories)


def update_course_format_options(
    course_id: int,
    data: Mapping[str, Any],
    old_course: Mapping[str, Any] | None = None,
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> bool:
    """Store an edit-form submission for a course and apply any requested resets.

    Reset flags (resetlayout, resetcolour, resettogglealignment,
    resettoggleiconset and their resetall* variants) never reach storage.
    Resets run after the ordinary update so the submitted values cannot
    undo them. If any resetall* flag is set, only the site-wide resets run;
    the single-course flags are then ignored.

    When *old_course* is supplied (the course is switching to this format),
    every option missing from *data* is copied from *old_course*. If the old
    format had no numsections, the highest stored section number is used
    instead, unless the course only has section 0.

    Args:
        course_id:   Course being edited.
        data:        Submitted values; unknown keys are ignored.
        old_course:  Course data as it was under the previous format, if any.
        format_name: Format the options belong to. Defaults to "topcoll".
        db_path:     Path to the SQLite file; defaults to tmp/app.db.

    Returns:
        True if any option value changed or a reset was applied; the caller
        uses this to decide whether to rebuild cached course data.
    """
    payload, course_categories, all_categories = extract_reset_flags(data)

    conn = connect(db_path)
    try:
        init_db(conn)

        if old_course is not None:
            for key in OPTION_KEYS:
                if key in payload:
                    continue
                if key in old_course:
                    payload[key] = old_course[key]
                elif key == "numsections":
                    max_section = max_section_number(conn, course_id)
                    if max_section:
                        payload["numsections"] = max_section

        changes = write_format_options(conn, course_id, payload, format_name)

        if all_categories:
            reset_on(conn, ALL_COURSES, all_categories, format_name)
            changes = True
        elif course_categories:
            reset_on(conn, course_id, course_categories, format_name)
            changes = True

        conn.commit()
    finally:
        conn.close()

    if all_categories:
        logger.info("Reset %s for every %s course.", sorted(all_categories), format_name)
    elif course_categories:
        logger.info("Reset %s for course %s.", sorted(course_categories), course_id)

    return changes
