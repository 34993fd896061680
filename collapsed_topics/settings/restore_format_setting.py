"""
collapsed_topics/settings/restore_format_setting.py

Writes settings carried by legacy backups / upgrades, and the column count
correction requested by the renderer. Both go through the normal update path.
"""

from collapsed_topics.format.format_defaults import FORMAT_NAME
from collapsed_topics.settings.update_course_format_options import (
    update_course_format_options,
)


def restore_format_setting(
    course_id: int,
    layoutelement: int,
    layoutstructure: int,
    layoutcolumns: int,
    tgfgcolour: str,
    tgbgcolour: str,
    tgbghvrcolour: str,
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> bool:
    """Store the six settings a legacy Collapsed Topics backup carries.

    coursedisplay is not part of the legacy settings, so it is left alone.

    Returns:
        True if any stored value changed.
    """
    data = {
        "layoutelement": layoutelement,
        "layoutstructure": layoutstructure,
        "layoutcolumns": layoutcolumns,
        "toggleforegroundcolour": tgfgcolour,
        "togglebackgroundcolour": tgbgcolour,
        "togglebackgroundhovercolour": tgbghvrcolour,
    }
    return update_course_format_options(
        course_id, data, format_name=format_name, db_path=db_path
    )


def update_columns_setting(
    course_id: int,
    layoutcolumns: int,
    format_name: str = FORMAT_NAME,
    db_path: str | None = None,
) -> bool:
    """Overwrite the stored column count of a course.

    Returns:
        True if the stored value changed.
    """
    return update_course_format_options(
        course_id,
        {"layoutcolumns": layoutcolumns},
        format_name=format_name,
        db_path=db_path,
    )
