"""
collapsed_topics/format/section_dates.py

Date arithmetic for week- and day-based section structures.

No database access, no clock reads. Section numbers that fall before the
course start or after its end are not clamped; they resolve to whatever
dates the arithmetic gives.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from collapsed_topics.format.strings import LANG_COMPONENT, get_string

ONE_DAY_SECONDS: int = 86400
ONE_WEEK_SECONDS: int = 604800

# Two hours added to the course start so a daylight-saving change never
# moves a section boundary onto the previous calendar day.
DST_GUARD_SECONDS: int = 7200


def get_section_dates(section_number: int, start_date: int) -> tuple[int, int]:
    """Return (start, end) epoch seconds of a week-based section.

    end is the exclusive boundary: the first second of the following week.
    """
    start = start_date + DST_GUARD_SECONDS + ONE_WEEK_SECONDS * (section_number - 1)
    return start, start + ONE_WEEK_SECONDS


def get_section_day(section_number: int, start_date: int) -> int:
    """Return the epoch seconds of a day-based section."""
    return start_date + DST_GUARD_SECONDS + ONE_DAY_SECONDS * (section_number - 1)


def format_short_date(timestamp: int, tz: tzinfo = timezone.utc) -> str:
    """Render *timestamp* with the localized short date pattern (e.g. "5 December").

    The day of month is printed without a leading zero.
    """
    moment = datetime.fromtimestamp(timestamp, tz)
    pattern = get_string("strftimedateshort", LANG_COMPONENT)
    return moment.strftime(pattern.replace("%d", str(moment.day)))
