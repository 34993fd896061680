"""
collapsed_topics/format/is_section_current.py

Decides whether a section is the "current" one for the course.

Week and day structures compute their own boundaries from the course start
date; every other structure defers to the host rule, which only knows the
single section an editor has highlighted.

`now` MUST be provided by the caller; this module never reads the clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from collapsed_topics.format.format_defaults import LAYOUT_STRUCTURE_DAY, WEEK_STRUCTURES
from collapsed_topics.format.section_dates import (
    ONE_DAY_SECONDS,
    get_section_dates,
    get_section_day,
)

HostIsCurrent = Callable[[dict, dict], bool]


def marker_is_current(section: dict, course: dict) -> bool:
    """Host rule: a section is current when it is the course's highlighted marker."""
    number = int(section["section"])
    return number != 0 and int(course.get("marker") or 0) == number


def _to_epoch(now: int | float | datetime) -> float:
    if isinstance(now, datetime):
        if now.tzinfo is None:
            raise ValueError("now must be timezone-aware.")
        return now.timestamp()
    return float(now)


def is_section_current(
    section: dict,
    course: dict,
    settings: dict,
    *,
    now: int | float | datetime,
    host_is_current: HostIsCurrent = marker_is_current,
) -> bool:
    """Return True if *section* is current at *now*.

    - Week / Latest Week First: start <= now < end, end being the exclusive
      week boundary (not the display end used by the date label).
    - Day: day <= now < day + 86400.
    - Sections numbered below 1 are never current for those structures.
    - Any other structure: host_is_current(section, course).

    Args:
        section:         Section dict with a "section" number.
        course:          Course dict with "start_date" (and "marker" for the host rule).
        settings:        Effective format settings (needs "layoutstructure").
        now:             Epoch seconds or a timezone-aware datetime.
        host_is_current: Host rule for non date-driven structures.

    Raises:
        ValueError: If *now* is a naive datetime.
    """
    structure = settings["layoutstructure"]
    number = int(section["section"])

    if structure in WEEK_STRUCTURES:
        if number < 1:
            return False
        timenow = _to_epoch(now)
        start, end = get_section_dates(number, int(course["start_date"]))
        return start <= timenow < end

    if structure == LAYOUT_STRUCTURE_DAY:
        if number < 1:
            return False
        timenow = _to_epoch(now)
        day = get_section_day(number, int(course["start_date"]))
        return day <= timenow < day + ONE_DAY_SECONDS

    return host_is_current(section, course)
