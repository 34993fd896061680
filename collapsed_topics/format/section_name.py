"""
collapsed_topics/format/section_name.py

Derives the display label of a course section from the resolved format settings.

No database access. Callers supply the section, the course and the
effective settings (see collapsed_topics/settings/load_format_options.py).
"""

from __future__ import annotations

from datetime import timezone, tzinfo
from typing import Callable

from collapsed_topics.format.format_defaults import (
    COURSE_DISPLAY_SINGLEPAGE,
    LAYOUT_STRUCTURE_DAY,
    TOGGLE_WORD_LAYOUT_ELEMENTS,
    TOPIC_STRUCTURES,
)
from collapsed_topics.format.section_dates import (
    ONE_DAY_SECONDS,
    format_short_date,
    get_section_dates,
    get_section_day,
)
from collapsed_topics.format.strings import COMPONENT, get_string

Translate = Callable[..., str]


def get_section_date_label(
    section: dict,
    course: dict,
    settings: dict,
    *,
    tz: tzinfo = timezone.utc,
) -> str:
    """Return the date label of a week- or day-based section.

    Day structure gives a single date. Every other structure gives
    "<first day> - <last day>" where the last day is the end of the week
    minus one day, so the displayed range is inclusive.

    Args:
        section:  Section dict with a "section" number.
        course:   Course dict with a "start_date" epoch timestamp.
        settings: Effective format settings (needs "layoutstructure").
        tz:       Timezone the dates are rendered in. Defaults to UTC.
    """
    number = int(section["section"])
    start_date = int(course["start_date"])

    if settings["layoutstructure"] == LAYOUT_STRUCTURE_DAY:
        return format_short_date(get_section_day(number, start_date), tz)

    start, end = get_section_dates(number, start_date)
    return f"{format_short_date(start, tz)} - {format_short_date(end - ONE_DAY_SECONDS, tz)}"


def get_section_name(
    section: dict,
    course: dict,
    settings: dict,
    *,
    tz: tzinfo = timezone.utc,
    translate: Translate = get_string,
) -> str:
    """Return the display name of *section*.

    Resolution order:
        1. A non-empty section name override, verbatim.
        2. Section 0: the general section label.
        3. Topic / Current Topic First structures: "Topic <n>".
        4. Week, Latest Week First and Day structures: the date label.

    When the course shows all sections on a single page, every section
    other than 0 gets " - Toggle" appended for layout elements 1-4.

    Args:
        section:   Section dict with "section" and optional "name".
        course:    Course dict with "start_date" and "coursedisplay".
        settings:  Effective format settings.
        tz:        Timezone for date labels.
        translate: String lookup, called as translate(key, component).

    Returns:
        The label string. Escaping is left to the caller.
    """
    number = int(section["section"])
    name = section.get("name")

    if name is not None and str(name) != "":
        label = str(name)
    elif number == 0:
        label = translate("section0name", COMPONENT)
    elif settings["layoutstructure"] in TOPIC_STRUCTURES:
        label = f"{translate('sectionname', COMPONENT)} {number}"
    else:
        label = get_section_date_label(section, course, settings, tz=tz)

    course_display = course.get("coursedisplay", settings["coursedisplay"])
    if (
        course_display == COURSE_DISPLAY_SINGLEPAGE
        and number != 0
        and settings["layoutelement"] in TOGGLE_WORD_LAYOUT_ELEMENTS
    ):
        label += f" - {translate('topcolltoggle', COMPONENT)}"

    return label


def get_section_definition(translate: Translate = get_string) -> str:
    """Return the word used to describe one section of the course ("Topic")."""
    return translate("sectionname", COMPONENT)
