"""
collapsed_topics/format/view_url.py

Builds the course view URL for a course, optionally targeting one section.

No database access. Returns a site-relative path string.
"""

from __future__ import annotations

from urllib.parse import urlencode

from collapsed_topics.format.format_defaults import (
    COURSE_DISPLAY_MULTIPAGE,
    COURSE_DISPLAY_SINGLEPAGE,
)

VIEW_PATH: str = "/course/view.php"


def get_view_url(
    course: dict,
    section: int | dict | None = None,
    *,
    sr: int | None = None,
    navigation: bool = False,
) -> str | None:
    """Return the URL of the course page, or of *section* within it.

    When a section is given, the display mode is taken from *sr* if supplied
    (non-zero means one section per page and targets section *sr*; zero means
    all sections on one page), otherwise from the course's coursedisplay.
    One-section-per-page links to section != 0 get a ``section`` query
    parameter; everything else gets a ``#section-<n>`` anchor.

    Args:
        course:     Course dict with "id" and "coursedisplay".
        section:    Section number, section dict, or None for the course page.
        sr:         Section to return to in multi-page mode.
        navigation: When True, return None instead of an anchor link for
                    sections that have no page of their own.

    Returns:
        The URL string, or None (see *navigation*).
    """
    params: dict[str, int] = {"id": int(course["id"])}

    if isinstance(section, dict):
        section_number = section["section"]
    else:
        section_number = section

    if section_number is None:
        return f"{VIEW_PATH}?{urlencode(params)}"

    section_number = int(section_number)
    if sr is not None:
        if sr:
            display = COURSE_DISPLAY_MULTIPAGE
            section_number = int(sr)
        else:
            display = COURSE_DISPLAY_SINGLEPAGE
    else:
        display = course.get("coursedisplay", COURSE_DISPLAY_SINGLEPAGE)

    if section_number != 0 and display == COURSE_DISPLAY_MULTIPAGE:
        params["section"] = section_number
        return f"{VIEW_PATH}?{urlencode(params)}"

    if navigation:
        return None
    return f"{VIEW_PATH}?{urlencode(params)}#section-{section_number}"
