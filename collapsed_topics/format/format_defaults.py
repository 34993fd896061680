"""
collapsed_topics/format/format_defaults.py

Canonical defaults and enumerations for the Collapsed Topics format.

No database access. Pure constants and helpers only.
"""

FORMAT_NAME: str = "topcoll"

# ---------------------------------------------------------------------------
# Host course defaults (the LMS-wide "moodlecourse" configuration).
# ---------------------------------------------------------------------------
HOST_DEFAULT_NUMSECTIONS: int = 10
HOST_DEFAULT_HIDDENSECTIONS: int = 0
HOST_MAX_SECTIONS: int = 52

# ---------------------------------------------------------------------------
# Enumerations: values are the persisted integers/strings.
# ---------------------------------------------------------------------------
COURSE_DISPLAY_SINGLEPAGE: int = 0
COURSE_DISPLAY_MULTIPAGE: int = 1

HIDDEN_SECTIONS_COLLAPSED: int = 0
HIDDEN_SECTIONS_INVISIBLE: int = 1

LAYOUT_STRUCTURE_TOPIC: int = 1
LAYOUT_STRUCTURE_WEEK: int = 2
LAYOUT_STRUCTURE_LATEST_WEEK_FIRST: int = 3
LAYOUT_STRUCTURE_CURRENT_TOPIC_FIRST: int = 4
LAYOUT_STRUCTURE_DAY: int = 5

# Structures labelled "Topic n" rather than by date.
TOPIC_STRUCTURES: frozenset[int] = frozenset({
    LAYOUT_STRUCTURE_TOPIC,
    LAYOUT_STRUCTURE_CURRENT_TOPIC_FIRST,
})

# Structures whose "current" section is derived from week arithmetic.
WEEK_STRUCTURES: frozenset[int] = frozenset({
    LAYOUT_STRUCTURE_WEEK,
    LAYOUT_STRUCTURE_LATEST_WEEK_FIRST,
})

# Layout element variants 1-7. Variants 5-7 drop the 'Toggle' word.
LAYOUT_ELEMENTS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)
TOGGLE_WORD_LAYOUT_ELEMENTS: frozenset[int] = frozenset({1, 2, 3, 4})

LAYOUT_COLUMNS: tuple[int, ...] = (1, 2, 3, 4)

COLUMN_VERTICAL: int = 1
COLUMN_HORIZONTAL: int = 2

TOGGLE_ALIGN_LEFT: int = 1
TOGGLE_ALIGN_CENTER: int = 2
TOGGLE_ALIGN_RIGHT: int = 3

TOGGLE_ICON_SETS: tuple[str, ...] = ("arrow", "point", "power")

# ---------------------------------------------------------------------------
# Format defaults: applied whenever a course has no stored value.
# ---------------------------------------------------------------------------
DEFAULT_COURSE_DISPLAY: int = COURSE_DISPLAY_SINGLEPAGE
DEFAULT_LAYOUT_ELEMENT: int = 1
DEFAULT_LAYOUT_STRUCTURE: int = LAYOUT_STRUCTURE_TOPIC
DEFAULT_LAYOUT_COLUMNS: int = 1
DEFAULT_LAYOUT_COLUMN_ORIENTATION: int = COLUMN_HORIZONTAL
DEFAULT_TOGGLE_ALIGNMENT: int = TOGGLE_ALIGN_CENTER
DEFAULT_TOGGLE_ICON_SET: str = "arrow"
DEFAULT_TOGGLE_FOREGROUND_COLOUR: str = "000000"
DEFAULT_TOGGLE_BACKGROUND_COLOUR: str = "e2e2f2"
DEFAULT_TOGGLE_BACKGROUND_HOVER_COLOUR: str = "eeeeff"

# ---------------------------------------------------------------------------
# Reset categories and the transient form flags that request them.
# ---------------------------------------------------------------------------
CATEGORY_LAYOUT: str = "layout"
CATEGORY_COLOUR: str = "colour"
CATEGORY_TOGGLE_ALIGNMENT: str = "togglealignment"
CATEGORY_TOGGLE_ICON_SET: str = "toggleiconset"

CATEGORY_DEFAULTS: dict[str, dict[str, int | str]] = {
    CATEGORY_LAYOUT: {
        "coursedisplay": DEFAULT_COURSE_DISPLAY,
        "layoutelement": DEFAULT_LAYOUT_ELEMENT,
        "layoutstructure": DEFAULT_LAYOUT_STRUCTURE,
        "layoutcolumns": DEFAULT_LAYOUT_COLUMNS,
        "layoutcolumnorientation": DEFAULT_LAYOUT_COLUMN_ORIENTATION,
    },
    CATEGORY_COLOUR: {
        "toggleforegroundcolour": DEFAULT_TOGGLE_FOREGROUND_COLOUR,
        "togglebackgroundcolour": DEFAULT_TOGGLE_BACKGROUND_COLOUR,
        "togglebackgroundhovercolour": DEFAULT_TOGGLE_BACKGROUND_HOVER_COLOUR,
    },
    CATEGORY_TOGGLE_ALIGNMENT: {
        "togglealignment": DEFAULT_TOGGLE_ALIGNMENT,
    },
    CATEGORY_TOGGLE_ICON_SET: {
        "toggleiconset": DEFAULT_TOGGLE_ICON_SET,
    },
}

RESET_CATEGORIES: frozenset[str] = frozenset(CATEGORY_DEFAULTS)

# Flag name -> category, for the current course and for every course.
RESET_FLAGS: dict[str, str] = {
    f"reset{category}": category for category in CATEGORY_DEFAULTS
}
RESET_ALL_FLAGS: dict[str, str] = {
    f"resetall{category}": category for category in CATEGORY_DEFAULTS
}

# Passing this as the course id targets every course using the format.
ALL_COURSES: int = 0

TOGGLE_PREFERENCE_PREFIX: str = "topcoll_toggle_"


def toggle_preference_name(course_id: int) -> str:
    """Return the user preference name holding toggle state for a course."""
    return f"{TOGGLE_PREFERENCE_PREFIX}{course_id}"
