"""
collapsed_topics/format/strings.py

English string table for the Collapsed Topics format and the host strings it uses.

No database access. Every user-facing label is looked up here by
(component, key); callers never hard-code display text.
"""

from __future__ import annotations

COMPONENT: str = "format_topcoll"
HOST_COMPONENT: str = "moodle"
LANG_COMPONENT: str = "langconfig"


class UnknownStringError(KeyError):
    """Raised when a (component, key) pair has no entry in the string table."""


_STRINGS: dict[str, dict[str, str]] = {
    COMPONENT: {
        "pluginname": "Collapsed Topics",
        "section0name": "General",
        "sectionname": "Topic",
        "topcolltoggle": "Toggle",
        "numbersections": "Number of sections",
        # Layout elements.
        "setlayoutelements": "Set elements",
        "setlayout_default": "Default",
        "setlayout_no_toggle_section_x": "No 'Topic x' / 'Week x' / 'Day x'",
        "setlayout_no_section_no": "No section number",
        "setlayout_no_toggle_section_x_section_no": (
            "No 'Topic x' / 'Week x' / 'Day x' and no section number"
        ),
        "setlayout_no_toggle_word": "No 'Toggle' word",
        "setlayout_no_toggle_word_toggle_section_x": (
            "No 'Toggle' word and no 'Topic x' / 'Week x' / 'Day x'"
        ),
        "setlayout_no_toggle_word_toggle_section_x_section_no": (
            "No 'Toggle' word, no 'Topic x' / 'Week x' / 'Day x' and no section number"
        ),
        # Layout structures.
        "setlayoutstructure": "Set structure",
        "setlayoutstructuretopic": "Topic",
        "setlayoutstructureweek": "Week",
        "setlayoutstructurelatweekfirst": "Latest Week First",
        "setlayoutstructurecurrenttopicfirst": "Current Topic First",
        "setlayoutstructureday": "Day",
        # Columns.
        "setlayoutcolumns": "Set columns",
        "one": "One",
        "two": "Two",
        "three": "Three",
        "four": "Four",
        "setlayoutcolumnorientation": "Set column orientation",
        "columnvertical": "Vertical",
        "columnhorizontal": "Horizontal",
        # Toggle appearance.
        "settogglealignment": "Set the toggle text alignment",
        "left": "Left",
        "center": "Centre",
        "right": "Right",
        "settoggleiconset": "Set the icon set",
        "arrow": "Arrow",
        "point": "Point",
        "power": "Power",
        "settoggleforegroundcolour": "Toggle foreground",
        "settogglebackgroundcolour": "Toggle background",
        "settogglebackgroundhovercolour": "Toggle background hover",
        # Reset options.
        "ctreset": "Collapsed Topics reset options",
        "resetlayout": "Layout",
        "resetcolour": "Colour",
        "resettogglealignment": "Toggle alignment",
        "resettoggleiconset": "Toggle icon set",
        "resetalllayout": "Layouts",
        "resetallcolour": "Colours",
        "resetalltogglealignment": "Toggle alignments",
        "resetalltoggleiconset": "Toggle icon sets",
    },
    HOST_COMPONENT: {
        "coursedisplay": "Course layout",
        "coursedisplay_single": "Show all sections on one page",
        "coursedisplay_multi": "Show one section per page",
        "hiddensections": "Hidden sections",
        "hiddensectionscollapsed": "Hidden sections are shown in collapsed form",
        "hiddensectionsinvisible": "Hidden sections are completely invisible",
    },
    LANG_COMPONENT: {
        "strftimedateshort": "%d %B",
    },
}


def get_string(key: str, component: str = COMPONENT) -> str:
    """Return the localized string for *key* in *component*.

    Raises:
        UnknownStringError: If the component or key is not in the table.
    """
    try:
        return _STRINGS[component][key]
    except KeyError:
        raise UnknownStringError(f"[[{key},{component}]]") from None
