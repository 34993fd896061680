"""
collapsed_topics/format/format_options.py

The format option schema: every persisted key, its type and default, plus
the edit-form description (label and choices) of each option.

No database access. Both tables are built once at import time and exposed
read-only; nothing mutates them afterwards.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping

from collapsed_topics.format import format_defaults as d
from collapsed_topics.format.strings import COMPONENT, HOST_COMPONENT, get_string

PARAM_INT = "int"
PARAM_ALPHA = "alpha"
PARAM_ALPHANUM = "alphanum"

_NON_ALPHA = re.compile(r"[^a-zA-Z]+")
_NON_ALPHANUM = re.compile(r"[^a-zA-Z0-9]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# ---------------------------------------------------------------------------
# Option schema: key order is the edit form order.
# ---------------------------------------------------------------------------
_OPTIONS: dict[str, tuple[int | str, str]] = {
    "numsections": (d.HOST_DEFAULT_NUMSECTIONS, PARAM_INT),
    "hiddensections": (d.HOST_DEFAULT_HIDDENSECTIONS, PARAM_INT),
    "coursedisplay": (d.DEFAULT_COURSE_DISPLAY, PARAM_INT),
    "layoutelement": (d.DEFAULT_LAYOUT_ELEMENT, PARAM_INT),
    "layoutstructure": (d.DEFAULT_LAYOUT_STRUCTURE, PARAM_INT),
    "layoutcolumns": (d.DEFAULT_LAYOUT_COLUMNS, PARAM_INT),
    "layoutcolumnorientation": (d.DEFAULT_LAYOUT_COLUMN_ORIENTATION, PARAM_INT),
    "togglealignment": (d.DEFAULT_TOGGLE_ALIGNMENT, PARAM_INT),
    "toggleiconset": (d.DEFAULT_TOGGLE_ICON_SET, PARAM_ALPHA),
    "toggleforegroundcolour": (d.DEFAULT_TOGGLE_FOREGROUND_COLOUR, PARAM_ALPHANUM),
    "togglebackgroundcolour": (d.DEFAULT_TOGGLE_BACKGROUND_COLOUR, PARAM_ALPHANUM),
    "togglebackgroundhovercolour": (
        d.DEFAULT_TOGGLE_BACKGROUND_HOVER_COLOUR,
        PARAM_ALPHANUM,
    ),
}

OPTION_KEYS: tuple[str, ...] = tuple(_OPTIONS)

FORMAT_OPTIONS: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    key: MappingProxyType({"default": default, "type": param_type})
    for key, (default, param_type) in _OPTIONS.items()
})

DEFAULTS: Mapping[str, int | str] = MappingProxyType({
    key: default for key, (default, _) in _OPTIONS.items()
})


def _select(
    label: str,
    choices: list[tuple[int | str, str]],
    component: str = COMPONENT,
) -> dict:
    return {
        "label": get_string(label, component),
        "help_component": component,
        "element_type": "select",
        "choices": tuple((value, get_string(key, component)) for value, key in choices),
    }


def _colour(label: str) -> dict:
    return {
        "label": get_string(label),
        "help_component": COMPONENT,
        "element_type": "colour",
        "choices": (),
    }


def _build_edit_form_options() -> Mapping[str, Mapping[str, Any]]:
    section_menu = tuple((i, str(i)) for i in range(d.HOST_MAX_SECTIONS + 1))
    edit = {
        "numsections": {
            "label": get_string("numbersections"),
            "help_component": COMPONENT,
            "element_type": "select",
            "choices": section_menu,
        },
        "hiddensections": _select(
            "hiddensections",
            [
                (d.HIDDEN_SECTIONS_COLLAPSED, "hiddensectionscollapsed"),
                (d.HIDDEN_SECTIONS_INVISIBLE, "hiddensectionsinvisible"),
            ],
            HOST_COMPONENT,
        ),
        "coursedisplay": _select(
            "coursedisplay",
            [
                (d.COURSE_DISPLAY_SINGLEPAGE, "coursedisplay_single"),
                (d.COURSE_DISPLAY_MULTIPAGE, "coursedisplay_multi"),
            ],
            HOST_COMPONENT,
        ),
        "layoutelement": _select(
            "setlayoutelements",
            [
                (1, "setlayout_default"),
                (2, "setlayout_no_toggle_section_x"),
                (3, "setlayout_no_section_no"),
                (4, "setlayout_no_toggle_section_x_section_no"),
                (5, "setlayout_no_toggle_word"),
                (6, "setlayout_no_toggle_word_toggle_section_x"),
                (7, "setlayout_no_toggle_word_toggle_section_x_section_no"),
            ],
        ),
        "layoutstructure": _select(
            "setlayoutstructure",
            [
                (d.LAYOUT_STRUCTURE_TOPIC, "setlayoutstructuretopic"),
                (d.LAYOUT_STRUCTURE_WEEK, "setlayoutstructureweek"),
                (d.LAYOUT_STRUCTURE_LATEST_WEEK_FIRST, "setlayoutstructurelatweekfirst"),
                (d.LAYOUT_STRUCTURE_CURRENT_TOPIC_FIRST, "setlayoutstructurecurrenttopicfirst"),
                (d.LAYOUT_STRUCTURE_DAY, "setlayoutstructureday"),
            ],
        ),
        "layoutcolumns": _select(
            "setlayoutcolumns",
            [(1, "one"), (2, "two"), (3, "three"), (4, "four")],
        ),
        "layoutcolumnorientation": _select(
            "setlayoutcolumnorientation",
            [
                (d.COLUMN_VERTICAL, "columnvertical"),
                (d.COLUMN_HORIZONTAL, "columnhorizontal"),
            ],
        ),
        "togglealignment": _select(
            "settogglealignment",
            [
                (d.TOGGLE_ALIGN_LEFT, "left"),
                (d.TOGGLE_ALIGN_CENTER, "center"),
                (d.TOGGLE_ALIGN_RIGHT, "right"),
            ],
        ),
        "toggleiconset": _select(
            "settoggleiconset",
            [(icon_set, icon_set) for icon_set in d.TOGGLE_ICON_SETS],
        ),
        "toggleforegroundcolour": _colour("settoggleforegroundcolour"),
        "togglebackgroundcolour": _colour("settogglebackgroundcolour"),
        "togglebackgroundhovercolour": _colour("settogglebackgroundhovercolour"),
    }
    return MappingProxyType({
        key: MappingProxyType({**FORMAT_OPTIONS[key], **edit[key]})
        for key in OPTION_KEYS
    })


EDIT_FORM_OPTIONS: Mapping[str, Mapping[str, Any]] = _build_edit_form_options()


def course_format_options(for_edit_form: bool = False) -> Mapping[str, Mapping[str, Any]]:
    """Return the option schema, extended with labels and choices for the edit form.

    Args:
        for_edit_form: When True, each entry also carries label, element_type,
                       help_component and choices ((value, label) pairs).

    Returns:
        Read-only mapping of option key -> read-only option description.
    """
    return EDIT_FORM_OPTIONS if for_edit_form else FORMAT_OPTIONS


def clean_option_value(key: str, value: Any) -> int | str:
    """Clean *value* according to the declared type of option *key*.

    int values keep their leading integer part (2.0 and "3.0abc" clean to 2
    and 3); values without one become 0. alpha and alphanum values have
    every disallowed character stripped.

    Raises:
        KeyError: If *key* is not a format option.
    """
    param_type = FORMAT_OPTIONS[key]["type"]
    if param_type == PARAM_INT:
        if isinstance(value, (bool, int, float)):
            try:
                return int(value)
            except (OverflowError, ValueError):
                return 0
        # Integer part of the leading number: "3.0" -> 3, "12abc" -> 12, "abc" -> 0.
        match = _LEADING_INT.match("" if value is None else str(value))
        return int(match.group(1)) if match else 0
    text = "" if value is None else str(value)
    if param_type == PARAM_ALPHA:
        return _NON_ALPHA.sub("", text)
    return _NON_ALPHANUM.sub("", text)
