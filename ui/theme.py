"""
ui/theme.py

Shared theme helper for the Collapsed Topics portal pages.
Call apply_theme() immediately after st.set_page_config() in any portal
page to inject the styling and render the consistent header bar.

Colour tokens are the format's own toggle defaults, so the portal looks
like an untouched Collapsed Topics course:
    toggle foreground:        #000000
    toggle background:        #e2e2f2
    toggle background hover:  #eeeeff
"""

from __future__ import annotations

import html

import streamlit as st

from collapsed_topics.format.format_defaults import (
    DEFAULT_TOGGLE_BACKGROUND_COLOUR,
    DEFAULT_TOGGLE_BACKGROUND_HOVER_COLOUR,
    DEFAULT_TOGGLE_FOREGROUND_COLOUR,
)

# ---------------------------------------------------------------------------
# Colour tokens
# ---------------------------------------------------------------------------
_TOGGLE_FG = f"#{DEFAULT_TOGGLE_FOREGROUND_COLOUR}"
_TOGGLE_BG = f"#{DEFAULT_TOGGLE_BACKGROUND_COLOUR}"
_TOGGLE_BG_HOVER = f"#{DEFAULT_TOGGLE_BACKGROUND_HOVER_COLOUR}"
_MUTED_TEXT = "#5B5A59"

# ---------------------------------------------------------------------------
# CSS: injected once per page render.
# Double braces {{ }} produce literal CSS braces in the f-string.
# ---------------------------------------------------------------------------
_CSS = f"""
<style>
.block-container {{
    padding-top: 0.75rem !important;
    padding-bottom: 2rem !important;
}}

#MainMenu {{ visibility: hidden; }}
footer {{ visibility: hidden; }}

section[data-testid="stSidebar"] > div:first-child {{
    background-color: {_TOGGLE_BG_HOVER};
    padding-top: 0.75rem;
}}

.stButton > button[kind="primary"] {{
    background-color: {_TOGGLE_BG} !important;
    color: {_TOGGLE_FG} !important;
    border: 1px solid {_TOGGLE_FG} !important;
    border-radius: 10px !important;
}}
.stButton > button[kind="primary"]:hover {{
    background-color: {_TOGGLE_BG_HOVER} !important;
}}

/* Section preview rows look like closed toggles */
.ct-toggle {{
    background-color: {_TOGGLE_BG};
    color: {_TOGGLE_FG};
    border-radius: 6px;
    padding: 0.4rem 0.75rem;
    margin-bottom: 0.3rem;
}}
.ct-toggle:hover {{
    background-color: {_TOGGLE_BG_HOVER};
}}
.ct-toggle.ct-current {{
    border-left: 4px solid {_TOGGLE_FG};
    font-weight: 650;
}}

hr {{
    border: none !important;
    border-top: 1px solid #E7E7E7 !important;
    margin: 1rem 0 !important;
}}
</style>
"""


def apply_theme(portal_title: str, subtitle: str | None = None) -> None:
    """Inject the portal CSS and render the shared top bar.

    Must be called immediately after st.set_page_config() in each portal page.
    """
    st.markdown(_CSS, unsafe_allow_html=True)

    subtitle_html = (
        f"<div style='color:{_MUTED_TEXT}; font-size:0.85rem; margin-top:0.15rem;'>"
        f"{html.escape(subtitle)}</div>"
        if subtitle else
        ""
    )
    st.markdown(
        f"""
        <div style="
            background: {_TOGGLE_BG};
            border-bottom: 3px solid {_TOGGLE_FG};
            padding: 0.65rem 1.25rem;
            margin: -0.75rem -1rem 1.0rem -1rem;
        ">
            <div style="color:{_TOGGLE_FG}; font-size:1.25rem; font-weight:650;">
                {html.escape(portal_title)}
            </div>
            {subtitle_html}
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_toggle_row(label: str, current: bool = False) -> None:
    """Render one section title styled as a closed toggle."""
    css_class = "ct-toggle ct-current" if current else "ct-toggle"
    st.markdown(
        f"<div class='{css_class}'>{html.escape(label)}</div>",
        unsafe_allow_html=True,
    )
