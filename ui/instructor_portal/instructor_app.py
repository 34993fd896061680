"""
ui/instructor_portal/instructor_app.py

Instructor Portal for Collapsed Topics courses.
Opens straight onto Course Layout Settings, where an instructor picks a
course, edits its format options and resets, and previews section titles.
Further pages are picked up from the sibling pages/ directory.

Run from the repository root:
    streamlit run ui/instructor_portal/instructor_app.py
"""

import streamlit as st

st.set_page_config(
    page_title="Instructor Portal",
    page_icon="📚",
    layout="wide",
)

st.switch_page("pages/0_Course_Layout_Settings.py")
st.info("Redirecting… If you are not redirected, use the sidebar.")
