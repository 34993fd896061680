"""
ui/instructor_portal/pages/0_Course_Layout_Settings.py

Course Layout Settings: edit a Collapsed Topics course's format options,
apply resets and preview the resulting section titles.

No format logic lives here; reads go through CollapsedTopicsFormat and all
writes are delegated to collapsed_topics/settings/* and collapsed_topics/course/*.

Run from the repository root:
    streamlit run ui/instructor_portal/instructor_app.py
"""

import logging
import sqlite3
import sys
from datetime import datetime, time, timezone
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# sys.path bootstrap: this file lives three levels below repo root
# (ui/instructor_portal/pages/).
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[3]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from collapsed_topics.course.get_course import list_courses, list_sections   # noqa: E402
from collapsed_topics.course.upsert_course import upsert_course, upsert_section  # noqa: E402
from collapsed_topics.format.course_format import CollapsedTopicsFormat      # noqa: E402
from collapsed_topics.format.format_defaults import (                        # noqa: E402
    FORMAT_NAME,
    RESET_ALL_FLAGS,
    RESET_FLAGS,
)
from collapsed_topics.format.format_options import course_format_options     # noqa: E402
from collapsed_topics.format.strings import get_string                       # noqa: E402
from ui.theme import apply_theme, render_toggle_row                          # noqa: E402

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DB_PATH = str(REPO_ROOT / "tmp" / "app.db")

# ---------------------------------------------------------------------------
# Page config: must be the first Streamlit call in the file.
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Course Layout Settings",
    page_icon="📚",
    layout="wide",
)
apply_theme("Instructor Portal", "Collapsed Topics course layout")

st.title("Course Layout Settings")
st.caption(
    "Choose how sections are structured, labelled and coloured. "
    "Reset options restore the defaults after the other changes are saved."
)

# ===========================================================================
# SECTION 1: Create a course
# ===========================================================================
with st.expander("Create or update a course", expanded=False):
    c1_course_id = st.number_input("Course ID", min_value=1, value=1, step=1, key="c1_course_id")
    c1_start = st.date_input("Course start date", key="c1_start")
    c1_sections = st.number_input(
        "Number of sections (excluding General)",
        min_value=0,
        max_value=52,
        value=10,
        step=1,
        key="c1_sections",
    )
    if st.button("Save course", key="btn_save_course"):
        try:
            start_ts = int(datetime.combine(c1_start, time(), tzinfo=timezone.utc).timestamp())
            upsert_course(int(c1_course_id), FORMAT_NAME, start_ts, db_path=DB_PATH)
            for number in range(int(c1_sections) + 1):
                upsert_section(int(c1_course_id), number, db_path=DB_PATH)
            st.success(f"Course {int(c1_course_id)} saved with {int(c1_sections)} section(s).")
        except ValueError as exc:
            st.error(str(exc))
        except sqlite3.OperationalError:
            st.error("Database unavailable. Check that tmp/app.db is accessible.")
        except Exception:
            logging.exception("Unexpected error saving course")
            st.error("An unexpected error occurred. See console for details.")

# ---------------------------------------------------------------------------
# Course picker
# ---------------------------------------------------------------------------
courses: list[dict] = []
try:
    courses = [c for c in list_courses(db_path=DB_PATH) if c["format"] == FORMAT_NAME]
except sqlite3.OperationalError:
    st.error("Database unavailable. Check that tmp/app.db is accessible.")
except Exception:
    logging.exception("Unexpected error loading courses")
    st.error("An unexpected error occurred loading courses. See console for details.")

if not courses:
    st.info("No Collapsed Topics courses yet. Create one above.")
    st.stop()

course_id = st.selectbox(
    "Course",
    options=[c["id"] for c in courses],
    format_func=lambda cid: f"Course {cid}",
)
fmt = CollapsedTopicsFormat(int(course_id), db_path=DB_PATH)
settings = fmt.get_settings()

# ===========================================================================
# SECTION 2: Format options
# ===========================================================================
st.divider()
st.header("Format options")

edit_options = course_format_options(for_edit_form=True)

# Outside the form so toggling it re-renders the site-wide reset boxes.
is_admin = st.checkbox(
    "Site administrator: also offer resets for every Collapsed Topics course",
    key="flag_admin",
)

with st.form("format_options_form"):
    submitted_data: dict = {}
    col_left, col_right = st.columns(2)

    for index, (key, option) in enumerate(edit_options.items()):
        column = col_left if index % 2 == 0 else col_right
        with column:
            if option["element_type"] == "colour":
                picked = st.color_picker(
                    option["label"],
                    value=f"#{settings[key]}",
                    key=f"opt_{key}",
                )
                submitted_data[key] = picked
            else:
                values = [value for value, _ in option["choices"]]
                labels = dict(option["choices"])
                current = settings[key] if settings[key] in values else option["default"]
                submitted_data[key] = st.selectbox(
                    option["label"],
                    options=values,
                    index=values.index(current),
                    format_func=lambda value, labels=labels: labels[value],
                    key=f"opt_{key}",
                )

    # -----------------------------------------------------------------------
    # Reset flags: the site-wide ones only when the admin box is ticked.
    # -----------------------------------------------------------------------
    st.subheader(get_string("ctreset"))
    reset_cols = st.columns(len(RESET_FLAGS))
    for column, flag in zip(reset_cols, RESET_FLAGS):
        with column:
            submitted_data[flag] = st.checkbox(get_string(flag), key=f"flag_{flag}")

    if is_admin:
        reset_all_cols = st.columns(len(RESET_ALL_FLAGS))
        for column, flag in zip(reset_all_cols, RESET_ALL_FLAGS):
            with column:
                submitted_data[flag] = st.checkbox(get_string(flag), key=f"flag_{flag}")

    saved = st.form_submit_button("Save changes", type="primary")

if saved:
    try:
        changed = fmt.update_course_format_options(submitted_data)
        if changed:
            st.success("Settings saved.")
        else:
            st.info("Nothing changed.")
        settings = fmt.get_settings()
    except ValueError as exc:
        st.error(str(exc))
    except sqlite3.OperationalError:
        st.error("Database unavailable. Check that tmp/app.db is accessible.")
    except Exception:
        logging.exception("Unexpected error saving format options")
        st.error("An unexpected error occurred. See console for details.")

# ===========================================================================
# SECTION 3: Preview
# ===========================================================================
st.divider()
st.header("Section preview")

now_utc = datetime.now(timezone.utc)  # captured once per render
st.caption(f"Current section evaluated at {now_utc.strftime('%Y-%m-%d %H:%M')} UTC.")

try:
    sections = list_sections(int(course_id), db_path=DB_PATH)
    numsections = int(settings["numsections"])
    for section in sections:
        if section["section"] > numsections:
            break
        current = fmt.is_section_current(section, now=now_utc)
        label = fmt.get_section_name(section)
        render_toggle_row(f"{label}  ★" if current else label, current=current)
    if not sections:
        st.info("This course has no sections yet.")
except sqlite3.OperationalError:
    st.error("Database unavailable. Check that tmp/app.db is accessible.")
except Exception:
    logging.exception("Unexpected error rendering section preview")
    st.error("An unexpected error occurred. See console for details.")
