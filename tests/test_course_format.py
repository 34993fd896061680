"""
tests/test_course_format.py

Unit tests for collapsed_topics/format/course_format.py.
Uses an isolated database (tmp/test_course_format.db) and never touches
the application database (tmp/app.db).
"""

import os
import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from collapsed_topics.course.upsert_course import upsert_course, upsert_section  # noqa: E402
from collapsed_topics.db.sqlite import connect, init_db  # noqa: E402
from collapsed_topics.format.capabilities import (  # noqa: E402
    CurrentSectionPredicate,
    SectionLabelProvider,
)
from collapsed_topics.format.course_format import (  # noqa: E402
    CollapsedTopicsFormat,
    CourseNotFoundError,
)
from collapsed_topics.format.format_defaults import (  # noqa: E402
    LAYOUT_STRUCTURE_TOPIC,
    LAYOUT_STRUCTURE_WEEK,
)
from collapsed_topics.settings.update_format_options import update_format_options  # noqa: E402

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_course_format.db")

START = 1700000000
# Week 1 runs from START + 7200 for one week.
IN_WEEK_ONE = START + 7200 + 3600


class TestCollapsedTopicsFormat(unittest.TestCase):

    def setUp(self):
        """Ensure tmp/ exists, the schema is initialised and course 7 exists."""
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)
        conn = connect(TEST_DB_PATH)
        init_db(conn)
        conn.close()
        upsert_course(7, start_date=START, marker=2, db_path=TEST_DB_PATH)
        update_format_options(
            7,
            {"coursedisplay": 1, "layoutstructure": LAYOUT_STRUCTURE_WEEK},
            db_path=TEST_DB_PATH,
        )

    def tearDown(self):
        """Remove the isolated test database after each test."""
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)

    def _format(self, **kwargs) -> CollapsedTopicsFormat:
        return CollapsedTopicsFormat(7, db_path=TEST_DB_PATH, **kwargs)

    def test_implements_host_capabilities(self):
        fmt = self._format()
        self.assertIsInstance(fmt, SectionLabelProvider)
        self.assertIsInstance(fmt, CurrentSectionPredicate)

    def test_section_names(self):
        upsert_section(7, 0, db_path=TEST_DB_PATH)
        upsert_section(7, 3, db_path=TEST_DB_PATH)
        upsert_section(7, 4, name="Revision", db_path=TEST_DB_PATH)
        fmt = self._format()

        self.assertEqual(fmt.get_section_name(0), "General")
        self.assertEqual(fmt.get_section_name(3), "29 November - 5 December")
        self.assertEqual(fmt.get_section_name(4), "Revision")
        # Sections not stored yet are labelled by number.
        self.assertEqual(fmt.get_section_name(1), "15 November - 21 November")

    def test_is_section_current_by_week(self):
        fmt = self._format()
        self.assertTrue(fmt.is_section_current(1, now=IN_WEEK_ONE))
        self.assertFalse(fmt.is_section_current(2, now=IN_WEEK_ONE))
        self.assertFalse(fmt.is_section_current(0, now=IN_WEEK_ONE))

    def test_is_section_current_defaults_to_wall_clock(self):
        """Without *now*, the current time is used: a 2023 course has no current week today."""
        fmt = self._format()
        self.assertFalse(fmt.is_section_current(1))

    def test_topic_structure_uses_host_rule(self):
        calls = []

        def host_rule(section, course):
            calls.append(section["section"])
            return section["section"] == course["marker"]

        update_format_options(7, {"layoutstructure": LAYOUT_STRUCTURE_TOPIC}, db_path=TEST_DB_PATH)
        fmt = self._format(host_is_current=host_rule)

        self.assertTrue(fmt.is_section_current(2, now=datetime(2030, 1, 1, tzinfo=timezone.utc)))
        self.assertFalse(fmt.is_section_current(3, now=IN_WEEK_ONE))
        self.assertEqual(calls, [2, 3])

    def test_settings_are_memoized_until_update(self):
        fmt = self._format()
        first = fmt.get_settings()
        self.assertIs(fmt.get_settings(), first)

        # A write behind the facade's back is not seen by this instance.
        update_format_options(7, {"layoutcolumns": 3}, db_path=TEST_DB_PATH)
        self.assertEqual(fmt.get_settings()["layoutcolumns"], 1)

        # A write through the facade invalidates the memo.
        self.assertTrue(fmt.update_columns_setting(4))
        self.assertEqual(fmt.get_settings()["layoutcolumns"], 4)
        self.assertEqual(fmt.get_course()["layoutcolumns"], 4)

    def test_reset_through_facade(self):
        fmt = self._format()
        fmt.update_course_format_options({"toggleiconset": "power"})
        self.assertEqual(fmt.get_settings()["toggleiconset"], "power")

        self.assertEqual(fmt.reset_format_setting({"toggleiconset"}), 1)
        self.assertEqual(fmt.get_settings()["toggleiconset"], "arrow")

    def test_restore_through_facade(self):
        fmt = self._format()
        fmt.restore_format_setting(2, 1, 3, "aaaaaa", "bbbbbb", "cccccc")
        settings = fmt.get_settings()
        self.assertEqual(settings["layoutelement"], 2)
        self.assertEqual(settings["togglebackgroundcolour"], "bbbbbb")

    def test_view_url(self):
        fmt = self._format()
        self.assertEqual(fmt.get_view_url(3), "/course/view.php?id=7&section=3")

    def test_missing_course_raises(self):
        fmt = CollapsedTopicsFormat(404, db_path=TEST_DB_PATH)
        with self.assertRaises(CourseNotFoundError):
            fmt.get_section_name(1)


if __name__ == "__main__":
    unittest.main()
