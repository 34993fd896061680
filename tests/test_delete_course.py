"""
tests/test_delete_course.py

Unit tests for collapsed_topics/settings/delete_course.py and
collapsed_topics/preferences/toggle_preferences.py.
Uses an isolated database (tmp/test_delete_course.db) and never touches the
application database (tmp/app.db).
"""

import os
import sys
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap: repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from collapsed_topics.course.get_course import get_course  # noqa: E402
from collapsed_topics.course.upsert_course import upsert_course  # noqa: E402
from collapsed_topics.db.sqlite import connect, init_db  # noqa: E402
from collapsed_topics.format.format_options import OPTION_KEYS  # noqa: E402
from collapsed_topics.preferences.toggle_preferences import (  # noqa: E402
    get_toggle_preference,
    set_toggle_preference,
)
from collapsed_topics.settings.delete_course import delete_course_format_data  # noqa: E402
from collapsed_topics.settings.load_format_options import get_stored_format_options  # noqa: E402
from collapsed_topics.settings.update_format_options import update_format_options  # noqa: E402

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_delete_course.db")


class TestTogglePreferences(unittest.TestCase):

    def setUp(self):
        """Ensure tmp/ exists and the schema is initialised before each test."""
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)
        conn = connect(TEST_DB_PATH)
        init_db(conn)
        conn.close()

    def tearDown(self):
        """Remove the isolated test database after each test."""
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)

    def test_missing_preference_is_none(self):
        self.assertIsNone(get_toggle_preference(7, 1, db_path=TEST_DB_PATH))

    def test_set_then_replace(self):
        set_toggle_preference(7, 1, "0101", db_path=TEST_DB_PATH)
        set_toggle_preference(7, 1, "1111", db_path=TEST_DB_PATH)
        self.assertEqual(get_toggle_preference(7, 1, db_path=TEST_DB_PATH), "1111")

    def test_empty_state_is_allowed(self):
        set_toggle_preference(7, 1, "", db_path=TEST_DB_PATH)
        self.assertEqual(get_toggle_preference(7, 1, db_path=TEST_DB_PATH), "")

    def test_invalid_state_raises(self):
        for value in ("012", "on", None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    set_toggle_preference(7, 1, value, db_path=TEST_DB_PATH)


class TestDeleteCourseFormatData(unittest.TestCase):

    def setUp(self):
        """Ensure tmp/ exists and the schema is initialised before each test."""
        (REPO_ROOT / "tmp").mkdir(parents=True, exist_ok=True)
        conn = connect(TEST_DB_PATH)
        init_db(conn)
        conn.close()

    def tearDown(self):
        """Remove the isolated test database after each test."""
        if os.path.exists(TEST_DB_PATH):
            os.remove(TEST_DB_PATH)

    def test_removes_preferences_and_options_for_course_only(self):
        upsert_course(1, db_path=TEST_DB_PATH)
        update_format_options(1, {"layoutcolumns": 2}, db_path=TEST_DB_PATH)
        update_format_options(2, {"layoutcolumns": 3}, db_path=TEST_DB_PATH)
        set_toggle_preference(7, 1, "01", db_path=TEST_DB_PATH)
        set_toggle_preference(8, 1, "10", db_path=TEST_DB_PATH)
        set_toggle_preference(7, 2, "11", db_path=TEST_DB_PATH)

        result = delete_course_format_data(1, db_path=TEST_DB_PATH)

        self.assertEqual(result["preferences_deleted"], 2)
        self.assertEqual(result["options_deleted"], len(OPTION_KEYS))
        self.assertEqual(get_stored_format_options(1, db_path=TEST_DB_PATH), {})
        self.assertIsNone(get_toggle_preference(7, 1, db_path=TEST_DB_PATH))
        # Course 2 is untouched.
        self.assertEqual(get_stored_format_options(2, db_path=TEST_DB_PATH)["layoutcolumns"], 3)
        self.assertEqual(get_toggle_preference(7, 2, db_path=TEST_DB_PATH), "11")
        # The host course row is not ours to delete.
        self.assertIsNotNone(get_course(1, db_path=TEST_DB_PATH))

    def test_unknown_course_deletes_nothing(self):
        result = delete_course_format_data(404, db_path=TEST_DB_PATH)
        self.assertEqual(result, {"preferences_deleted": 0, "options_deleted": 0})


if __name__ == "__main__":
    unittest.main()
