"""
tests/test_load_format_options.py

Unit tests for collapsed_topics/settings/load_format_options.py.
Uses an isolated database (tmp/test_load_format_options.db) and never
touches the application database (tmp/app.db).
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

from collapsed_topics.db.sqlite import connect, init_db  # noqa: E402
from collapsed_topics.format.format_options import DEFAULTS, OPTION_KEYS  # noqa: E402
from collapsed_topics.settings.load_format_options import (  # noqa: E402
    get_format_settings,
    get_stored_format_options,
    resolve_effective,
)

TEST_DB_PATH = str(REPO_ROOT / "tmp" / "test_load_format_options.db")


def _insert_option(course_id: int, name: str, value: str, format_name: str = "topcoll") -> None:
    conn = connect(TEST_DB_PATH)
    try:
        conn.execute(
            "INSERT INTO course_format_options (course_id, format, name, value) VALUES (?, ?, ?, ?)",
            (course_id, format_name, name, value),
        )
        conn.commit()
    finally:
        conn.close()


class TestResolveEffective(unittest.TestCase):

    def test_empty_store_gives_all_defaults(self):
        self.assertEqual(resolve_effective({}), dict(DEFAULTS))

    def test_never_partial(self):
        """Whatever subset is stored, every key is present."""
        for key in OPTION_KEYS:
            with self.subTest(stored_only=key):
                effective = resolve_effective({key: DEFAULTS[key]})
                self.assertEqual(set(effective), set(OPTION_KEYS))

    def test_stored_values_win_and_unknown_keys_are_dropped(self):
        effective = resolve_effective({"layoutcolumns": 3, "resetlayout": 1, "junk": "x"})
        self.assertEqual(effective["layoutcolumns"], 3)
        self.assertNotIn("resetlayout", effective)
        self.assertNotIn("junk", effective)


class TestGetFormatSettings(unittest.TestCase):

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

    def test_course_without_rows_resolves_to_defaults(self):
        self.assertEqual(get_stored_format_options(99, db_path=TEST_DB_PATH), {})
        self.assertEqual(get_format_settings(99, db_path=TEST_DB_PATH), dict(DEFAULTS))

    def test_stored_values_are_cast_by_type(self):
        _insert_option(1, "layoutcolumns", "3")
        _insert_option(1, "toggleiconset", "power")

        stored = get_stored_format_options(1, db_path=TEST_DB_PATH)
        self.assertEqual(stored, {"layoutcolumns": 3, "toggleiconset": "power"})

        settings = get_format_settings(1, db_path=TEST_DB_PATH)
        self.assertEqual(settings["layoutcolumns"], 3)
        self.assertEqual(settings["toggleiconset"], "power")
        self.assertEqual(settings["layoutstructure"], DEFAULTS["layoutstructure"])

    def test_other_formats_and_courses_are_ignored(self):
        _insert_option(1, "layoutcolumns", "4", format_name="weeks")
        _insert_option(2, "layoutcolumns", "2")

        self.assertEqual(get_format_settings(1, db_path=TEST_DB_PATH)["layoutcolumns"], 1)

    def test_unknown_stored_names_are_ignored(self):
        _insert_option(1, "resetlayout", "1")
        self.assertEqual(get_stored_format_options(1, db_path=TEST_DB_PATH), {})


if __name__ == "__main__":
    unittest.main()
