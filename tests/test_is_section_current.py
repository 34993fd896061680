"""
tests/test_is_section_current.py

Unit tests for collapsed_topics/format/is_section_current.py.

No SQLite or filesystem access; pure function tests only.
Every call injects `now`; the clock is never read.
"""

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

from collapsed_topics.format.format_defaults import (  # noqa: E402
    LAYOUT_STRUCTURE_CURRENT_TOPIC_FIRST,
    LAYOUT_STRUCTURE_DAY,
    LAYOUT_STRUCTURE_LATEST_WEEK_FIRST,
    LAYOUT_STRUCTURE_TOPIC,
    LAYOUT_STRUCTURE_WEEK,
)
from collapsed_topics.format.is_section_current import (  # noqa: E402
    is_section_current,
    marker_is_current,
)

START = 1700000000
WEEK_1_START = START + 7200
WEEK_1_END = WEEK_1_START + 604800


def _course(marker: int = 0) -> dict:
    return {"id": 7, "start_date": START, "marker": marker}


def _section(number: int) -> dict:
    return {"course_id": 7, "section": number, "name": None}


def _settings(structure: int) -> dict:
    return {"layoutstructure": structure}


class TestWeekStructures(unittest.TestCase):

    def test_current_exactly_within_half_open_week(self):
        """True for now in [weekStart, weekEnd), false at now == weekEnd."""
        for structure in (LAYOUT_STRUCTURE_WEEK, LAYOUT_STRUCTURE_LATEST_WEEK_FIRST):
            settings = _settings(structure)
            with self.subTest(structure=structure):
                self.assertFalse(is_section_current(_section(1), _course(), settings, now=WEEK_1_START - 1))
                self.assertTrue(is_section_current(_section(1), _course(), settings, now=WEEK_1_START))
                self.assertTrue(is_section_current(_section(1), _course(), settings, now=WEEK_1_END - 1))
                self.assertFalse(is_section_current(_section(1), _course(), settings, now=WEEK_1_END))

    def test_uses_unadjusted_end_not_display_end(self):
        """The last displayed day's successor (display end + 1 day) is still current."""
        display_end = WEEK_1_END - 86400
        self.assertTrue(
            is_section_current(
                _section(1), _course(), _settings(LAYOUT_STRUCTURE_WEEK), now=display_end + 3600
            )
        )

    def test_next_week_is_current_at_previous_week_end(self):
        settings = _settings(LAYOUT_STRUCTURE_WEEK)
        self.assertTrue(is_section_current(_section(2), _course(), settings, now=WEEK_1_END))

    def test_sections_below_one_are_never_current(self):
        settings = _settings(LAYOUT_STRUCTURE_WEEK)
        self.assertFalse(is_section_current(_section(0), _course(), settings, now=WEEK_1_START - 10))
        self.assertFalse(is_section_current(_section(-1), _course(), settings, now=WEEK_1_START - 10))

    def test_accepts_aware_datetime(self):
        now = datetime.fromtimestamp(WEEK_1_START, timezone.utc)
        self.assertTrue(
            is_section_current(_section(1), _course(), _settings(LAYOUT_STRUCTURE_WEEK), now=now)
        )

    def test_rejects_naive_datetime(self):
        with self.assertRaises(ValueError):
            is_section_current(
                _section(1),
                _course(),
                _settings(LAYOUT_STRUCTURE_WEEK),
                now=datetime(2023, 11, 16, 12, 0, 0),
            )


class TestDayStructure(unittest.TestCase):

    def test_current_within_its_day(self):
        """Section 2 is current for [T+7200+86400, T+7200+2*86400)."""
        day = START + 7200 + 86400
        settings = _settings(LAYOUT_STRUCTURE_DAY)
        self.assertFalse(is_section_current(_section(2), _course(), settings, now=day - 1))
        self.assertTrue(is_section_current(_section(2), _course(), settings, now=day))
        self.assertTrue(is_section_current(_section(2), _course(), settings, now=day + 86399))
        self.assertFalse(is_section_current(_section(2), _course(), settings, now=day + 86400))

    def test_section_zero_is_never_current(self):
        settings = _settings(LAYOUT_STRUCTURE_DAY)
        self.assertFalse(is_section_current(_section(0), _course(), settings, now=START))


class TestHostRule(unittest.TestCase):

    def test_topic_structures_use_marker(self):
        """Topic structures defer to the highlighted marker."""
        for structure in (LAYOUT_STRUCTURE_TOPIC, LAYOUT_STRUCTURE_CURRENT_TOPIC_FIRST):
            with self.subTest(structure=structure):
                settings = _settings(structure)
                self.assertTrue(is_section_current(_section(3), _course(marker=3), settings, now=0))
                self.assertFalse(is_section_current(_section(2), _course(marker=3), settings, now=0))

    def test_marker_zero_highlights_nothing(self):
        self.assertFalse(marker_is_current(_section(0), _course(marker=0)))

    def test_injected_host_rule_is_called(self):
        """A custom host predicate replaces the marker rule."""
        calls = []

        def host_rule(section, course):
            calls.append(section["section"])
            return True

        result = is_section_current(
            _section(5),
            _course(),
            _settings(LAYOUT_STRUCTURE_TOPIC),
            now=0,
            host_is_current=host_rule,
        )
        self.assertTrue(result)
        self.assertEqual(calls, [5])

    def test_injected_host_rule_is_not_used_for_week_structures(self):
        def host_rule(section, course):
            raise AssertionError("host rule must not be called")

        self.assertFalse(
            is_section_current(
                _section(1),
                _course(),
                _settings(LAYOUT_STRUCTURE_WEEK),
                now=WEEK_1_END,
                host_is_current=host_rule,
            )
        )


if __name__ == "__main__":
    unittest.main()
