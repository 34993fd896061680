"""
collapsed_topics/format/course_format.py

Per-request facade over the Collapsed Topics resolver and settings operations
for a single course.

An instance lives for one request: the course and its effective settings are
read once on first use and reused until an update through the same instance
invalidates them. The host's generic "is current" rule is injected.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Any, Iterable, Mapping

from collapsed_topics.course.get_course import get_course, get_section
from collapsed_topics.format.format_defaults import FORMAT_NAME
from collapsed_topics.format.is_section_current import (
    HostIsCurrent,
    is_section_current,
    marker_is_current,
)
from collapsed_topics.format.section_name import Translate, get_section_name
from collapsed_topics.format.strings import get_string
from collapsed_topics.format.view_url import get_view_url
from collapsed_topics.settings.load_format_options import get_format_settings
from collapsed_topics.settings.reset_format_setting import reset_format_setting
from collapsed_topics.settings.restore_format_setting import (
    restore_format_setting,
    update_columns_setting,
)
from collapsed_topics.settings.update_course_format_options import (
    update_course_format_options,
)


class CourseNotFoundError(LookupError):
    """Raised when the facade's course does not exist in storage."""


class CollapsedTopicsFormat:
    """Collapsed Topics for one course; implements SectionLabelProvider and
    CurrentSectionPredicate."""

    format_name = FORMAT_NAME

    def __init__(
        self,
        course_id: int,
        *,
        db_path: str | None = None,
        tz: tzinfo = timezone.utc,
        host_is_current: HostIsCurrent = marker_is_current,
        translate: Translate = get_string,
    ):
        self.course_id = course_id
        self.db_path = db_path
        self.tz = tz
        self._host_is_current = host_is_current
        self._translate = translate
        self._settings: dict[str, Any] | None = None
        self._course: dict[str, Any] | None = None

    # ------------------------------------------------------------------
    # Memoized reads
    # ------------------------------------------------------------------
    def get_settings(self) -> dict[str, Any]:
        if self._settings is None:
            self._settings = get_format_settings(
                self.course_id, self.format_name, db_path=self.db_path
            )
        return self._settings

    def get_course(self) -> dict[str, Any]:
        if self._course is None:
            course = get_course(self.course_id, db_path=self.db_path)
            if course is None:
                raise CourseNotFoundError(f"Course {self.course_id} not found.")
            self._course = course
        return self._course

    def _invalidate(self) -> None:
        self._settings = None
        self._course = None

    def _section(self, section: int | dict) -> dict:
        if isinstance(section, dict):
            return section
        stored = get_section(self.course_id, section, db_path=self.db_path)
        if stored is not None:
            return stored
        return {"course_id": self.course_id, "section": section, "name": None}

    # ------------------------------------------------------------------
    # Resolver
    # ------------------------------------------------------------------
    def get_section_name(self, section: int | dict) -> str:
        return get_section_name(
            self._section(section),
            self.get_course(),
            self.get_settings(),
            tz=self.tz,
            translate=self._translate,
        )

    def is_section_current(
        self,
        section: int | dict,
        now: int | float | datetime | None = None,
    ) -> bool:
        if now is None:
            now = datetime.now(timezone.utc)
        return is_section_current(
            self._section(section),
            self.get_course(),
            self.get_settings(),
            now=now,
            host_is_current=self._host_is_current,
        )

    def get_view_url(
        self,
        section: int | dict | None = None,
        *,
        sr: int | None = None,
        navigation: bool = False,
    ) -> str | None:
        return get_view_url(self.get_course(), section, sr=sr, navigation=navigation)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def update_course_format_options(
        self,
        data: Mapping[str, Any],
        old_course: Mapping[str, Any] | None = None,
    ) -> bool:
        changed = update_course_format_options(
            self.course_id,
            data,
            old_course,
            format_name=self.format_name,
            db_path=self.db_path,
        )
        self._invalidate()
        return changed

    def reset_format_setting(self, categories: Iterable[str]) -> int:
        count = reset_format_setting(
            self.course_id, categories, self.format_name, db_path=self.db_path
        )
        self._invalidate()
        return count

    def restore_format_setting(
        self,
        layoutelement: int,
        layoutstructure: int,
        layoutcolumns: int,
        tgfgcolour: str,
        tgbgcolour: str,
        tgbghvrcolour: str,
    ) -> bool:
        changed = restore_format_setting(
            self.course_id,
            layoutelement,
            layoutstructure,
            layoutcolumns,
            tgfgcolour,
            tgbgcolour,
            tgbghvrcolour,
            format_name=self.format_name,
            db_path=self.db_path,
        )
        self._invalidate()
        return changed

    def update_columns_setting(self, layoutcolumns: int) -> bool:
        changed = update_columns_setting(
            self.course_id,
            layoutcolumns,
            format_name=self.format_name,
            db_path=self.db_path,
        )
        self._invalidate()
        return changed
