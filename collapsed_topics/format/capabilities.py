"""
collapsed_topics/format/capabilities.py

The capabilities a course format offers its host. The host depends on these
protocols and is handed an implementation; it never subclasses one.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class SectionLabelProvider(Protocol):
    def get_section_name(self, section: int | dict) -> str:
        """Return the display name of a section."""
        ...


@runtime_checkable
class CurrentSectionPredicate(Protocol):
    def is_section_current(
        self,
        section: int | dict,
        now: int | float | datetime | None = None,
    ) -> bool:
        """Return True if the section is the current one."""
        ...
