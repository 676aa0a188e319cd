"""Attendance selection restricted to selectable roster dates."""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Optional, Sequence

from .roster import MeetingRecord

logger = logging.getLogger(__name__)


def toggle_attendance(
    current: AbstractSet[str],
    meeting_date: str,
    attended: bool,
    roster: Optional[Sequence[MeetingRecord]] = None,
) -> frozenset[str]:
    """Return a new attendance set with ``meeting_date`` added or removed.

    ``current`` is never mutated. When ``roster`` is given, adding a date that
    is excluded or not on the roster is ignored and ``current`` comes back
    unchanged. Removal is always allowed.
    """
    if not attended:
        return frozenset(d for d in current if d != meeting_date)
    if roster is not None:
        record = next((m for m in roster if m.date == meeting_date), None)
        if record is None:
            logger.warning("Ignoring attendance for %s: not on the roster", meeting_date)
            return frozenset(current)
        if not record.selectable:
            logger.warning("Ignoring attendance for %s: meeting is excluded", meeting_date)
            return frozenset(current)
    return frozenset(current) | {meeting_date}


class AttendanceSelector:
    """Holds one member's attended dates, guarded by the roster."""

    def __init__(self, roster: Sequence[MeetingRecord], dates: Iterable[str] = ()):
        self.roster = tuple(roster)
        self._dates: frozenset[str] = frozenset()
        for d in dates:
            self.set_attendance(d, True)

    @property
    def dates(self) -> frozenset[str]:
        return self._dates

    def set_attendance(self, meeting_date: str, attended: bool) -> frozenset[str]:
        self._dates = toggle_attendance(self._dates, meeting_date, attended, self.roster)
        return self._dates

    def is_attended(self, meeting_date: str) -> bool:
        return meeting_date in self._dates

    def clear(self) -> None:
        self._dates = frozenset()

    def count(self) -> int:
        return len(self._dates)

    def __len__(self) -> int:
        return len(self._dates)
