"""Interactive form state for a single member."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..exceptions import BookClubAwardsError
from .attendance import AttendanceSelector
from .calculator import AwardCalculator, AwardResult
from .roster import ALL_MEETINGS, MeetingRecord

logger = logging.getLogger(__name__)

ResultListener = Callable[[AwardResult], None]


class MemberSession:
    """Name, join date, year filter, attended dates and the last result.

    ``calculate()`` replaces ``result`` wholesale on success. A failed
    calculation re-raises and leaves every field, including the previous
    result, untouched so the member can correct the input and retry.
    """

    def __init__(self, calculator: AwardCalculator):
        self.calculator = calculator
        self.name = ""
        self.join_date = ""
        self.year_filter = ALL_MEETINGS
        self.attendance = AttendanceSelector(calculator.roster)
        self.result: Optional[AwardResult] = None
        self._listeners: List[ResultListener] = []

    def on_result(self, listener: ResultListener) -> None:
        """Register a callback fired after each successful calculation."""
        self._listeners.append(listener)

    def set_filter(self, year_filter: str) -> None:
        self.year_filter = year_filter

    def visible_meetings(self) -> Tuple[MeetingRecord, ...]:
        return self.calculator.get_filtered_meetings(self.year_filter)

    def set_attendance(self, meeting_date: str, attended: bool) -> None:
        self.attendance.set_attendance(meeting_date, attended)

    def get_attendance_count(self) -> int:
        return self.attendance.count()

    def tenure_label(self) -> str:
        return self.calculator.compute_tenure_label(self.join_date)

    def calculate(self) -> AwardResult:
        try:
            result = self.calculator.calculate_awards(
                self.name, self.join_date, self.attendance.dates
            )
        except BookClubAwardsError as e:
            logger.info("Calculation rejected: %s", e)
            raise
        self.result = result
        for listener in self._listeners:
            listener(result)
        return result
