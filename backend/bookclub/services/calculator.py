"""Award calculation over an injected roster and reference date."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.config import Settings, get_settings
from ..exceptions import EmptySelectionError, ValidationError
from .awards import RULE_GROUPS, Award, RuleGroup, evaluate_awards
from .roster import (
    ALL_MEETINGS,
    FilterOption,
    MeetingRecord,
    filter_meetings,
    filter_options,
    get_roster,
    selectable_dates,
)
from .tenure import DateLike, TenureResult, compute_tenure, parse_date

logger = logging.getLogger(__name__)

NO_AWARD_MESSAGE = "아직 수상 조건을 충족하지 못했습니다."


@dataclass(frozen=True)
class AwardResult:
    name: str
    period_text: str
    attendance_count: int
    awards: Tuple[Award, ...] = field(default_factory=tuple)
    total_months: int = 0

    @property
    def has_awards(self) -> bool:
        return bool(self.awards)

    def render_text(self) -> str:
        """Plain-text summary as shown on the results panel."""
        lines: List[str] = []
        if not self.awards:
            lines.append(f"{self.name}님")
            lines.append(f"활동 기간: {self.period_text}")
            lines.append(f"참석 횟수: {self.attendance_count}회")
            lines.append(NO_AWARD_MESSAGE)
            lines.append("계속해서 함께 해주세요! 📚")
            return "\n".join(lines)
        lines.append("🎊 축하합니다! 🎊")
        lines.append(f"{self.name}님")
        lines.append(f"활동 기간: {self.period_text} | 참석 횟수: {self.attendance_count}회")
        for award in self.awards:
            lines.append(f"🏆 {award.name} [{award.tier.value}] - {award.description}")
        return "\n".join(lines)


class AwardCalculator:
    """Tenure, filtering and award evaluation bound to one roster.

    The roster and reference date are passed in so that nothing here reads
    the clock or process-wide state.
    """

    def __init__(
        self,
        roster: Sequence[MeetingRecord],
        reference_date: date,
        club_start_date: Optional[date] = None,
        rule_groups: Sequence[RuleGroup] = RULE_GROUPS,
    ):
        self.roster: Tuple[MeetingRecord, ...] = tuple(roster)
        self.reference_date = reference_date
        self.club_start_date = club_start_date
        self.rule_groups = tuple(rule_groups)

    def get_filtered_meetings(self, year_filter: str = ALL_MEETINGS) -> Tuple[MeetingRecord, ...]:
        return filter_meetings(self.roster, year_filter)

    def get_filter_options(self) -> List[FilterOption]:
        if self.club_start_date is not None:
            start = self.club_start_date
        elif self.roster:
            start = date.fromisoformat(self.roster[0].date)
        else:
            start = self.reference_date
        return filter_options(start, self.reference_date)

    def compute_tenure(self, join_date: DateLike) -> TenureResult:
        return compute_tenure(join_date, self.reference_date)

    def compute_tenure_label(self, join_date: DateLike) -> str:
        """Live label for the join date field; never raises."""
        return self.compute_tenure(join_date).display_text

    def normalize_attendance(self, attended_dates: Iterable[str]) -> frozenset[str]:
        """Drop duplicates and any date that is excluded or not on the roster."""
        allowed = selectable_dates(self.roster)
        dates = frozenset(attended_dates)
        ignored = dates - allowed
        if ignored:
            logger.warning("Ignoring %d unselectable dates: %s", len(ignored), sorted(ignored))
        return dates & allowed

    def calculate_awards(
        self,
        name: Optional[str],
        join_date: DateLike,
        attended_dates: Iterable[str],
    ) -> AwardResult:
        """Compute the award result for one member.

        Raises:
            ValidationError: name or join date is empty, or the join date
                cannot be parsed.
            EmptySelectionError: no selectable attended dates were given.
        """
        member_name = (name or "").strip()
        join_text = join_date if not isinstance(join_date, str) else join_date.strip()
        if not member_name or not join_text:
            raise ValidationError()
        if parse_date(join_text) is None:
            raise ValidationError(f"가입 날짜 형식이 올바르지 않습니다: {join_text}")

        dates = self.normalize_attendance(attended_dates)
        attendance_count = len(dates)
        if attendance_count == 0:
            raise EmptySelectionError()

        tenure = self.compute_tenure(join_text)
        awards = evaluate_awards(tenure.total_months, attendance_count, self.rule_groups)
        logger.info(
            "Calculated awards for %s: %d months, %d meetings -> %s",
            member_name,
            tenure.total_months,
            attendance_count,
            [a.name for a in awards] or "none",
        )
        return AwardResult(
            name=member_name,
            period_text=tenure.display_text,
            attendance_count=attendance_count,
            awards=tuple(awards),
            total_months=tenure.total_months,
        )


def build_calculator(settings: Optional[Settings] = None) -> AwardCalculator:
    """Calculator wired to the configured roster and dates."""
    if settings is None:
        settings = get_settings()
    return AwardCalculator(
        roster=get_roster(settings.roster_path),
        reference_date=settings.reference_date,
        club_start_date=settings.club_start_date,
    )
