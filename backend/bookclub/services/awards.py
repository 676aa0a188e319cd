"""Award rule table and evaluation.

Awards come from two independent rule groups. Within a group the rules are
checked top to bottom and the first match wins; the groups' results are then
concatenated, combined tiers first. A member can therefore hold at most one
award per group.

Group A (combined tenure and attendance):

* King Award      - 60+ months and 100+ meetings
* Champion Award  - 36+ months and 70+ meetings
* Achiever Award  - 12+ months and 25+ meetings

Group B (attendance qualification, only below a tenure ceiling):

* Master - 100+ meetings with under 60 months
* Mentor - 70+ meetings with under 36 months
* Coach  - 50+ meetings with under 36 months
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple


class AwardTier(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


@dataclass(frozen=True)
class Award:
    name: str
    tier: AwardTier
    description: str


@dataclass(frozen=True)
class AwardRule:
    award: Award
    condition: Callable[[int, int], bool]  # (total_months, attendance_count)
    summary: str = ""

    def matches(self, total_months: int, attendance_count: int) -> bool:
        return self.condition(total_months, attendance_count)


@dataclass(frozen=True)
class RuleGroup:
    name: str
    rules: Tuple[AwardRule, ...]

    def first_match(self, total_months: int, attendance_count: int) -> Optional[Award]:
        for rule in self.rules:
            if rule.matches(total_months, attendance_count):
                return rule.award
        return None


COMBINED_TIERS = RuleGroup(
    name="combined",
    rules=(
        AwardRule(
            Award("King Award", AwardTier.GOLD, "5년 이상 + 100회 이상 참석"),
            lambda months, count: months >= 60 and count >= 100,
            "months >= 60 and attendance >= 100",
        ),
        AwardRule(
            Award("Champion Award", AwardTier.SILVER, "3년 이상 + 70회 이상 참석"),
            lambda months, count: months >= 36 and count >= 70,
            "months >= 36 and attendance >= 70",
        ),
        AwardRule(
            Award("Achiever Award", AwardTier.BRONZE, "1년 이상 + 25회 이상 참석"),
            lambda months, count: months >= 12 and count >= 25,
            "months >= 12 and attendance >= 25",
        ),
    ),
)

QUALIFICATION_TIERS = RuleGroup(
    name="qualification",
    rules=(
        AwardRule(
            Award("Master", AwardTier.GOLD, "100회 이상 참석 (Qualification)"),
            lambda months, count: count >= 100 and months < 60,
            "attendance >= 100 and months < 60",
        ),
        AwardRule(
            Award("Mentor", AwardTier.SILVER, "70회 이상 참석 (Qualification)"),
            lambda months, count: count >= 70 and months < 36,
            "attendance >= 70 and months < 36",
        ),
        AwardRule(
            Award("Coach", AwardTier.BRONZE, "50회 이상 참석 (Qualification)"),
            lambda months, count: count >= 50 and months < 36,
            "attendance >= 50 and months < 36",
        ),
    ),
)

RULE_GROUPS: Tuple[RuleGroup, ...] = (COMBINED_TIERS, QUALIFICATION_TIERS)


def evaluate_awards(
    total_months: int,
    attendance_count: int,
    groups: Sequence[RuleGroup] = RULE_GROUPS,
) -> List[Award]:
    """Return the earned awards in group order (0, 1 or 2 with the defaults)."""
    awards: List[Award] = []
    for group in groups:
        award = group.first_match(total_months, attendance_count)
        if award is not None:
            awards.append(award)
    return awards
