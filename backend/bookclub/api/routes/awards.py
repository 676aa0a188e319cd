"""Awards API routes: rule listing and per-member calculation."""

from typing import List

from fastapi import APIRouter, Depends

from ...schemas.awards import (
    AwardModel,
    AwardRequestModel,
    AwardResultModel,
    AwardRuleModel,
    ErrorModel,
    RuleGroupModel,
)
from ...services.awards import Award
from ...services.calculator import AwardCalculator
from ..deps import get_calculator

router = APIRouter(prefix="/awards", tags=["awards"])


def _award_model(award: Award) -> AwardModel:
    return AwardModel(name=award.name, tier=award.tier.value, description=award.description)


@router.get("/rules", response_model=List[RuleGroupModel], summary="Award rule table")
async def list_rules(
    calculator: AwardCalculator = Depends(get_calculator),
) -> List[RuleGroupModel]:
    return [
        RuleGroupModel(
            name=group.name,
            rules=[
                AwardRuleModel(award=_award_model(rule.award), condition=rule.summary)
                for rule in group.rules
            ],
        )
        for group in calculator.rule_groups
    ]


@router.post(
    "/calculate",
    response_model=AwardResultModel,
    responses={400: {"model": ErrorModel}},
    summary="Calculate a member's awards",
)
async def calculate(
    payload: AwardRequestModel,
    calculator: AwardCalculator = Depends(get_calculator),
) -> AwardResultModel:
    """Evaluate tenure and attendance for one member.

    Missing name/join date or an empty selection are answered with 400 by
    the application's error handlers.
    """
    result = calculator.calculate_awards(payload.name, payload.join_date, payload.attended_dates)
    return AwardResultModel(
        name=result.name,
        period_text=result.period_text,
        total_months=result.total_months,
        attendance_count=result.attendance_count,
        awards=[_award_model(a) for a in result.awards],
    )
