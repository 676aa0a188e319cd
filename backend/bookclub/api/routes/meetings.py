"""Roster routes: the meeting list behind the attendance checkboxes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...schemas.awards import TenureModel
from ...schemas.meetings import FilterOptionModel, MeetingListModel, MeetingModel
from ...services.calculator import AwardCalculator
from ...services.roster import ALL_MEETINGS
from ..deps import get_calculator

router = APIRouter(tags=["meetings"])


@router.get("/meetings", response_model=MeetingListModel, summary="List roster meetings")
async def list_meetings(
    year_filter: str = Query(default=ALL_MEETINGS, alias="filter", description="'all' or a year"),
    calculator: AwardCalculator = Depends(get_calculator),
) -> MeetingListModel:
    meetings = calculator.get_filtered_meetings(year_filter)
    return MeetingListModel(
        filter=year_filter,
        count=len(meetings),
        meetings=[
            MeetingModel(
                date=m.date,
                display_date=m.display_date,
                description=m.description,
                excluded=m.excluded,
            )
            for m in meetings
        ],
    )


@router.get(
    "/meetings/filters",
    response_model=List[FilterOptionModel],
    summary="Year filter options",
)
async def list_filters(
    calculator: AwardCalculator = Depends(get_calculator),
) -> List[FilterOptionModel]:
    return [FilterOptionModel(value=o.value, label=o.label) for o in calculator.get_filter_options()]


@router.get("/tenure", response_model=TenureModel, summary="Live tenure label")
async def tenure(
    join_date: Optional[str] = None,
    calculator: AwardCalculator = Depends(get_calculator),
) -> TenureModel:
    """Tenure for the join date field. Bad or missing dates give ``"0"``."""
    result = calculator.compute_tenure(join_date)
    return TenureModel(
        join_date=join_date,
        reference_date=calculator.reference_date.isoformat(),
        total_months=result.total_months,
        display_text=result.display_text,
    )
