from pydantic import BaseModel, Field
from typing import List, Optional


class AwardModel(BaseModel):
    name: str = Field(..., description="Award name")
    tier: str = Field(..., description="'gold', 'silver' or 'bronze'")
    description: str = Field(..., description="Rule summary")


class AwardRequestModel(BaseModel):
    name: Optional[str] = Field(default=None, description="Member name")
    join_date: Optional[str] = Field(default=None, description="Join date (YYYY-MM-DD)")
    attended_dates: List[str] = Field(default_factory=list, description="Attended meeting dates")


class AwardResultModel(BaseModel):
    name: str
    period_text: str = Field(..., description="Tenure label, e.g. '3년 2개월'")
    total_months: int
    attendance_count: int
    awards: List[AwardModel] = Field(default_factory=list)


class AwardRuleModel(BaseModel):
    award: AwardModel
    condition: str


class RuleGroupModel(BaseModel):
    name: str
    rules: List[AwardRuleModel]


class TenureModel(BaseModel):
    join_date: Optional[str] = None
    reference_date: str
    total_months: int
    display_text: str


class ErrorModel(BaseModel):
    detail: str
    error: str
