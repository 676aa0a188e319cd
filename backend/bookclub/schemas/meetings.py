from pydantic import BaseModel, Field
from typing import List


class MeetingModel(BaseModel):
    date: str = Field(..., description="Meeting date (YYYY-MM-DD)")
    display_date: str = Field(..., description="Meeting date as YYYY.MM.DD")
    description: str = Field(..., description="Book title or session note")
    excluded: bool = Field(..., description="Whether the meeting cannot be marked attended")


class MeetingListModel(BaseModel):
    filter: str
    count: int
    meetings: List[MeetingModel]


class FilterOptionModel(BaseModel):
    value: str = Field(..., description="'all' or a 4-digit year")
    label: str
