"""Schemas for activity types and logged activities."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from schemas.common import WireDate


class ActivityTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    met_value: float


class ActivityCreateRequest(BaseModel):
    activity_type_id: int = Field(..., examples=[3])
    date: WireDate = Field(..., examples=["19-10-2026"])
    duration: float = Field(..., gt=0, examples=[30], description="Duration in minutes")
    notes: Optional[str] = Field(None, max_length=500)


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    activity_type: ActivityTypeResponse
    date: WireDate
    duration: float
    calories_burned: int
    notes: Optional[str] = None


class CategorySummary(BaseModel):
    duration: float = 0
    calories_burned: int = 0
    count: int = 0


class ActivitySummary(BaseModel):
    total_duration: float = 0
    total_calories_burned: int = 0
    activity_count: int = 0
    by_category: Dict[str, CategorySummary] = {}


class ActivityDailySummaryResponse(BaseModel):
    summary: ActivitySummary
    activities: List[ActivityResponse]
