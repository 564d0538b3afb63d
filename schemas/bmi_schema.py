"""Schemas for BMI records and weight goals."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

from core.enums import BMIStatus
from schemas.common import WireDate


class BMICalculateRequest(BaseModel):
    height: float = Field(..., ge=50, le=300, examples=[175.5], description="Height in centimeters (50-300)")
    weight: float = Field(..., ge=20, le=500, examples=[70.2], description="Weight in kilograms (20-500)")


class BMIRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    height: float
    weight: float
    bmi: float
    status: BMIStatus
    recorded_at: datetime


class BMITrend(BaseModel):
    direction: str
    change: float
    percentage: float


class BMIAnalysisResponse(BaseModel):
    latest: BMIRecordResponse
    trend: BMITrend
    average: float
    history: List[BMIRecordResponse]


class WeightGoalCreateRequest(BaseModel):
    """Payload for a new weight goal; dates are DD-MM-YYYY."""

    start_weight: float = Field(..., ge=20, le=500, examples=[80.0])
    target_weight: float = Field(..., ge=20, le=500, examples=[72.0])
    start_date: WireDate = Field(..., examples=["01-10-2026"])
    target_date: Optional[WireDate] = Field(None, examples=["31-12-2026"])

    @model_validator(mode="after")
    def _target_after_start(self):
        if self.target_date is not None and self.target_date <= self.start_date:
            raise ValueError("target_date must be after start_date")
        return self


class WeightGoalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    start_weight: float
    target_weight: float
    start_date: WireDate
    target_date: Optional[WireDate] = None
    is_active: bool


class ActiveWeightGoalResponse(WeightGoalResponse):
    current_weight: float
    progress: float
    weight_lost: float
    weight_remaining: float
