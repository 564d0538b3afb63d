"""Schemas for user profile, dashboard and target endpoints."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import List, Optional, Union

from core.enums import ActivityLevel, Sex
from schemas.common import WireDate


class UserCreateRequest(BaseModel):
    """Request payload for registering a user profile."""

    email: EmailStr = Field(..., examples=["jane@example.com"], description="Unique e-mail address")
    name: str = Field(..., min_length=2, max_length=50, examples=["Jane Doe"], description="Display name")
    age: Optional[int] = Field(None, ge=1, le=120, examples=[30], description="Age in years (1-120)")
    gender: Optional[Sex] = Field(None, examples=["FEMALE"], description="MALE or FEMALE")
    height: Optional[float] = Field(None, ge=50, le=300, examples=[165.0], description="Height in centimeters (50-300)")
    weight: Optional[float] = Field(None, ge=20, le=500, examples=[60.0], description="Weight in kilograms (20-500)")
    activity_level: Optional[ActivityLevel] = Field(None, examples=["MODERATELY_ACTIVE"])


class UserUpdateRequest(BaseModel):
    """Partial profile update; only fields present in the payload change."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=2, max_length=50)
    age: Optional[int] = Field(None, ge=1, le=120)
    gender: Optional[Sex] = None
    height: Optional[float] = Field(None, ge=50, le=300)
    weight: Optional[float] = Field(None, ge=20, le=500)
    activity_level: Optional[ActivityLevel] = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value):
        # name is a required column; only omitting it leaves it unchanged
        if value is None:
            raise ValueError("name cannot be null")
        return value


class UserProfileResponse(BaseModel):
    """Profile with BMR/TDEE derived when the biometrics are complete."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    age: Optional[int] = None
    gender: Optional[Sex] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None
    bmr: Optional[int] = None
    tdee: Optional[int] = None
    created_at: datetime


class CalorieTrackerDay(BaseModel):
    label: str
    date: str
    calories: float


class CalorieTrackerWeek(BaseModel):
    label: str
    start: str
    end: str
    calories: float


class DashboardResponse(BaseModel):
    """Aggregated view for one day plus the week/month calorie tracker."""

    user: dict
    calories: dict
    activities: dict
    weight_goal: Optional[dict] = None
    latest_bmi: Optional[dict] = None
    date: str
    range: str
    calories_tracker: List[Union[CalorieTrackerDay, CalorieTrackerWeek]]


class CalorieTargetResponse(BaseModel):
    bmr: int
    tdee: int
    daily_calorie_target: int
    target_weight: Optional[float] = None
    target_date: Optional[WireDate] = None
    macros: dict


class NutritionTargetResponse(BaseModel):
    """Stored nutrition band (see `NutritionCalculator.calculate_nutrition_targets`)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    calories: int
    calories_min: int
    calories_max: int
    protein_min: int
    protein_max: int
    carb_min: int
    carb_max: int
    fat_min: int
    fat_max: int
    effective_date: WireDate
    is_active: bool
