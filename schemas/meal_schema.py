"""Schemas for foods and logged meals."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional

from schemas.common import WireDate
from schemas.user_schema import NutritionTargetResponse

MealTypeName = Literal["BREAKFAST", "LUNCH", "DINNER", "SNACK"]


class FoodResponse(BaseModel):
    """Food database entry; nutrition values are per serving."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    serving_description: str
    calories: float
    protein: float
    carbs: float
    fat: float


class MealCreateRequest(BaseModel):
    food_id: int = Field(..., examples=[2])
    meal_type: MealTypeName = Field(..., examples=["LUNCH"])
    date: WireDate = Field(..., examples=["19-10-2026"])
    quantity: float = Field(1, ge=0.1, examples=[1.5], description="Number of servings")


class MealResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: WireDate
    meal_type: str
    food: FoodResponse
    quantity: float
    total_calories: float
    protein: float
    carbs: float
    fat: float

    @field_validator("meal_type", mode="before")
    @classmethod
    def _meal_type_name(cls, value):
        return getattr(value, "name", value)


class NutritionTotals(BaseModel):
    calories: float = 0
    protein: float = 0
    carbohydrates: float = 0
    fat: float = 0


class MealDailySummaryResponse(BaseModel):
    summary: NutritionTotals
    targets: Optional[NutritionTargetResponse] = None
    meals: List[MealResponse]
