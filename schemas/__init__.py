"""Pydantic schema package for request and response models."""

from .user_schema import (
    UserCreateRequest,
    UserUpdateRequest,
    UserProfileResponse,
    DashboardResponse,
    CalorieTargetResponse,
    NutritionTargetResponse,
)
from .bmi_schema import (
    BMICalculateRequest,
    BMIRecordResponse,
    BMIAnalysisResponse,
    WeightGoalCreateRequest,
    WeightGoalResponse,
    ActiveWeightGoalResponse,
)
from .activity_schema import ActivityCreateRequest, ActivityResponse, ActivityTypeResponse, ActivityDailySummaryResponse
from .meal_schema import FoodResponse, MealCreateRequest, MealResponse, MealDailySummaryResponse
from .notification_schema import NotificationResponse, NotificationListResponse, UnreadCountResponse, FCMTokenRequest

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserProfileResponse",
    "DashboardResponse",
    "CalorieTargetResponse",
    "NutritionTargetResponse",
    "BMICalculateRequest",
    "BMIRecordResponse",
    "BMIAnalysisResponse",
    "WeightGoalCreateRequest",
    "WeightGoalResponse",
    "ActiveWeightGoalResponse",
    "ActivityCreateRequest",
    "ActivityResponse",
    "ActivityTypeResponse",
    "ActivityDailySummaryResponse",
    "FoodResponse",
    "MealCreateRequest",
    "MealResponse",
    "MealDailySummaryResponse",
    "NotificationResponse",
    "NotificationListResponse",
    "UnreadCountResponse",
    "FCMTokenRequest",
]
