"""User API router.

Profile registration and updates, the dashboard, and the calorie and
nutrition targets derived from the profile.
"""

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from core.validation import validate_payload
from services.user_service import user_service
from core.dates import format_date, utc_today
from schemas import (
    CalorieTargetResponse,
    DashboardResponse,
    NutritionTargetResponse,
    UserCreateRequest,
    UserProfileResponse,
    UserUpdateRequest,
)

logger = get_logger("api.users")
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserProfileResponse, status_code=201)
def create_user(payload: UserCreateRequest, db: Session = Depends(get_db_write)):
    """Register a user profile. Biometric fields may be filled in later."""
    user = user_service.create_user(db, payload.model_dump())
    return UserProfileResponse.model_validate(user_service.get_profile(db, user.id))


@router.get("/{user_id}", response_model=UserProfileResponse)
def get_profile(user_id: int, db: Session = Depends(get_db_read)):
    """Return the profile with BMR/TDEE when the biometrics are complete.

    Raises:
        NotFoundError: If the user does not exist.
    """
    return UserProfileResponse.model_validate(user_service.get_profile(db, user_id))


@router.patch("/{user_id}", response_model=UserProfileResponse)
def update_profile(user_id: int, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db_write)):
    """Partially update the profile.

    Raises:
        ValidationError: With field-level errors if the payload is invalid.
    """
    update = validate_payload(UserUpdateRequest, payload).unwrap()
    profile = user_service.update_profile(db, user_id, update.model_dump(exclude_unset=True))
    return UserProfileResponse.model_validate(profile)


@router.get("/{user_id}/dashboard", response_model=DashboardResponse)
def get_dashboard(
    user_id: int,
    day: Optional[str] = Query(None, alias="date", description="DD-MM-YYYY; defaults to today"),
    range: str = Query("week", pattern="^(week|month)$"),
    month: Optional[str] = Query(None, description="YYYY-MM; overrides the month of `date` when range=month"),
    db: Session = Depends(get_db_read),
):
    """Dashboard for one day with a weekly or monthly calorie tracker.

    Raises:
        InvalidDateError: If `date` is not DD-MM-YYYY.
    """
    day = day or format_date(utc_today())
    return DashboardResponse(**user_service.get_dashboard(db, user_id, day, range=range, month=month))


@router.get("/{user_id}/calorie-target", response_model=CalorieTargetResponse)
def get_calorie_target(user_id: int, db: Session = Depends(get_db_read)):
    """Daily calorie target for the active weight goal, with macro split.

    Raises:
        ProfileIncompleteError: If age, gender, height, weight or activity level is missing.
    """
    return CalorieTargetResponse(**user_service.get_calorie_target(db, user_id))


@router.get("/{user_id}/nutrition-targets", response_model=NutritionTargetResponse)
def get_nutrition_targets(user_id: int, db: Session = Depends(get_db_read)):
    return NutritionTargetResponse.model_validate(user_service.get_current_nutrition_target(db, user_id))


@router.post("/{user_id}/nutrition-targets", response_model=NutritionTargetResponse, status_code=201)
def recalculate_nutrition_targets(user_id: int, db: Session = Depends(get_db_write)):
    """Recompute the nutrition band from the current profile and make it active."""
    target = user_service.recalculate_nutrition_targets(db, user_id)
    logger.info("Nutrition targets recalculated for user %s", user_id)
    return NutritionTargetResponse.model_validate(target)
