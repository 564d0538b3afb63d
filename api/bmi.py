"""BMI and weight goal API router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from services.bmi_service import bmi_service
from schemas import (
    ActiveWeightGoalResponse,
    BMIAnalysisResponse,
    BMICalculateRequest,
    BMIRecordResponse,
    WeightGoalCreateRequest,
    WeightGoalResponse,
)

logger = get_logger("api.bmi")
router = APIRouter(prefix="/api/users/{user_id}", tags=["bmi"])


@router.post("/bmi", response_model=BMIRecordResponse, status_code=201)
def calculate_bmi(user_id: int, payload: BMICalculateRequest, db: Session = Depends(get_db_write)):
    """Calculate and store BMI; updates the profile height and weight."""
    record = bmi_service.calculate_and_save(db, user_id, payload.weight, payload.height)
    return BMIRecordResponse.model_validate(record)


@router.get("/bmi", response_model=List[BMIRecordResponse])
def get_bmi_history(user_id: int, limit: int = Query(10, ge=1, le=100), db: Session = Depends(get_db_read)):
    return [BMIRecordResponse.model_validate(r) for r in bmi_service.get_history(db, user_id, limit)]


@router.get("/bmi/latest", response_model=BMIRecordResponse)
def get_latest_bmi(user_id: int, db: Session = Depends(get_db_read)):
    """Most recent BMI record.

    Raises:
        NotFoundError: If the user has no BMI records.
    """
    return BMIRecordResponse.model_validate(bmi_service.get_latest(db, user_id))


@router.get("/bmi/analysis", response_model=BMIAnalysisResponse)
def get_bmi_analysis(user_id: int, db: Session = Depends(get_db_read)):
    return BMIAnalysisResponse.model_validate(bmi_service.get_analysis(db, user_id), from_attributes=True)


@router.post("/weight-goals", response_model=WeightGoalResponse, status_code=201)
def create_weight_goal(user_id: int, payload: WeightGoalCreateRequest, db: Session = Depends(get_db_write)):
    """Create a weight goal; it replaces any active goal."""
    goal = bmi_service.create_weight_goal(
        db, user_id, payload.start_weight, payload.target_weight, payload.start_date, payload.target_date
    )
    return WeightGoalResponse.model_validate(goal)


@router.get("/weight-goals/active", response_model=Optional[ActiveWeightGoalResponse])
def get_active_weight_goal(user_id: int, db: Session = Depends(get_db_read)):
    """Active goal with progress, or null when there is none."""
    goal = bmi_service.get_active_weight_goal(db, user_id)
    if goal is None:
        return None
    return ActiveWeightGoalResponse(**goal)
