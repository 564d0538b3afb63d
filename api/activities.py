"""Activity API router: reference activity types and the user's activity log."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from core.dates import parse_date
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from services.activity_service import activity_service
from schemas import ActivityCreateRequest, ActivityDailySummaryResponse, ActivityResponse, ActivityTypeResponse

logger = get_logger("api.activities")
router = APIRouter(prefix="/api", tags=["activities"])


@router.get("/activity-types", response_model=List[ActivityTypeResponse])
def list_activity_types(category: Optional[str] = None, db: Session = Depends(get_db_read)):
    return [ActivityTypeResponse.model_validate(t) for t in activity_service.get_activity_types(db, category)]


@router.post("/users/{user_id}/activities", response_model=ActivityResponse, status_code=201)
def create_activity(user_id: int, payload: ActivityCreateRequest, db: Session = Depends(get_db_write)):
    """Log an activity; calories burned are computed from MET, weight and duration."""
    activity = activity_service.create_activity(
        db, user_id, payload.activity_type_id, payload.date, payload.duration, payload.notes
    )
    return ActivityResponse.model_validate(activity)


@router.get("/users/{user_id}/activities", response_model=List[ActivityResponse])
def list_activities(
    user_id: int,
    start_date: str = Query(..., description="DD-MM-YYYY"),
    end_date: str = Query(..., description="DD-MM-YYYY"),
    db: Session = Depends(get_db_read),
):
    start = parse_date(start_date, field="start_date")
    end = parse_date(end_date, field="end_date")
    return [ActivityResponse.model_validate(a) for a in activity_service.get_activities(db, user_id, start, end)]


@router.get("/users/{user_id}/activities/summary", response_model=ActivityDailySummaryResponse)
def get_activity_summary(user_id: int, day: str = Query(..., alias="date"), db: Session = Depends(get_db_read)):
    return ActivityDailySummaryResponse.model_validate(
        activity_service.get_daily_summary(db, user_id, parse_date(day)), from_attributes=True
    )


@router.delete("/users/{user_id}/activities/{activity_id}", status_code=204)
def delete_activity(user_id: int, activity_id: int, db: Session = Depends(get_db_write)):
    activity_service.delete_activity(db, user_id, activity_id)
