"""Meals API router: food search and the user's meal log."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from core.dates import parse_date
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from services.meal_service import meal_service
from schemas import FoodResponse, MealCreateRequest, MealDailySummaryResponse, MealResponse

logger = get_logger("api.meals")
router = APIRouter(prefix="/api", tags=["meals"])


@router.get("/foods", response_model=List[FoodResponse])
def search_foods(
    q: str = "",
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db_read),
):
    """Search the food database by name (case-insensitive substring)."""
    return [FoodResponse.model_validate(f) for f in meal_service.search_foods(db, q, page, limit)]


@router.post("/users/{user_id}/meals", response_model=MealResponse, status_code=201)
def create_meal(user_id: int, payload: MealCreateRequest, db: Session = Depends(get_db_write)):
    """Log a meal. Reaching the day's calorie target sends one achievement notification."""
    meal = meal_service.create_meal(db, user_id, payload.food_id, payload.meal_type, payload.date, payload.quantity)
    return MealResponse.model_validate(meal)


@router.get("/users/{user_id}/meals", response_model=List[MealResponse])
def list_meals(
    user_id: int,
    start_date: str = Query(..., description="DD-MM-YYYY"),
    end_date: str = Query(..., description="DD-MM-YYYY"),
    db: Session = Depends(get_db_read),
):
    start = parse_date(start_date, field="start_date")
    end = parse_date(end_date, field="end_date")
    return [MealResponse.model_validate(m) for m in meal_service.get_meals(db, user_id, start, end)]


@router.get("/users/{user_id}/meals/summary", response_model=MealDailySummaryResponse)
def get_meal_summary(user_id: int, day: str = Query(..., alias="date"), db: Session = Depends(get_db_read)):
    return MealDailySummaryResponse.model_validate(
        meal_service.get_daily_summary(db, user_id, parse_date(day)), from_attributes=True
    )


@router.delete("/users/{user_id}/meals/{meal_id}", status_code=204)
def delete_meal(user_id: int, meal_id: int, db: Session = Depends(get_db_write)):
    meal_service.delete_meal(db, user_id, meal_id)
