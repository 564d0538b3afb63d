"""Activity logging with MET-based calorie burn."""

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import ValidationError
from core.logger import get_logger
from core.repository import UserScopedRepository, get_or_404, save
from database import models
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("services.activity_service")


class ActivityService:
    """Class-based activity service."""

    def get_activity_types(self, db: Session, category: Optional[str] = None) -> List[models.ActivityType]:
        query = db.query(models.ActivityType)
        if category:
            query = query.filter(models.ActivityType.category == category.upper())
        return query.order_by(models.ActivityType.name.asc()).all()

    def create_activity(self, db: Session, user_id: int, activity_type_id: int, day: date,
                        duration: float, notes: Optional[str] = None) -> models.UserActivity:
        """Log an activity; calories burned use the user's current weight.

        Raises:
            NotFoundError: If the user or activity type does not exist.
            ValidationError: If the user has no weight on record.
        """
        user = get_or_404(db, models.User, user_id, "User")
        if not user.weight:
            raise ValidationError("User weight is required to calculate calories burned", field="weight")
        activity_type = get_or_404(db, models.ActivityType, activity_type_id, "Activity type")

        calories = nutrition_calculator.calculate_activity_calories(activity_type.met_value, user.weight, duration)
        activity = save(db, models.UserActivity(
            user_id=user_id,
            activity_type_id=activity_type.id,
            date=day,
            duration=duration,
            calories_burned=calories,
            notes=notes,
        ))
        logger.info("Activity %s logged for user %s: %s kcal", activity_type.name, user_id, calories)
        return activity

    def get_activities(self, db: Session, user_id: int, start: date, end: date) -> List[models.UserActivity]:
        return UserScopedRepository(models.UserActivity, db).in_range(user_id, start, end)

    def delete_activity(self, db: Session, user_id: int, activity_id: int) -> None:
        UserScopedRepository(models.UserActivity, db, "Activity").delete(user_id, activity_id)
        logger.info("Activity %s deleted for user %s", activity_id, user_id)

    def get_daily_summary(self, db: Session, user_id: int, day: date) -> Dict[str, Any]:
        """Totals for one day, broken down by activity category."""
        activities = UserScopedRepository(models.UserActivity, db).on_date(user_id, day)
        summary = {
            "total_duration": 0,
            "total_calories_burned": 0,
            "activity_count": 0,
            "by_category": {},
        }
        for activity in activities:
            summary["total_duration"] += activity.duration
            summary["total_calories_burned"] += activity.calories_burned
            summary["activity_count"] += 1

            category = summary["by_category"].setdefault(
                activity.activity_type.category,
                {"duration": 0, "calories_burned": 0, "count": 0},
            )
            category["duration"] += activity.duration
            category["calories_burned"] += activity.calories_burned
            category["count"] += 1

        return {"summary": summary, "activities": activities}


activity_service = ActivityService()
__all__ = ["ActivityService", "activity_service"]
