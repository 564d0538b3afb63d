"""User profiles, the dashboard and goal-based calorie targets."""

from datetime import date
from typing import Any, Dict, Optional, Union

from sqlalchemy.orm import Session

from core.dates import format_date, parse_date, parse_month, utc_today
from core.exceptions import NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import UserScopedRepository, get_or_404, save
from database import models
from services.bmi_service import bmi_service
from services.dashboard_aggregator import build_monthly_buckets, build_weekly_buckets
from services.meal_service import active_nutrition_target, meal_service
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("services.user_service")

PROFILE_FIELDS = ("name", "age", "gender", "height", "weight", "activity_level")
DASHBOARD_RANGES = ("week", "month")


class UserService:
    """Class-based user service."""

    def create_user(self, db: Session, data: Dict[str, Any]) -> models.User:
        if db.query(models.User).filter(models.User.email == data["email"]).first():
            raise ValidationError("Email already registered", field="email")
        user = save(db, models.User(**data))
        logger.info("User %s registered with id=%s", user.email, user.id)
        return user

    def get_profile(self, db: Session, user_id: int) -> Dict[str, Any]:
        """Profile fields plus BMR and TDEE when the biometrics are complete."""
        user = get_or_404(db, models.User, user_id, "User")
        profile = {
            "id": user.id,
            "email": user.email,
            "created_at": user.created_at,
            "bmr": None,
            "tdee": None,
        }
        profile.update({name: getattr(user, name) for name in PROFILE_FIELDS})

        if nutrition_calculator.has_biometrics(user):
            profile["bmr"] = nutrition_calculator.calculate_bmr(user.weight, user.height, user.age, user.gender)
            profile["tdee"] = nutrition_calculator.calculate_tdee(profile["bmr"], user.activity_level)
            logger.debug("Calculated BMR: %s, TDEE: %s", profile["bmr"], profile["tdee"])
        return profile

    def update_profile(self, db: Session, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply the allowed profile fields present in `data`."""
        user = get_or_404(db, models.User, user_id, "User")
        for name, value in data.items():
            if name in PROFILE_FIELDS:
                setattr(user, name, value)
        db.commit()
        logger.info("Profile updated for user %s: %s", user_id, sorted(data))
        return self.get_profile(db, user_id)

    def get_calorie_target(self, db: Session, user_id: int, today: Optional[date] = None) -> Dict[str, Any]:
        """Daily calorie target and macros for the active weight goal.

        Without a dated goal the target is TDEE.

        Raises:
            NotFoundError: If the user does not exist.
            ProfileIncompleteError: If BMR/TDEE cannot be computed.
        """
        user = get_or_404(db, models.User, user_id, "User")
        nutrition_calculator.require_biometrics(user)
        bmr = nutrition_calculator.calculate_bmr(user.weight, user.height, user.age, user.gender)
        tdee = nutrition_calculator.calculate_tdee(bmr, user.activity_level)

        goal = bmi_service.get_active_weight_goal(db, user_id)
        target = tdee
        if goal is not None and goal["target_date"] is not None:
            target = nutrition_calculator.calculate_daily_calorie_target(
                tdee, user.weight, goal["target_weight"], goal["target_date"], user.gender, today=today
            )
        return {
            "bmr": bmr,
            "tdee": tdee,
            "daily_calorie_target": target,
            "target_weight": goal["target_weight"] if goal else None,
            "target_date": goal["target_date"] if goal else None,
            "macros": nutrition_calculator.calculate_macros(target),
        }

    def recalculate_nutrition_targets(self, db: Session, user_id: int) -> models.DailyNutritionTarget:
        user = get_or_404(db, models.User, user_id, "User")
        return bmi_service.recalculate_nutrition_targets(db, user)

    def get_current_nutrition_target(self, db: Session, user_id: int) -> models.DailyNutritionTarget:
        get_or_404(db, models.User, user_id, "User")
        target = active_nutrition_target(db, user_id, utc_today())
        if target is None:
            raise NotFoundError("nutrition target")
        return target

    def get_dashboard(self, db: Session, user_id: int, day: Union[str, date],
                      range: str = "week", month: Optional[str] = None) -> Dict[str, Any]:
        """Calories in/out for `day` and the week or month calorie tracker.

        Raises:
            InvalidDateError: If `day` is not DD-MM-YYYY or `month` is not YYYY-MM.
            ValidationError: If `range` is not "week" or "month".
        """
        if range not in DASHBOARD_RANGES:
            raise ValidationError("range must be 'week' or 'month'", field="range")
        day = parse_date(day)
        profile = self.get_profile(db, user_id)
        lookup = meal_service.calorie_lookup(db, user_id)

        if range == "month":
            year, month_num = parse_month(month) if month else (day.year, day.month)
            buckets = build_monthly_buckets(year, month_num, lookup)
        else:
            buckets = build_weekly_buckets(day, lookup)

        meals = UserScopedRepository(models.UserMeal, db).on_date(user_id, day)
        activities = UserScopedRepository(models.UserActivity, db).on_date(user_id, day)
        consumed = sum(m.total_calories or 0 for m in meals)
        burned = sum(a.calories_burned for a in activities)
        bmr = profile["bmr"] or 0
        tdee = profile["tdee"] or 0
        targets = active_nutrition_target(db, user_id, day)

        latest_bmi = bmi_service.get_history(db, user_id, limit=1)
        weight_goal = bmi_service.get_active_weight_goal(db, user_id)
        if weight_goal is not None:
            weight_goal["start_date"] = format_date(weight_goal["start_date"])
            weight_goal["target_date"] = format_date(weight_goal["target_date"])

        logger.info("Dashboard for user %s on %s (%s)", user_id, day, range)
        return {
            "user": {
                "name": profile["name"],
                "weight": profile["weight"],
                "height": profile["height"],
                "bmr": profile["bmr"],
                "tdee": profile["tdee"],
            },
            "calories": {
                "consumed": consumed,
                "burned_from_activities": burned,
                "bmr": bmr,
                "tdee": tdee,
                "net": consumed - (bmr + burned),
                "target": targets.calories if targets else tdee,
            },
            "activities": {
                "count": len(activities),
                "total_duration": sum(a.duration for a in activities),
                "total_calories_burned": burned,
            },
            "weight_goal": weight_goal,
            "latest_bmi": {
                "bmi": latest_bmi[0].bmi,
                "status": latest_bmi[0].status.value,
                "recorded_at": latest_bmi[0].recorded_at.isoformat(),
            } if latest_bmi else None,
            "date": format_date(day),
            "range": range,
            "calories_tracker": [bucket.as_dict() for bucket in buckets],
        }


user_service = UserService()
__all__ = ["UserService", "user_service"]
