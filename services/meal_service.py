"""Meal logging against the local food database."""

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from core.exceptions import ValidationError
from core.logger import get_logger
from core.repository import UserScopedRepository, get_or_404, save
from database import models
from services.notification_service import notification_service

logger = get_logger("services.meal_service")


def active_nutrition_target(db: Session, user_id: int, day: date) -> Optional[models.DailyNutritionTarget]:
    """Latest active nutrition target already in effect on `day`."""
    return (
        UserScopedRepository(models.DailyNutritionTarget, db).query(user_id)
        .filter(
            models.DailyNutritionTarget.is_active.is_(True),
            models.DailyNutritionTarget.effective_date <= day,
        )
        .order_by(models.DailyNutritionTarget.effective_date.desc(), models.DailyNutritionTarget.id.desc())
        .first()
    )


class MealService:
    """Class-based meal service."""

    def search_foods(self, db: Session, query: str = "", page: int = 1, limit: int = 20) -> List[models.Food]:
        q = db.query(models.Food)
        if query:
            q = q.filter(models.Food.name.ilike(f"%{query}%"))
        return q.order_by(models.Food.name.asc()).offset((page - 1) * limit).limit(limit).all()

    def create_meal(self, db: Session, user_id: int, food_id: int, meal_type: str,
                    day: date, quantity: float = 1) -> models.UserMeal:
        """Log `quantity` servings of a food and check the daily calorie goal.

        Raises:
            NotFoundError: If the user or food does not exist.
            ValidationError: If the meal type is unknown.
        """
        get_or_404(db, models.User, user_id, "User")
        food = get_or_404(db, models.Food, food_id, "Food")
        mtype = db.query(models.MealType).filter(models.MealType.name == meal_type).first()
        if mtype is None:
            raise ValidationError(f"Unknown meal type '{meal_type}'", field="meal_type")

        meal = save(db, models.UserMeal(
            user_id=user_id,
            meal_type_id=mtype.id,
            food_id=food.id,
            date=day,
            quantity=quantity,
            total_calories=round(food.calories * quantity, 1),
            protein=round(food.protein * quantity, 1),
            carbs=round(food.carbs * quantity, 1),
            fat=round(food.fat * quantity, 1),
        ))
        logger.info("Meal logged for user %s on %s: %s x%s", user_id, day, food.name, quantity)

        self._check_daily_achievement(db, user_id, day)
        return meal

    def _check_daily_achievement(self, db: Session, user_id: int, day: date) -> None:
        target = active_nutrition_target(db, user_id, day)
        if target is None:
            return
        consumed = sum(m.total_calories for m in UserScopedRepository(models.UserMeal, db).on_date(user_id, day))
        notification_service.send_daily_calorie_achievement(db, user_id, day, consumed, target.calories)

    def get_meals(self, db: Session, user_id: int, start: date, end: date) -> List[models.UserMeal]:
        return UserScopedRepository(models.UserMeal, db).in_range(user_id, start, end)

    def calorie_lookup(self, db: Session, user_id: int):
        """Return a ``(start, end) -> [(date, calories)]`` lookup for the dashboard aggregator."""
        def lookup(start: date, end: date) -> List[Tuple[date, float]]:
            rows = (
                db.query(models.UserMeal.date, models.UserMeal.total_calories)
                .filter(
                    models.UserMeal.user_id == user_id,
                    models.UserMeal.date >= start,
                    models.UserMeal.date <= end,
                )
                .all()
            )
            return [(meal_date, calories) for meal_date, calories in rows]
        return lookup

    def delete_meal(self, db: Session, user_id: int, meal_id: int) -> None:
        UserScopedRepository(models.UserMeal, db, "Meal").delete(user_id, meal_id)
        logger.info("Meal %s deleted for user %s", meal_id, user_id)

    def get_daily_summary(self, db: Session, user_id: int, day: date) -> Dict[str, Any]:
        meals = UserScopedRepository(models.UserMeal, db).on_date(user_id, day)
        summary = {"calories": 0, "protein": 0, "carbohydrates": 0, "fat": 0}
        for meal in meals:
            summary["calories"] += meal.total_calories or 0
            summary["protein"] += meal.protein or 0
            summary["carbohydrates"] += meal.carbs or 0
            summary["fat"] += meal.fat or 0
        return {
            "summary": summary,
            "targets": active_nutrition_target(db, user_id, day),
            "meals": meals,
        }


meal_service = MealService()
__all__ = ["MealService", "meal_service", "active_nutrition_target"]
