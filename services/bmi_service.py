"""BMI records, nutrition target recalculation and weight goals."""

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from core.dates import utc_today
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import UserScopedRepository, get_or_404, save
from database import models
from services.notification_service import notification_service
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("services.bmi_service")

ANALYSIS_WINDOW = 30


class BMIService:
    """Class-based BMI and weight goal service."""

    def calculate_and_save(self, db: Session, user_id: int, weight: float, height: float) -> models.BMIRecord:
        """Record a BMI measurement and sync the user's height and weight.

        When the profile has all biometrics, a fresh nutrition target band is
        stored as the active one from today. An active weight goal gets a
        progress notification.
        """
        user = get_or_404(db, models.User, user_id, "User")
        bmi = nutrition_calculator.calculate_bmi(weight, height)
        status = nutrition_calculator.get_bmi_status(bmi)

        record = models.BMIRecord(user_id=user_id, height=height, weight=weight, bmi=bmi, status=status)
        db.add(record)
        user.height = height
        user.weight = weight
        db.commit()
        db.refresh(record)
        logger.info("BMI calculated for user %s: %s (%s)", user_id, bmi, status.value)

        if nutrition_calculator.has_biometrics(user):
            self.recalculate_nutrition_targets(db, user)

        goal = self.get_active_weight_goal(db, user_id)
        if goal is not None:
            notification_service.send_weight_goal_progress(
                db, user_id, goal["current_weight"], goal["target_weight"], goal["progress"]
            )
        return record

    def recalculate_nutrition_targets(self, db: Session, user: models.User,
                                      effective_date: Optional[date] = None) -> models.DailyNutritionTarget:
        """Replace the user's active nutrition target with one derived from the current profile."""
        nutrition_calculator.require_biometrics(user)
        bmr = nutrition_calculator.calculate_bmr(user.weight, user.height, user.age, user.gender)
        tdee = nutrition_calculator.calculate_tdee(bmr, user.activity_level)
        band = nutrition_calculator.calculate_nutrition_targets(tdee)

        calories = tdee
        goal = self._active_goal(db, user.id)
        if goal is not None and goal.target_date is not None:
            calories = nutrition_calculator.calculate_daily_calorie_target(
                tdee, user.weight, goal.target_weight, goal.target_date, user.gender
            )

        UserScopedRepository(models.DailyNutritionTarget, db).query(user.id).filter(
            models.DailyNutritionTarget.is_active.is_(True)
        ).update({models.DailyNutritionTarget.is_active: False}, synchronize_session=False)
        target = models.DailyNutritionTarget(
            user_id=user.id,
            calories=calories,
            effective_date=effective_date or utc_today(),
            is_active=True,
            **band.as_dict(),
        )
        target = save(db, target)
        logger.info("Nutrition targets for user %s: %s-%s kcal", user.id, band.calories_min, band.calories_max)
        return target

    def get_history(self, db: Session, user_id: int, limit: int = 10) -> List[models.BMIRecord]:
        return (
            UserScopedRepository(models.BMIRecord, db).query(user_id)
            .order_by(models.BMIRecord.recorded_at.desc(), models.BMIRecord.id.desc())
            .limit(limit)
            .all()
        )

    def get_latest(self, db: Session, user_id: int) -> models.BMIRecord:
        records = self.get_history(db, user_id, limit=1)
        if not records:
            raise NotFoundError("BMI records")
        return records[0]

    def get_analysis(self, db: Session, user_id: int) -> Dict[str, Any]:
        """Trend, average and history over the most recent BMI records (oldest first)."""
        records = list(reversed(self.get_history(db, user_id, limit=ANALYSIS_WINDOW)))
        if not records:
            raise NotFoundError("BMI records")

        latest, oldest = records[-1], records[0]
        change = latest.bmi - oldest.bmi
        if change > 0:
            direction = "increasing"
        elif change < 0:
            direction = "decreasing"
        else:
            direction = "stable"

        return {
            "latest": latest,
            "trend": {
                "direction": direction,
                "change": round(abs(change), 1),
                "percentage": round(abs(change / oldest.bmi * 100), 2),
            },
            "average": round(sum(r.bmi for r in records) / len(records), 1),
            "history": records,
        }

    def create_weight_goal(self, db: Session, user_id: int, start_weight: float, target_weight: float,
                           start_date: date, target_date: Optional[date] = None) -> models.WeightGoal:
        """Create a new active goal; any previously active goal is deactivated."""
        get_or_404(db, models.User, user_id, "User")
        UserScopedRepository(models.WeightGoal, db).query(user_id).filter(
            models.WeightGoal.is_active.is_(True)
        ).update({models.WeightGoal.is_active: False}, synchronize_session=False)

        goal = save(db, models.WeightGoal(
            user_id=user_id,
            start_weight=start_weight,
            target_weight=target_weight,
            start_date=start_date,
            target_date=target_date,
            is_active=True,
        ))
        logger.info("Weight goal created for user %s", user_id)
        return goal

    def _active_goal(self, db: Session, user_id: int) -> Optional[models.WeightGoal]:
        return (
            UserScopedRepository(models.WeightGoal, db).query(user_id)
            .filter(models.WeightGoal.is_active.is_(True))
            .order_by(models.WeightGoal.id.desc())
            .first()
        )

    def get_active_weight_goal(self, db: Session, user_id: int) -> Optional[Dict[str, Any]]:
        """Active goal with progress measured against the latest BMI weight.

        Progress is clamped to 0-100. Returns None when there is no active goal.
        """
        goal = self._active_goal(db, user_id)
        if goal is None:
            return None

        history = self.get_history(db, user_id, limit=1)
        current_weight = history[0].weight if history else goal.start_weight
        span = goal.start_weight - goal.target_weight
        progress = (goal.start_weight - current_weight) / span * 100 if span else 100.0

        return {
            "id": goal.id,
            "start_weight": goal.start_weight,
            "target_weight": goal.target_weight,
            "start_date": goal.start_date,
            "target_date": goal.target_date,
            "is_active": goal.is_active,
            "current_weight": current_weight,
            "progress": min(max(progress, 0), 100),
            "weight_lost": round(goal.start_weight - current_weight, 1),
            "weight_remaining": round(current_weight - goal.target_weight, 1),
        }


bmi_service = BMIService()
__all__ = ["BMIService", "bmi_service"]
