"""Metabolic and macro calculations.

Provides BMR/TDEE/BMI, activity calorie burn, goal-based calorie targets,
macro allocation and the nutrition target band stored after each BMI
recalculation. Every method is a pure function of its arguments.

Integer results round halves up (``1648.5 -> 1649``) to match the values
the mobile clients already display.
"""

import math
from dataclasses import dataclass, asdict
from datetime import date
from typing import Dict, Optional, Union

from core.dates import parse_date, utc_today
from core.enums import ActivityLevel, BMIStatus, Sex
from core.exceptions import ProfileIncompleteError
from core.logger import get_logger

logger = get_logger("services.nutrition_calculator")

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS[ActivityLevel.SEDENTARY]

KCAL_PER_KG = 7700
MAX_DAILY_DEFICIT = 1000
MIN_CALORIES = {Sex.MALE: 1500, Sex.FEMALE: 1200}

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARB = 4
KCAL_PER_GRAM_FAT = 9


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _coerce_enum(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        return None


@dataclass(frozen=True)
class NutritionTargetRange:
    """Daily guidance band derived from TDEE."""

    calories_min: int
    calories_max: int
    protein_min: int
    protein_max: int
    carb_min: int
    carb_max: int
    fat_min: int
    fat_max: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmr(self, weight_kg: float, height_cm: float, age: int, sex: Union[Sex, str]) -> int:
        """Calculate BMR (kcal/day) with the Mifflin-St Jeor equation.

        Anything other than MALE is treated as FEMALE. Inputs are assumed to
        satisfy the profile ranges; see `require_biometrics`.
        """
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        if _coerce_enum(Sex, sex) == Sex.MALE:
            bmr = base + 5
        else:
            bmr = base - 161
        return round_half_up(bmr)

    def calculate_tdee(self, bmr: float, activity_level: Optional[Union[ActivityLevel, str]]) -> int:
        """Scale BMR by the activity multiplier.

        An unknown or missing activity level uses the sedentary factor (1.2).
        This is intentional: the lowest multiplier never overstates energy
        expenditure.
        """
        level = _coerce_enum(ActivityLevel, activity_level)
        multiplier = ACTIVITY_MULTIPLIERS.get(level, DEFAULT_ACTIVITY_MULTIPLIER)
        if level is None:
            logger.debug("Unknown activity level %r, using sedentary multiplier", activity_level)
        val = round_half_up(bmr * multiplier)
        logger.debug("TDEE calculated: %s", val)
        return val

    def calculate_bmi(self, weight_kg: float, height_cm: float) -> float:
        """Calculate BMI from weight in kg and height in cm, to one decimal."""
        h_m = height_cm / 100.0
        return round_half_up(weight_kg / (h_m * h_m) * 10) / 10

    def get_bmi_status(self, bmi: float) -> BMIStatus:
        """Classify a BMI value; a value on a threshold belongs to the higher class."""
        if bmi < 18.5:
            return BMIStatus.UNDERWEIGHT
        if bmi < 25:
            return BMIStatus.NORMAL
        if bmi < 30:
            return BMIStatus.OVERWEIGHT
        return BMIStatus.OBESE

    def calculate_activity_calories(self, met_value: float, weight_kg: float, duration_minutes: float) -> int:
        """Calories burned for an activity: MET x kg x hours."""
        return round_half_up(met_value * weight_kg * (duration_minutes / 60))

    def calculate_daily_calorie_target(
        self,
        tdee: int,
        current_weight_kg: float,
        target_weight_kg: float,
        target_date: Union[date, str],
        sex: Union[Sex, str],
        today: Optional[date] = None,
    ) -> int:
        """Recommended daily calories to reach `target_weight_kg` by `target_date`.

        A goal that is due today or overdue leaves TDEE unchanged. Otherwise
        the total weight delta (7700 kcal/kg) is spread over the remaining
        days and subtracted from TDEE. Two floors are then applied in turn:
        the sex minimum (1500 male, 1200 female) and ``tdee - 1000``. Both
        are `max()` calls, so whichever floor is higher wins.
        """
        today = today or utc_today()
        days_to_target = (parse_date(target_date, field="target_date") - today).days
        if days_to_target <= 0:
            return tdee

        weight_difference = current_weight_kg - target_weight_kg
        daily_delta = weight_difference * KCAL_PER_KG / days_to_target
        recommended = tdee - daily_delta

        min_calories = MIN_CALORIES.get(_coerce_enum(Sex, sex), MIN_CALORIES[Sex.FEMALE])
        recommended = max(recommended, min_calories)
        recommended = max(recommended, tdee - MAX_DAILY_DEFICIT)
        val = round_half_up(recommended)
        logger.debug("Daily calorie target over %s days: %s", days_to_target, val)
        return val

    def calculate_macros(
        self,
        total_calories: float,
        protein_ratio: float = 0.30,
        carb_ratio: float = 0.40,
        fat_ratio: float = 0.30,
    ) -> Dict[str, int]:
        """Allocate macronutrient grams from a calorie budget.

        Ratios are used as given; they are not required to sum to 1.
        """
        macros = {
            'protein': round_half_up(total_calories * protein_ratio / KCAL_PER_GRAM_PROTEIN),
            'carbohydrates': round_half_up(total_calories * carb_ratio / KCAL_PER_GRAM_CARB),
            'fat': round_half_up(total_calories * fat_ratio / KCAL_PER_GRAM_FAT),
        }
        logger.debug("Macros calculated: %s", macros)
        return macros

    def calculate_nutrition_targets(self, tdee: float) -> NutritionTargetRange:
        """Nutrition band around TDEE: calories ±10%, macros as calorie shares.

        Protein 15-20%, carbohydrates 50-60%, fat 20-30%. Lower gram bounds
        use the lower calorie bound and upper bounds the upper one.
        """
        calories_min = round_half_up(tdee * 0.9)
        calories_max = round_half_up(tdee * 1.1)
        return NutritionTargetRange(
            calories_min=calories_min,
            calories_max=calories_max,
            protein_min=round_half_up(calories_min * 0.15 / KCAL_PER_GRAM_PROTEIN),
            protein_max=round_half_up(calories_max * 0.20 / KCAL_PER_GRAM_PROTEIN),
            carb_min=round_half_up(calories_min * 0.50 / KCAL_PER_GRAM_CARB),
            carb_max=round_half_up(calories_max * 0.60 / KCAL_PER_GRAM_CARB),
            fat_min=round_half_up(calories_min * 0.20 / KCAL_PER_GRAM_FAT),
            fat_max=round_half_up(calories_max * 0.30 / KCAL_PER_GRAM_FAT),
        )

    def require_biometrics(self, user) -> None:
        """Raise `ProfileIncompleteError` unless BMR and TDEE can be computed for `user`."""
        missing = [
            name for name in ("weight", "height", "age", "gender", "activity_level")
            if getattr(user, name, None) in (None, "")
        ]
        if missing:
            raise ProfileIncompleteError(missing)

    def has_biometrics(self, user) -> bool:
        try:
            self.require_biometrics(user)
        except ProfileIncompleteError:
            return False
        return True


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "NutritionTargetRange", "nutrition_calculator", "round_half_up"]
