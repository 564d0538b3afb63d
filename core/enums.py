"""Enumerations shared by the ORM models, schemas and calculators."""

import enum


class Sex(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class ActivityLevel(str, enum.Enum):
    SEDENTARY = "SEDENTARY"
    LIGHTLY = "LIGHTLY"
    MODERATELY_ACTIVE = "MODERATELY_ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"
    EXTRA_ACTIVE = "EXTRA_ACTIVE"


class BMIStatus(str, enum.Enum):
    UNDERWEIGHT = "UNDERWEIGHT"
    NORMAL = "NORMAL"
    OVERWEIGHT = "OVERWEIGHT"
    OBESE = "OBESE"


class NotificationType(str, enum.Enum):
    DAILY_CALORIE_ACHIEVEMENT = "DAILY_CALORIE_ACHIEVEMENT"
    MEAL_REMINDER = "MEAL_REMINDER"
    WEIGHT_GOAL_PROGRESS = "WEIGHT_GOAL_PROGRESS"
    SYSTEM = "SYSTEM"
