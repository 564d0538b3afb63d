"""SQLAlchemy ORM models for the FitTrack API.

Models are plain declarative classes with no business logic; calculations
live in `services.nutrition_calculator`. Calendar days are stored as `Date`
columns and only formatted as DD-MM-YYYY at the API boundary.
"""

from sqlalchemy import (
    Boolean, Column, Date, DateTime, Enum, Float, ForeignKey, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

from core.enums import ActivityLevel, BMIStatus, NotificationType, Sex

Base = declarative_base()


class User(Base):
    """Application user and the biometric fields BMR/TDEE are computed from."""

    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=True)
    gender = Column(Enum(Sex), nullable=True)
    height = Column(Float, nullable=True)
    weight = Column(Float, nullable=True)
    activity_level = Column(Enum(ActivityLevel), nullable=True)
    fcm_token = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class BMIRecord(Base):
    """A BMI measurement, snapshotting the height and weight it was computed from."""

    __tablename__ = "bmi_records"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    height = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)
    bmi = Column(Float, nullable=False)
    status = Column(Enum(BMIStatus), nullable=False)
    recorded_at = Column(DateTime, default=datetime.utcnow)


class WeightGoal(Base):
    __tablename__ = "weight_goals"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    start_weight = Column(Float, nullable=False)
    target_weight = Column(Float, nullable=False)
    start_date = Column(Date, nullable=False)
    target_date = Column(Date, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class DailyNutritionTarget(Base):
    """Nutrition guidance band in effect from `effective_date`."""

    __tablename__ = "daily_nutrition_targets"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    calories = Column(Integer, nullable=False)
    calories_min = Column(Integer, nullable=False)
    calories_max = Column(Integer, nullable=False)
    protein_min = Column(Integer, nullable=False)
    protein_max = Column(Integer, nullable=False)
    carb_min = Column(Integer, nullable=False)
    carb_max = Column(Integer, nullable=False)
    fat_min = Column(Integer, nullable=False)
    fat_max = Column(Integer, nullable=False)
    effective_date = Column(Date, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class Food(Base):
    """Food database entry; nutrition values are per serving."""

    __tablename__ = "foods"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    serving_description = Column(String, nullable=False)
    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fat = Column(Float, nullable=False)


class MealType(Base):
    __tablename__ = "meal_types"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    order_index = Column(Integer, nullable=False)


class UserMeal(Base):
    """A logged meal: `quantity` servings of a food, with totals computed at log time."""

    __tablename__ = "user_meals"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    meal_type_id = Column(Integer, ForeignKey('meal_types.id'), nullable=False)
    food_id = Column(Integer, ForeignKey('foods.id'), nullable=False)
    date = Column(Date, nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    total_calories = Column(Float, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    meal_type = relationship("MealType")
    food = relationship("Food")


class ActivityType(Base):
    """Reference table of activities and their MET values."""

    __tablename__ = "activity_types"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    category = Column(String, nullable=False)
    met_value = Column(Float, nullable=False)


class UserActivity(Base):
    __tablename__ = "user_activities"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    activity_type_id = Column(Integer, ForeignKey('activity_types.id'), nullable=False)
    date = Column(Date, nullable=False, index=True)
    duration = Column(Float, nullable=False)  # minutes
    calories_burned = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    activity_type = relationship("ActivityType")


class Notification(Base):
    """In-app notification; `dedup_key` makes once-per-day notifications idempotent."""

    __tablename__ = "notifications"
    __table_args__ = (UniqueConstraint("dedup_key", name="uq_notifications_dedup_key"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    type = Column(Enum(NotificationType), nullable=False)
    title = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    data = Column(Text, nullable=True)  # JSON-encoded
    is_read = Column(Boolean, default=False, nullable=False)
    dedup_key = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
