"""Tests for meal and activity logging and their daily summaries."""

from datetime import date

import pytest

from core.exceptions import NotFoundError, ValidationError
from database import models
from services.activity_service import activity_service
from services.meal_service import meal_service

DAY = date(2026, 10, 19)


def _food(db, name):
    return db.query(models.Food).filter_by(name=name).one()


def _activity_type(db, name):
    return db.query(models.ActivityType).filter_by(name=name).one()


def test_reference_data_is_seeded(db):
    assert db.query(models.MealType).count() == 4
    assert db.query(models.Food).count() > 0
    assert _activity_type(db, "Jogging").met_value == 7.0


def test_search_foods_is_case_insensitive(db):
    names = [f.name for f in meal_service.search_foods(db, "RICE")]
    assert names == ["Brown rice, cooked", "White rice, cooked"]


def test_create_meal_scales_nutrition_by_quantity(db, user):
    chicken = _food(db, "Chicken breast, grilled")
    meal = meal_service.create_meal(db, user.id, chicken.id, "LUNCH", DAY, quantity=1.5)
    assert meal.total_calories == 247.5
    assert meal.protein == 46.5
    assert meal.meal_type.name == "LUNCH"


def test_create_meal_rejects_unknown_food_and_meal_type(db, user):
    with pytest.raises(NotFoundError):
        meal_service.create_meal(db, user.id, 9999, "LUNCH", DAY)
    with pytest.raises(ValidationError):
        meal_service.create_meal(db, user.id, _food(db, "Apple").id, "BRUNCH", DAY)


def test_meal_daily_summary_and_calorie_lookup(db, user):
    apple = _food(db, "Apple")
    banana = _food(db, "Banana")
    meal_service.create_meal(db, user.id, apple.id, "SNACK", DAY)
    meal_service.create_meal(db, user.id, banana.id, "BREAKFAST", DAY, quantity=2)
    meal_service.create_meal(db, user.id, banana.id, "BREAKFAST", date(2026, 10, 20))

    daily = meal_service.get_daily_summary(db, user.id, DAY)
    assert daily["summary"]["calories"] == 95 + 210
    assert len(daily["meals"]) == 2
    assert daily["targets"] is None

    lookup = meal_service.calorie_lookup(db, user.id)
    assert sorted(lookup(DAY, date(2026, 10, 20))) == [(DAY, 95), (DAY, 210), (date(2026, 10, 20), 105)]


def test_meals_are_scoped_to_their_owner(db, user, bare_user):
    meal = meal_service.create_meal(db, user.id, _food(db, "Apple").id, "SNACK", DAY)
    assert meal_service.get_meals(db, bare_user.id, DAY, DAY) == []
    with pytest.raises(NotFoundError):
        meal_service.delete_meal(db, bare_user.id, meal.id)
    meal_service.delete_meal(db, user.id, meal.id)
    assert meal_service.get_meals(db, user.id, DAY, DAY) == []


def test_activity_calories_use_met_and_weight(db, user):
    jogging = _activity_type(db, "Jogging")
    activity = activity_service.create_activity(db, user.id, jogging.id, DAY, 30)
    assert activity.calories_burned == 245


def test_activity_requires_user_weight(db, bare_user):
    with pytest.raises(ValidationError) as exc_info:
        activity_service.create_activity(db, bare_user.id, _activity_type(db, "Yoga").id, DAY, 30)
    assert exc_info.value.details == {"field": "weight"}


def test_activity_daily_summary_groups_by_category(db, user):
    activity_service.create_activity(db, user.id, _activity_type(db, "Jogging").id, DAY, 30)
    activity_service.create_activity(db, user.id, _activity_type(db, "Swimming").id, DAY, 60)
    activity_service.create_activity(db, user.id, _activity_type(db, "Yoga").id, DAY, 20)

    summary = activity_service.get_daily_summary(db, user.id, DAY)["summary"]
    assert summary["activity_count"] == 3
    assert summary["total_duration"] == 110
    # 245 + 420 + 58
    assert summary["total_calories_burned"] == 723
    assert summary["by_category"]["CARDIO"] == {"duration": 90, "calories_burned": 665, "count": 2}
    assert summary["by_category"]["FLEXIBILITY"]["count"] == 1


def test_activity_types_filter_by_category(db):
    types = activity_service.get_activity_types(db, "flexibility")
    assert {t.name for t in types} == {"Yoga", "Pilates", "Stretching"}
