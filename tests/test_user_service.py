"""Tests for profiles, goal-based calorie targets and the dashboard."""

from datetime import date, timedelta

import pytest

from core.enums import ActivityLevel
from core.exceptions import InvalidDateError, NotFoundError, ProfileIncompleteError, ValidationError
from database import models
from services.activity_service import activity_service
from services.bmi_service import bmi_service
from services.meal_service import meal_service
from services.user_service import user_service


def test_profile_includes_bmr_and_tdee(db, user):
    profile = user_service.get_profile(db, user.id)
    assert profile["bmr"] == 1649
    assert profile["tdee"] == 1979


def test_incomplete_profile_has_no_derived_values(db, bare_user):
    profile = user_service.get_profile(db, bare_user.id)
    assert profile["bmr"] is None and profile["tdee"] is None


def test_unknown_user(db):
    with pytest.raises(NotFoundError):
        user_service.get_profile(db, 404)


def test_update_profile_ignores_unknown_fields(db, user):
    profile = user_service.update_profile(db, user.id, {
        "activity_level": ActivityLevel.MODERATELY_ACTIVE,
        "email": "hijack@example.com",
    })
    assert profile["tdee"] == 2556  # 1649 * 1.55
    assert profile["email"] == "alex@example.com"


def test_duplicate_email_rejected(db, user):
    with pytest.raises(ValidationError):
        user_service.create_user(db, {"email": user.email, "name": "Other"})


def test_calorie_target_requires_complete_profile(db, bare_user):
    with pytest.raises(ProfileIncompleteError):
        user_service.get_calorie_target(db, bare_user.id)


def test_calorie_target_without_goal_is_tdee(db, user):
    result = user_service.get_calorie_target(db, user.id)
    assert result["daily_calorie_target"] == 1979
    assert result["target_date"] is None
    assert result["macros"] == {"protein": 148, "carbohydrates": 198, "fat": 66}


def test_calorie_target_with_dated_goal(db, user):
    today = date(2026, 10, 19)
    bmi_service.create_weight_goal(db, user.id, 70, 68, today, today + timedelta(days=70))
    result = user_service.get_calorie_target(db, user.id, today=today)
    # 1979 - 2*7700/70 = 1759
    assert result["daily_calorie_target"] == 1759
    assert result["target_weight"] == 68


def test_dashboard_week(db, user):
    day = date(2026, 10, 19)
    apple = db.query(models.Food).filter_by(name="Apple").one()
    jogging = db.query(models.ActivityType).filter_by(name="Jogging").one()
    meal_service.create_meal(db, user.id, apple.id, "SNACK", day, quantity=2)
    meal_service.create_meal(db, user.id, apple.id, "SNACK", date(2026, 10, 18))
    activity_service.create_activity(db, user.id, jogging.id, day, 30)

    dashboard = user_service.get_dashboard(db, user.id, "19-10-2026")
    assert dashboard["date"] == "19-10-2026"
    assert dashboard["calories"]["consumed"] == 190
    assert dashboard["calories"]["burned_from_activities"] == 245
    assert dashboard["calories"]["net"] == 190 - (1649 + 245)
    assert dashboard["calories"]["target"] == 1979
    assert dashboard["activities"] == {"count": 1, "total_duration": 30, "total_calories_burned": 245}

    tracker = dashboard["calories_tracker"]
    assert len(tracker) == 7
    assert tracker[0] == {"label": "Sun", "date": "18-10-2026", "calories": 95}
    assert tracker[1] == {"label": "Mon", "date": "19-10-2026", "calories": 190}


def test_dashboard_month(db, user):
    apple = db.query(models.Food).filter_by(name="Apple").one()
    meal_service.create_meal(db, user.id, apple.id, "SNACK", date(2026, 9, 30))
    meal_service.create_meal(db, user.id, apple.id, "SNACK", date(2026, 10, 31))

    dashboard = user_service.get_dashboard(db, user.id, "19-10-2026", range="month")
    assert [b["label"] for b in dashboard["calories_tracker"]][-1] == "Week 5"
    assert dashboard["calories_tracker"][-1]["calories"] == 95

    september = user_service.get_dashboard(db, user.id, "19-10-2026", range="month", month="2026-09")
    assert september["calories_tracker"][-1] == {"label": "Week 5", "start": "29-09-2026", "end": "30-09-2026", "calories": 95}


def test_dashboard_rejects_bad_input(db, user):
    with pytest.raises(InvalidDateError):
        user_service.get_dashboard(db, user.id, "2026-10-19")
    with pytest.raises(ValidationError):
        user_service.get_dashboard(db, user.id, "19-10-2026", range="year")


def test_dashboard_tolerates_incomplete_profile(db, bare_user):
    dashboard = user_service.get_dashboard(db, bare_user.id, "19-10-2026")
    assert dashboard["calories"]["bmr"] == 0
    assert dashboard["calories"]["target"] == 0
    assert dashboard["latest_bmi"] is None
