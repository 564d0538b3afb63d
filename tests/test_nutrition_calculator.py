"""Unit tests for the metabolic calculator and macro allocator."""

from datetime import date, timedelta

import pytest

from core.enums import ActivityLevel, BMIStatus, Sex
from core.exceptions import InvalidDateError, ProfileIncompleteError
from services.nutrition_calculator import NutritionCalculator, round_half_up

calc = NutritionCalculator()
TODAY = date(2026, 10, 19)


def test_bmr_mifflin_st_jeor_male():
    # 700 + 1093.75 - 150 + 5 = 1648.75
    assert calc.calculate_bmr(70, 175, 30, Sex.MALE) == 1649


def test_bmr_female_and_string_sex():
    # 600 + 1031.25 - 150 - 161 = 1320.25
    assert calc.calculate_bmr(60, 165, 30, Sex.FEMALE) == 1320
    assert calc.calculate_bmr(60, 165, 30, "female") == 1320
    assert calc.calculate_bmr(70, 175, 30, "MALE") == 1649


def test_bmr_is_linear_in_weight_and_height():
    base = calc.calculate_bmr(70, 180, 40, Sex.MALE)
    assert calc.calculate_bmr(71, 180, 40, Sex.MALE) - base == 10
    assert calc.calculate_bmr(70, 184, 40, Sex.MALE) - base == 25


def test_tdee_sedentary():
    assert calc.calculate_tdee(1649, ActivityLevel.SEDENTARY) == 1979
    assert calc.calculate_tdee(1649, "SEDENTARY") == 1979


@pytest.mark.parametrize("level, factor", [
    (ActivityLevel.LIGHTLY, 1.375),
    (ActivityLevel.MODERATELY_ACTIVE, 1.55),
    (ActivityLevel.VERY_ACTIVE, 1.725),
    (ActivityLevel.EXTRA_ACTIVE, 1.9),
])
def test_tdee_multipliers(level, factor):
    assert calc.calculate_tdee(2000, level) == round_half_up(2000 * factor)


def test_tdee_unknown_or_missing_level_falls_back_to_sedentary():
    assert calc.calculate_tdee(1649, "COUCH_POTATO") == 1979
    assert calc.calculate_tdee(1649, None) == 1979


def test_tdee_never_below_bmr():
    for bmr in (1100, 1649, 2300):
        for level in ActivityLevel:
            assert calc.calculate_tdee(bmr, level) >= bmr


def test_bmi_one_decimal_and_status():
    bmi = calc.calculate_bmi(70.2, 175.5)
    assert bmi == 22.8
    assert calc.get_bmi_status(bmi) == BMIStatus.NORMAL


def test_bmi_rounds_exact_halves_up():
    # 89 / 2.0**2 = 22.25 exactly
    assert calc.calculate_bmi(89, 200) == 22.3
    assert calc.calculate_bmi(81, 200) == 20.3  # 20.25


@pytest.mark.parametrize("bmi, status", [
    (18.4, BMIStatus.UNDERWEIGHT),
    (18.5, BMIStatus.NORMAL),
    (24.9, BMIStatus.NORMAL),
    (25.0, BMIStatus.OVERWEIGHT),
    (29.9, BMIStatus.OVERWEIGHT),
    (30.0, BMIStatus.OBESE),
])
def test_bmi_status_thresholds(bmi, status):
    assert calc.get_bmi_status(bmi) == status


def test_activity_calories():
    assert calc.calculate_activity_calories(7.0, 70, 30) == 245
    assert calc.calculate_activity_calories(3.5, 80, 45) == 210


def test_daily_target_spreads_deficit_over_remaining_days():
    # 5 kg * 7700 / 50 days = 770 kcal/day
    target = calc.calculate_daily_calorie_target(2500, 80, 75, TODAY + timedelta(days=50), Sex.MALE, today=TODAY)
    assert target == 1730


def test_daily_target_accepts_wire_date_string():
    target = calc.calculate_daily_calorie_target(2500, 80, 75, "08-12-2026", Sex.MALE, today=TODAY)
    assert target == 1730


def test_daily_target_rejects_iso_date():
    with pytest.raises(InvalidDateError):
        calc.calculate_daily_calorie_target(2500, 80, 75, "2026-12-08", Sex.MALE, today=TODAY)


def test_daily_target_due_or_overdue_returns_tdee():
    assert calc.calculate_daily_calorie_target(2500, 80, 75, TODAY, Sex.MALE, today=TODAY) == 2500
    assert calc.calculate_daily_calorie_target(2500, 80, 75, TODAY - timedelta(days=3), Sex.MALE, today=TODAY) == 2500


def test_daily_target_higher_floor_wins():
    # unclamped: 3000 - 10*7700/20 = -850; sex floor 1500, deficit floor 2000
    target = calc.calculate_daily_calorie_target(3000, 90, 80, TODAY + timedelta(days=20), Sex.MALE, today=TODAY)
    assert target == 2000


def test_daily_target_female_minimum():
    # unclamped: 1500 - 5*7700/77 = 1000; floors 1200 and 500
    target = calc.calculate_daily_calorie_target(1500, 65, 60, TODAY + timedelta(days=77), Sex.FEMALE, today=TODAY)
    assert target == 1200


def test_daily_target_weight_gain_adds_surplus():
    # 5 kg * 7700 / 100 days = 385 kcal/day surplus
    target = calc.calculate_daily_calorie_target(2000, 60, 65, TODAY + timedelta(days=100), Sex.MALE, today=TODAY)
    assert target == 2385


def test_macros_default_split():
    assert calc.calculate_macros(2000) == {"protein": 150, "carbohydrates": 200, "fat": 67}
    assert calc.calculate_macros(2000, 0.3, 0.4, 0.3) == {"protein": 150, "carbohydrates": 200, "fat": 67}


def test_macros_ratios_are_not_validated():
    macros = calc.calculate_macros(2000, 0.5, 0.5, 0.5)
    assert macros == {"protein": 250, "carbohydrates": 250, "fat": 111}


def test_nutrition_target_band():
    band = calc.calculate_nutrition_targets(2400)
    assert band.as_dict() == {
        "calories_min": 2160,
        "calories_max": 2640,
        "protein_min": 81,
        "protein_max": 132,
        "carb_min": 270,
        "carb_max": 396,
        "fat_min": 48,
        "fat_max": 88,
    }


def test_calculations_are_repeatable():
    args = (70, 175, 30, Sex.MALE)
    assert calc.calculate_bmr(*args) == calc.calculate_bmr(*args)
    assert calc.calculate_nutrition_targets(1979) == calc.calculate_nutrition_targets(1979)


def test_require_biometrics_lists_missing_fields(bare_user):
    with pytest.raises(ProfileIncompleteError) as exc_info:
        calc.require_biometrics(bare_user)
    assert exc_info.value.status_code == 412
    assert set(exc_info.value.details["missing_fields"]) == {"weight", "height", "age", "gender", "activity_level"}


def test_round_half_up():
    assert round_half_up(1648.5) == 1649
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_daily_target_counts_days_from_utc_today(monkeypatch):
    monkeypatch.setattr("services.nutrition_calculator.utc_today", lambda: TODAY)
    target = calc.calculate_daily_calorie_target(2500, 80, 75, TODAY + timedelta(days=50), Sex.MALE)
    assert target == 1730
