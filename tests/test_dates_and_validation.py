"""Tests for DD-MM-YYYY parsing and the schema validation result."""

from datetime import date, datetime

import pytest

from core.dates import format_date, parse_date, parse_month
from core.exceptions import InvalidDateError, ValidationError
from core.validation import validate_payload
from schemas import UserUpdateRequest, WeightGoalCreateRequest


def test_parse_and_format_wire_date():
    assert parse_date("05-03-2026") == date(2026, 3, 5)
    assert format_date(date(2026, 3, 5)) == "05-03-2026"
    assert format_date(None) is None


def test_parse_date_passes_dates_through():
    assert parse_date(date(2026, 1, 2)) == date(2026, 1, 2)
    assert parse_date(datetime(2026, 1, 2, 23, 59)) == date(2026, 1, 2)


@pytest.mark.parametrize("value", ["2026-03-05", "5-3-2026", "31-02-2026", "05/03/2026", "", None, 20260305])
def test_parse_date_rejects_other_formats(value):
    with pytest.raises(InvalidDateError) as exc_info:
        parse_date(value)
    assert exc_info.value.status_code == 400
    assert "DD-MM-YYYY" in exc_info.value.message


def test_parse_month():
    assert parse_month("2026-10") == (2026, 10)
    with pytest.raises(InvalidDateError):
        parse_month("10-2026")
    with pytest.raises(InvalidDateError):
        parse_month("2026-13")


def test_validate_payload_returns_value():
    result = validate_payload(UserUpdateRequest, {"age": 31, "weight": 72.5})
    assert result.is_valid
    assert result.unwrap().age == 31


def test_validate_payload_collects_field_errors():
    result = validate_payload(UserUpdateRequest, {"age": 0, "height": 400, "gender": "OTHER"})
    assert not result.is_valid
    fields = {e["field"] for e in result.errors}
    assert fields == {"age", "height", "gender"}
    with pytest.raises(ValidationError) as exc_info:
        result.unwrap()
    assert exc_info.value.details["errors"] == result.errors


def test_weight_goal_dates_use_wire_format():
    goal = validate_payload(WeightGoalCreateRequest, {
        "start_weight": 80, "target_weight": 75, "start_date": "01-10-2026", "target_date": "31-12-2026",
    }).unwrap()
    assert goal.start_date == date(2026, 10, 1)
    assert goal.model_dump(mode="json")["target_date"] == "31-12-2026"


def test_weight_goal_rejects_iso_dates_and_inverted_range():
    iso = validate_payload(WeightGoalCreateRequest, {
        "start_weight": 80, "target_weight": 75, "start_date": "2026-10-01",
    })
    assert [e["field"] for e in iso.errors] == ["start_date"]

    inverted = validate_payload(WeightGoalCreateRequest, {
        "start_weight": 80, "target_weight": 75, "start_date": "31-12-2026", "target_date": "01-10-2026",
    })
    assert not inverted.is_valid
