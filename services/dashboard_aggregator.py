"""Calorie tracker buckets for the dashboard.

Two views are produced from the meal log:

* week: seven daily buckets, Sunday to Saturday, for the week that contains
  the reference date;
* month: consecutive seven-day spans starting on the 1st of the month (not on
  a Sunday), the last one clipped to the month's final day.

The two views anchor their weeks differently. Clients chart both as-is, so
the difference is kept.

Meal data comes from a `MealCalorieLookup` callable; the aggregator itself
only sums.
"""

import calendar
from dataclasses import dataclass, asdict
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterable, List, Tuple, Union

from core.dates import format_date, parse_date
from core.logger import get_logger

logger = get_logger("services.dashboard_aggregator")

# (start, end) inclusive -> iterable of (meal date, calories)
MealCalorieLookup = Callable[[date, date], Iterable[Tuple[Union[date, str], float]]]

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass
class DailyCalorieBucket:
    label: str
    date: date
    calories: float

    def as_dict(self) -> dict:
        return {"label": self.label, "date": format_date(self.date), "calories": self.calories}


@dataclass
class WeeklyCalorieBucket:
    label: str
    start: date
    end: date
    calories: float

    def as_dict(self) -> dict:
        data = asdict(self)
        data["start"] = format_date(self.start)
        data["end"] = format_date(self.end)
        return data


def _normalize(reference: Union[date, datetime, str]) -> date:
    if isinstance(reference, datetime) and reference.tzinfo is not None:
        reference = reference.astimezone(timezone.utc)
    return parse_date(reference, field="date")


def _sum_calories(lookup: MealCalorieLookup, start: date, end: date) -> float:
    total = 0
    for meal_date, calories in lookup(start, end):
        if start <= parse_date(meal_date) <= end:
            total += calories or 0
    return total


def build_weekly_buckets(reference_date: Union[date, datetime, str], lookup: MealCalorieLookup) -> List[DailyCalorieBucket]:
    """Return the 7 daily buckets (Sunday first) of the week containing `reference_date`."""
    ref = _normalize(reference_date)
    # date.weekday() is Monday=0; shift so Sunday=0
    day_of_week = (ref.weekday() + 1) % 7
    sunday = ref - timedelta(days=day_of_week)

    buckets = []
    for offset in range(7):
        day = sunday + timedelta(days=offset)
        buckets.append(DailyCalorieBucket(
            label=WEEKDAY_LABELS[offset],
            date=day,
            calories=_sum_calories(lookup, day, day),
        ))
    logger.debug("Weekly buckets from %s: %s", sunday, [b.calories for b in buckets])
    return buckets


def build_monthly_buckets(year: int, month: int, lookup: MealCalorieLookup) -> List[WeeklyCalorieBucket]:
    """Return "Week N" buckets covering every day of the month exactly once."""
    last_day = date(year, month, calendar.monthrange(year, month)[1])
    week_start = date(year, month, 1)

    buckets = []
    week_num = 1
    while week_start.month == month and week_start.year == year:
        week_end = min(week_start + timedelta(days=6), last_day)
        buckets.append(WeeklyCalorieBucket(
            label=f"Week {week_num}",
            start=week_start,
            end=week_end,
            calories=_sum_calories(lookup, week_start, week_end),
        ))
        week_num += 1
        week_start += timedelta(days=7)
    logger.debug("Monthly buckets for %04d-%02d: %s", year, month, len(buckets))
    return buckets
