"""Tests for notifications and once-per-day achievement delivery."""

from datetime import date

from core.dates import utc_today
from core.enums import NotificationType
from database import models
from services.bmi_service import bmi_service
from services.meal_service import meal_service
from services.notification_service import NotificationService, dedup_key, notification_service


def test_dedup_key_buckets_by_day():
    key = dedup_key(NotificationType.DAILY_CALORIE_ACHIEVEMENT, 7, date(2026, 10, 19))
    assert key == "DAILY_CALORIE_ACHIEVEMENT:7:2026-10-19"


def test_achievement_sent_once_per_day(db, user):
    first = notification_service.send_daily_calorie_achievement(db, user.id, date(2026, 10, 19), 2000, 1979)
    again = notification_service.send_daily_calorie_achievement(db, user.id, date(2026, 10, 19), 2400, 1979)
    next_day = notification_service.send_daily_calorie_achievement(db, user.id, date(2026, 10, 20), 2000, 1979)
    assert first is not None
    assert again is None
    assert next_day is not None
    assert db.query(models.Notification).count() == 2


def test_achievement_not_sent_below_target(db, user):
    assert notification_service.send_daily_calorie_achievement(db, user.id, date(2026, 10, 19), 1500, 1979) is None
    assert db.query(models.Notification).count() == 0


def test_logging_meals_triggers_single_achievement(db, user):
    bmi_service.calculate_and_save(db, user.id, weight=70, height=175)  # target 1979 kcal
    chicken = db.query(models.Food).filter_by(name="Chicken breast, grilled").one()
    today = utc_today()

    meal_service.create_meal(db, user.id, chicken.id, "LUNCH", today, quantity=12)  # 1980 kcal
    meal_service.create_meal(db, user.id, chicken.id, "DINNER", today, quantity=2)

    total, items = notification_service.list(db, user.id)
    assert total == 1
    assert items[0].type == NotificationType.DAILY_CALORIE_ACHIEVEMENT


def test_read_state_and_listing(db, user):
    for day in (1, 2, 3):
        notification_service.send_daily_calorie_achievement(db, user.id, date(2026, 10, day), 2000, 2000)
    assert notification_service.unread_count(db, user.id) == 3

    total, page = notification_service.list(db, user.id, page=1, limit=2)
    assert total == 3 and len(page) == 2

    notification_service.mark_as_read(db, user.id, page[0].id)
    assert notification_service.unread_count(db, user.id) == 2
    total_unread, _ = notification_service.list(db, user.id, unread_only=True)
    assert total_unread == 2

    assert notification_service.mark_all_as_read(db, user.id) == 2
    assert notification_service.unread_count(db, user.id) == 0

    notification_service.delete(db, user.id, page[0].id)
    assert notification_service.list(db, user.id)[0] == 2


def test_push_sent_when_token_registered(db, user):
    sent = []
    service = NotificationService(push_sender=lambda token, title, body, data: sent.append((token, data)))
    service.update_fcm_token(db, user.id, "device-token-123")
    service.send_daily_calorie_achievement(db, user.id, date(2026, 10, 19), 2000, 2000)
    assert sent[0][0] == "device-token-123"
    assert sent[0][1]["type"] == "DAILY_CALORIE_ACHIEVEMENT"
    assert sent[0][1]["percentage"] == "100"
