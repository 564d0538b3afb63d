"""In-app notifications and the daily calorie achievement check.

Notifications are stored rows; push delivery goes through `push_sender`,
which only logs unless a gateway client is configured.

Once-per-day notifications carry a dedup key ``<type>:<user>:<YYYY-MM-DD>``
backed by a unique constraint, so a second send on the same day is a no-op
and the key naturally stops matching the next day.
"""

import json
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.enums import NotificationType
from core.logger import get_logger
from core.repository import UserScopedRepository, get_or_404, save
from database import models

logger = get_logger("services.notification_service")

# Share of the daily target at which the achievement notification fires.
ACHIEVEMENT_THRESHOLD = 1.0


def dedup_key(notification_type: NotificationType, user_id: int, day: date) -> str:
    return f"{notification_type.value}:{user_id}:{day.isoformat()}"


def log_push(token: str, title: str, body: str, data: Dict[str, str]) -> None:
    logger.info("Push to %s...: %s", token[:8], title)


class NotificationService:
    """Creates, lists and updates user notifications."""

    def __init__(self, push_sender: Callable[[str, str, str, Dict[str, str]], None] = log_push):
        self.push_sender = push_sender

    def create(
        self,
        db: Session,
        user_id: int,
        notification_type: NotificationType,
        title: str,
        body: str,
        data: Optional[Dict[str, Any]] = None,
        key: Optional[str] = None,
    ) -> Optional[models.Notification]:
        """Store a notification and push it to the user's device.

        Returns None when `key` is already taken, i.e. the notification was
        sent before.
        """
        user = get_or_404(db, models.User, user_id, "User")
        notification = models.Notification(
            user_id=user_id,
            type=notification_type,
            title=title,
            body=body,
            data=json.dumps(data or {}),
            dedup_key=key,
        )
        try:
            notification = save(db, notification)
        except IntegrityError:
            db.rollback()
            logger.info("Notification %s already sent", key)
            return None

        if user.fcm_token:
            payload = {k: str(v) for k, v in (data or {}).items()}
            payload["type"] = notification_type.value
            self.push_sender(user.fcm_token, title, body, payload)
        return notification

    def list(self, db: Session, user_id: int, page: int = 1, limit: int = 10, unread_only: bool = False):
        """Return ``(total, notifications)`` for one page, newest first."""
        query = UserScopedRepository(models.Notification, db).query(user_id)
        if unread_only:
            query = query.filter(models.Notification.is_read.is_(False))
        total = query.count()
        items = (
            query.order_by(models.Notification.created_at.desc(), models.Notification.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return total, items

    def mark_as_read(self, db: Session, user_id: int, notification_id: int) -> models.Notification:
        repo = UserScopedRepository(models.Notification, db, "Notification")
        notification = repo.get_or_404(user_id, notification_id)
        notification.is_read = True
        db.commit()
        db.refresh(notification)
        return notification

    def mark_all_as_read(self, db: Session, user_id: int) -> int:
        updated = (
            UserScopedRepository(models.Notification, db)
            .query(user_id)
            .filter(models.Notification.is_read.is_(False))
            .update({models.Notification.is_read: True}, synchronize_session=False)
        )
        db.commit()
        return updated

    def unread_count(self, db: Session, user_id: int) -> int:
        return (
            UserScopedRepository(models.Notification, db)
            .query(user_id)
            .filter(models.Notification.is_read.is_(False))
            .count()
        )

    def delete(self, db: Session, user_id: int, notification_id: int) -> None:
        UserScopedRepository(models.Notification, db, "Notification").delete(user_id, notification_id)

    def update_fcm_token(self, db: Session, user_id: int, token: Optional[str]) -> models.User:
        user = get_or_404(db, models.User, user_id, "User")
        user.fcm_token = token
        db.commit()
        db.refresh(user)
        return user

    def send_daily_calorie_achievement(
        self,
        db: Session,
        user_id: int,
        day: date,
        current_calories: float,
        target_calories: float,
    ) -> Optional[models.Notification]:
        """Notify once per (user, day) when consumed calories reach the target."""
        if not target_calories or current_calories < target_calories * ACHIEVEMENT_THRESHOLD:
            return None
        percentage = round(current_calories / target_calories * 100)
        return self.create(
            db,
            user_id,
            NotificationType.DAILY_CALORIE_ACHIEVEMENT,
            "Daily calorie goal achieved!",
            f"Congratulations! You've consumed {round(current_calories)} out of "
            f"{round(target_calories)} calories ({percentage}%). Keep up the great work!",
            data={
                "current_calories": round(current_calories),
                "target_calories": round(target_calories),
                "percentage": percentage,
                "timestamp": datetime.utcnow().isoformat(),
            },
            key=dedup_key(NotificationType.DAILY_CALORIE_ACHIEVEMENT, user_id, day),
        )

    def send_weight_goal_progress(self, db: Session, user_id: int, current_weight: float,
                                  target_weight: float, progress: float) -> Optional[models.Notification]:
        return self.create(
            db,
            user_id,
            NotificationType.WEIGHT_GOAL_PROGRESS,
            "Weight goal progress update",
            f"You're {round(progress)}% of the way to your goal! "
            f"Current: {current_weight}kg, Target: {target_weight}kg",
            data={"current_weight": current_weight, "target_weight": target_weight, "progress": round(progress)},
        )


notification_service = NotificationService()
__all__ = ["NotificationService", "notification_service", "dedup_key"]
