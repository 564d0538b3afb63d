"""Notification API router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from services.notification_service import notification_service
from schemas import FCMTokenRequest, NotificationListResponse, NotificationResponse, UnreadCountResponse

logger = get_logger("api.notifications")
router = APIRouter(prefix="/api/users/{user_id}/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    user_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    unread_only: bool = False,
    db: Session = Depends(get_db_read),
):
    total, items = notification_service.list(db, user_id, page, limit, unread_only)
    return NotificationListResponse(
        total=total,
        page=page,
        limit=limit,
        notifications=[NotificationResponse.model_validate(n) for n in items],
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def unread_count(user_id: int, db: Session = Depends(get_db_read)):
    return UnreadCountResponse(unread=notification_service.unread_count(db, user_id))


@router.patch("/read-all")
def mark_all_as_read(user_id: int, db: Session = Depends(get_db_write)):
    return {"updated": notification_service.mark_all_as_read(db, user_id)}


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
def mark_as_read(user_id: int, notification_id: int, db: Session = Depends(get_db_write)):
    return NotificationResponse.model_validate(notification_service.mark_as_read(db, user_id, notification_id))


@router.delete("/{notification_id}", status_code=204)
def delete_notification(user_id: int, notification_id: int, db: Session = Depends(get_db_write)):
    notification_service.delete(db, user_id, notification_id)


@router.put("/fcm-token", status_code=204)
def update_fcm_token(user_id: int, payload: FCMTokenRequest, db: Session = Depends(get_db_write)):
    """Register (or clear) the device token used for push delivery."""
    notification_service.update_fcm_token(db, user_id, payload.fcm_token)
    logger.info("FCM token %s for user %s", "set" if payload.fcm_token else "cleared", user_id)
