"""Schemas for in-app notifications."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
import json

from core.enums import NotificationType


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: NotificationType
    title: str
    body: str
    data: dict = Field(default_factory=dict)
    is_read: bool
    created_at: datetime

    @field_validator("data", mode="before")
    @classmethod
    def _decode_data(cls, value):
        if value in (None, ""):
            return {}
        if isinstance(value, str):
            return json.loads(value)
        return value


class NotificationListResponse(BaseModel):
    total: int
    page: int
    limit: int
    notifications: List[NotificationResponse]


class UnreadCountResponse(BaseModel):
    unread: int


class FCMTokenRequest(BaseModel):
    fcm_token: Optional[str] = Field(None, description="Device token; null unregisters the device")
