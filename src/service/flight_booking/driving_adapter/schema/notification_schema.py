from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.enum.notification_type import NotificationType


class NotificationResponse(BaseModel):
    id: int
    user_id: int
    ticket_id: Optional[int] = None
    message: str
    type: NotificationType
    seen: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, notification: Notification) -> 'NotificationResponse':
        return cls(
            id=notification.id or 0,
            user_id=notification.user_id,
            ticket_id=notification.ticket_id,
            message=notification.message,
            type=notification.type,
            seen=notification.seen,
            created_at=notification.created_at,
        )


class MarkAllSeenResponse(BaseModel):
    updated: int
