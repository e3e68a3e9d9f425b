from datetime import datetime, timezone
from typing import Optional

import attrs

from src.service.flight_booking.domain.enum.notification_type import NotificationType


@attrs.define
class Notification:
    user_id: int
    message: str
    type: NotificationType = NotificationType.GENERAL
    ticket_id: Optional[int] = None
    seen: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        user_id: int,
        message: str,
        notification_type: NotificationType,
        ticket_id: Optional[int] = None,
    ) -> 'Notification':
        return cls(
            user_id=user_id,
            message=message,
            type=notification_type,
            ticket_id=ticket_id,
            seen=False,
            created_at=datetime.now(timezone.utc),
        )

    def mark_seen(self) -> 'Notification':
        # Idempotent: an already seen notification is returned unchanged
        if self.seen:
            return self
        return attrs.evolve(self, seen=True)

    def is_addressed_to(self, user_id: Optional[int]) -> bool:
        return user_id is not None and self.user_id == user_id
