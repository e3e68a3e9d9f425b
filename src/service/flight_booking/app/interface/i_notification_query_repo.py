from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.enum.notification_type import NotificationType


class INotificationQueryRepo(ABC):
    """Notification read repository; lists are ordered newest first"""

    @abstractmethod
    async def get_by_id(self, *, notification_id: int) -> Optional[Notification]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[Notification]:
        pass

    @abstractmethod
    async def list_unseen_by_user(self, *, user_id: int) -> List[Notification]:
        pass

    @abstractmethod
    async def list_by_user_and_created_at(
        self, *, user_id: int, start: datetime, end: datetime
    ) -> List[Notification]:
        pass

    @abstractmethod
    async def list_by_type(self, *, notification_type: NotificationType) -> List[Notification]:
        pass

    @abstractmethod
    async def list_by_ticket(self, *, ticket_id: int) -> List[Notification]:
        pass
