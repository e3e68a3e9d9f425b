from abc import ABC, abstractmethod

from src.service.flight_booking.domain.entity.notification_entity import Notification


class INotificationCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def update(self, *, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def mark_all_seen(self, *, user_id: int) -> int:
        """Flip every unseen notification of the user; returns the number changed"""
        pass
