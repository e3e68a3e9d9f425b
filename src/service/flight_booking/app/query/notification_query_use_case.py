from datetime import datetime
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_notification_query_repo import (
    INotificationQueryRepo,
)
from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.enum.notification_type import NotificationType


class NotificationQueryUseCase:
    """Caller's own notifications, newest first; the by-type/user/ticket views are admin only."""

    def __init__(self, notification_query_repo: INotificationQueryRepo) -> None:
        self.notification_query_repo = notification_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        notification_query_repo: INotificationQueryRepo = Depends(
            Provide[Container.notification_query_repo]
        ),
    ) -> Self:
        return cls(notification_query_repo=notification_query_repo)

    @Logger.io
    async def list_mine(self, *, caller: UserEntity) -> List[Notification]:
        return await self.notification_query_repo.list_by_user(user_id=self._caller_id(caller))

    @Logger.io
    async def list_mine_unseen(self, *, caller: UserEntity) -> List[Notification]:
        return await self.notification_query_repo.list_unseen_by_user(
            user_id=self._caller_id(caller)
        )

    @Logger.io
    async def list_mine_by_created_at(
        self, *, start: datetime, end: datetime, caller: UserEntity
    ) -> List[Notification]:
        if start > end:
            raise ValidationError('start must not be after end')
        return await self.notification_query_repo.list_by_user_and_created_at(
            user_id=self._caller_id(caller), start=start, end=end
        )

    @Logger.io
    async def list_by_type(
        self, *, notification_type: NotificationType, caller: UserEntity
    ) -> List[Notification]:
        caller.ensure_admin()
        return await self.notification_query_repo.list_by_type(notification_type=notification_type)

    @Logger.io
    async def list_by_user(self, *, user_id: int, caller: UserEntity) -> List[Notification]:
        caller.ensure_admin()
        return await self.notification_query_repo.list_by_user(user_id=user_id)

    @Logger.io
    async def list_by_ticket(self, *, ticket_id: int, caller: UserEntity) -> List[Notification]:
        caller.ensure_admin()
        return await self.notification_query_repo.list_by_ticket(ticket_id=ticket_id)

    @staticmethod
    def _caller_id(caller: UserEntity) -> int:
        if caller.id is None:
            raise ValidationError('Invalid user ID')
        return caller.id
