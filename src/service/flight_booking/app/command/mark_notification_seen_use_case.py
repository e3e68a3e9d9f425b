from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_notification_command_repo import (
    INotificationCommandRepo,
)
from src.service.flight_booking.app.interface.i_notification_query_repo import (
    INotificationQueryRepo,
)
from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.entity.user_entity import UserEntity


class MarkNotificationSeenUseCase:
    def __init__(
        self,
        *,
        notification_command_repo: INotificationCommandRepo,
        notification_query_repo: INotificationQueryRepo,
    ) -> None:
        self.notification_command_repo = notification_command_repo
        self.notification_query_repo = notification_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        notification_command_repo: INotificationCommandRepo = Depends(
            Provide[Container.notification_command_repo]
        ),
        notification_query_repo: INotificationQueryRepo = Depends(
            Provide[Container.notification_query_repo]
        ),
    ) -> Self:
        return cls(
            notification_command_repo=notification_command_repo,
            notification_query_repo=notification_query_repo,
        )

    @Logger.io
    async def mark_seen(self, *, notification_id: int, caller: UserEntity) -> Notification:
        notification = await self.notification_query_repo.get_by_id(
            notification_id=notification_id
        )
        if not notification:
            raise NotFoundError('Notification not found')
        if not caller.is_admin and not notification.is_addressed_to(caller.id):
            raise ForbiddenError('You are not allowed to update this notification')

        if notification.seen:
            return notification
        return await self.notification_command_repo.update(notification=notification.mark_seen())

    @Logger.io
    async def mark_all_seen(self, *, caller: UserEntity) -> int:
        if caller.id is None:
            raise ValidationError('Invalid user ID')
        updated = await self.notification_command_repo.mark_all_seen(user_id=caller.id)
        Logger.base.info(f'👀 [MARK-ALL-SEEN] user {caller.id}: {updated} notifications')
        return updated
