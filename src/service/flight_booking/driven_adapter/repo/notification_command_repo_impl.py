from typing import AsyncContextManager, Callable

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_notification_command_repo import (
    INotificationCommandRepo,
)
from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.driven_adapter.model.notification_model import NotificationModel
from src.service.flight_booking.driven_adapter.repo.mapper import notification_to_entity


class NotificationCommandRepoImpl(INotificationCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, notification: Notification) -> Notification:
        async with self.session_factory() as session:
            notification_model = NotificationModel(
                user_id=notification.user_id,
                ticket_id=notification.ticket_id,
                message=notification.message,
                type=notification.type,
                seen=notification.seen,
            )
            if notification.created_at is not None:
                notification_model.created_at = notification.created_at

            session.add(notification_model)
            await session.commit()
            await session.refresh(notification_model)

            return notification_to_entity(notification_model)

    @Logger.io
    async def update(self, *, notification: Notification) -> Notification:
        async with self.session_factory() as session:
            notification_model = await session.get(NotificationModel, notification.id)
            if not notification_model:
                raise NotFoundError('Notification not found')

            notification_model.message = notification.message
            notification_model.type = notification.type
            notification_model.seen = notification.seen

            await session.commit()
            await session.refresh(notification_model)

            return notification_to_entity(notification_model)

    @Logger.io
    async def mark_all_seen(self, *, user_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                update(NotificationModel)
                .where(NotificationModel.user_id == user_id, NotificationModel.seen.is_(False))
                .values(seen=True)
                .returning(NotificationModel.id)
            )
            count = len(result.scalars().all())
            await session.commit()
            return count
