from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_notification_query_repo import (
    INotificationQueryRepo,
)
from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.enum.notification_type import NotificationType
from src.service.flight_booking.driven_adapter.model.notification_model import NotificationModel
from src.service.flight_booking.driven_adapter.repo.mapper import notification_to_entity


class NotificationQueryRepoImpl(INotificationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    async def _fetch_all(self, stmt: Select) -> List[Notification]:
        # Newest first
        async with self.session_factory() as session:
            result = await session.execute(
                stmt.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            )
            return [notification_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, notification_id: int) -> Optional[Notification]:
        async with self.session_factory() as session:
            notification_model = await session.get(NotificationModel, notification_id)
            return notification_to_entity(notification_model) if notification_model else None

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[Notification]:
        return await self._fetch_all(
            select(NotificationModel).where(NotificationModel.user_id == user_id)
        )

    @Logger.io
    async def list_unseen_by_user(self, *, user_id: int) -> List[Notification]:
        return await self._fetch_all(
            select(NotificationModel).where(
                NotificationModel.user_id == user_id, NotificationModel.seen.is_(False)
            )
        )

    @Logger.io
    async def list_by_user_and_created_at(
        self, *, user_id: int, start: datetime, end: datetime
    ) -> List[Notification]:
        return await self._fetch_all(
            select(NotificationModel).where(
                NotificationModel.user_id == user_id,
                NotificationModel.created_at >= start,
                NotificationModel.created_at <= end,
            )
        )

    @Logger.io
    async def list_by_type(self, *, notification_type: NotificationType) -> List[Notification]:
        return await self._fetch_all(
            select(NotificationModel).where(NotificationModel.type == notification_type)
        )

    @Logger.io
    async def list_by_ticket(self, *, ticket_id: int) -> List[Notification]:
        return await self._fetch_all(
            select(NotificationModel).where(NotificationModel.ticket_id == ticket_id)
        )
