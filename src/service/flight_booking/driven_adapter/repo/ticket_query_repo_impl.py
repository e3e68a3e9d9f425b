from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus
from src.service.flight_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.flight_booking.driven_adapter.repo.mapper import ticket_to_entity


class TicketQueryRepoImpl(ITicketQueryRepo):
    """Read side for tickets; every ticket comes back with its flight snapshot."""

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    async def _fetch_one(self, stmt: Select) -> Optional[Ticket]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            ticket_model = result.scalar_one_or_none()
            return ticket_to_entity(ticket_model) if ticket_model else None

    async def _fetch_all(self, stmt: Select) -> List[Ticket]:
        async with self.session_factory() as session:
            result = await session.execute(
                stmt.order_by(TicketModel.purchase_time.desc(), TicketModel.id.desc())
            )
            return [ticket_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, ticket_id: int) -> Optional[Ticket]:
        return await self._fetch_one(select(TicketModel).where(TicketModel.id == ticket_id))

    @Logger.io
    async def get_by_ticket_number(self, *, ticket_number: str) -> Optional[Ticket]:
        return await self._fetch_one(
            select(TicketModel).where(TicketModel.ticket_number == ticket_number)
        )

    @Logger.io
    async def list_all(self) -> List[Ticket]:
        return await self._fetch_all(select(TicketModel))

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[Ticket]:
        return await self._fetch_all(select(TicketModel).where(TicketModel.user_id == user_id))

    @Logger.io
    async def list_by_flight(self, *, flight_id: int) -> List[Ticket]:
        return await self._fetch_all(select(TicketModel).where(TicketModel.flight_id == flight_id))

    @Logger.io
    async def list_by_user_and_status(self, *, user_id: int, status: TicketStatus) -> List[Ticket]:
        return await self._fetch_all(
            select(TicketModel).where(TicketModel.user_id == user_id, TicketModel.status == status)
        )

    @Logger.io
    async def list_by_user_and_purchase_time(
        self, *, user_id: int, start: datetime, end: datetime
    ) -> List[Ticket]:
        return await self._fetch_all(
            select(TicketModel).where(
                TicketModel.user_id == user_id,
                TicketModel.purchase_time >= start,
                TicketModel.purchase_time <= end,
            )
        )
