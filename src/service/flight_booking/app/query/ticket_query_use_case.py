from datetime import datetime
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus


class TicketQueryUseCase:
    """Ticket reads. Single tickets are visible to their owner and to admins."""

    def __init__(
        self,
        *,
        ticket_query_repo: ITicketQueryRepo,
        flight_query_repo: IFlightQueryRepo,
        user_query_repo: IUserQueryRepo,
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.flight_query_repo = flight_query_repo
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(
            ticket_query_repo=ticket_query_repo,
            flight_query_repo=flight_query_repo,
            user_query_repo=user_query_repo,
        )

    @Logger.io
    async def get_by_id(self, *, ticket_id: int, caller: UserEntity) -> Ticket:
        ticket = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
        if not ticket:
            raise NotFoundError('Ticket not found')
        caller.ensure_can_access_user(ticket.user_id, action='view this ticket')
        return ticket

    @Logger.io
    async def get_by_ticket_number(self, *, ticket_number: str, caller: UserEntity) -> Ticket:
        ticket = await self.ticket_query_repo.get_by_ticket_number(ticket_number=ticket_number)
        if not ticket:
            raise NotFoundError('Ticket not found')
        caller.ensure_can_access_user(ticket.user_id, action='view this ticket')
        return ticket

    @Logger.io
    async def list_all(self, *, caller: UserEntity) -> List[Ticket]:
        caller.ensure_admin()
        return await self.ticket_query_repo.list_all()

    @Logger.io
    async def list_mine(self, *, caller: UserEntity) -> List[Ticket]:
        return await self.ticket_query_repo.list_by_user(user_id=self._caller_id(caller))

    @Logger.io
    async def list_by_user(self, *, user_id: int, caller: UserEntity) -> List[Ticket]:
        caller.ensure_admin()
        if not await self.user_query_repo.get_by_id(user_id):
            raise NotFoundError('User not found')
        return await self.ticket_query_repo.list_by_user(user_id=user_id)

    @Logger.io
    async def list_by_flight(self, *, flight_id: int, caller: UserEntity) -> List[Ticket]:
        caller.ensure_admin()
        if not await self.flight_query_repo.get_by_id(flight_id=flight_id):
            raise NotFoundError('Flight not found')
        return await self.ticket_query_repo.list_by_flight(flight_id=flight_id)

    @Logger.io
    async def list_mine_by_status(
        self, *, status: TicketStatus, caller: UserEntity
    ) -> List[Ticket]:
        return await self.ticket_query_repo.list_by_user_and_status(
            user_id=self._caller_id(caller), status=status
        )

    @Logger.io
    async def list_mine_by_purchase_time(
        self, *, start: datetime, end: datetime, caller: UserEntity
    ) -> List[Ticket]:
        if start > end:
            raise ValidationError('start must not be after end')
        return await self.ticket_query_repo.list_by_user_and_purchase_time(
            user_id=self._caller_id(caller), start=start, end=end
        )

    @staticmethod
    def _caller_id(caller: UserEntity) -> int:
        if caller.id is None:
            raise ValidationError('Invalid user ID')
        return caller.id
