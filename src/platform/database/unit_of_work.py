"""
Unit of Work Pattern - one database session shared by the write repositories

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories obtained from the UoW share its session, so row locks taken by one
  (SELECT ... FOR UPDATE) stay held until the UoW commits or rolls back
- Use cases coordinate flight seat inventory and ticket writes through the UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.flight_booking.app.interface.i_flight_command_repo import (
        IFlightCommandRepo,
    )
    from src.service.flight_booking.app.interface.i_ticket_command_repo import (
        ITicketCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking service

    Usage:
        async with uow:
            flight = await uow.flight_command_repo.get_by_id_for_update(flight_id=...)
            ...
            await uow.commit()

    Leaving the block without commit() rolls the transaction back.
    """

    flight_command_repo: IFlightCommandRepo
    ticket_command_repo: ITicketCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from src.service.flight_booking.driven_adapter.repo.flight_command_repo_impl import (
            FlightCommandRepoImpl,
        )
        from src.service.flight_booking.driven_adapter.repo.ticket_command_repo_impl import (
            TicketCommandRepoImpl,
        )

        self.flight_command_repo = FlightCommandRepoImpl(session=self.session)
        self.ticket_command_repo = TicketCommandRepoImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self):
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Usage:
        async def create_ticket(uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
            async with uow:
                ...
                await uow.commit()
    """
    return SqlAlchemyUnitOfWork(session)
