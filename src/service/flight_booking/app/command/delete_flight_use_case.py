from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.domain.entity.user_entity import UserEntity


class DeleteFlightUseCase:
    """
    Tickets of the flight go with it (FK cascade).

    The flight row is locked before the delete cascades into the ticket rows, the same
    flight-then-ticket order CancelTicketUseCase takes.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, flight_id: int, caller: UserEntity) -> None:
        caller.ensure_admin()

        async with self.uow:
            flight = await self.uow.flight_command_repo.get_by_id_for_update(flight_id=flight_id)
            if not flight:
                raise NotFoundError('Flight not found')

            await self.uow.flight_command_repo.delete(flight_id=flight_id)
            await self.uow.commit()

        Logger.base.info(f'🗑️  [DELETE-FLIGHT] flight {flight.flight_number} deleted')
