from datetime import datetime
from decimal import Decimal
from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.entity.user_entity import UserEntity


class UpdateFlightUseCase:
    """
    Replace a flight's schedule, route, capacity and price.

    available_seats is never written here; the row is locked so a concurrent booking
    cannot move the counter between the capacity check and the write.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        flight_id: int,
        flight_number: str,
        origin: str,
        destination: str,
        departure_time: datetime,
        arrival_time: datetime,
        total_seats: int,
        base_price: Decimal,
        caller: UserEntity,
    ) -> Flight:
        caller.ensure_admin()

        async with self.uow:
            flight = await self.uow.flight_command_repo.get_by_id_for_update(flight_id=flight_id)
            if not flight:
                raise NotFoundError('Flight not found')

            if await self.uow.flight_command_repo.exists_by_flight_number(
                flight_number=flight_number, exclude_flight_id=flight_id
            ):
                raise ConflictError(f'Flight {flight_number} already exists')

            flight = await self.uow.flight_command_repo.update(
                flight=flight.update_details(
                    flight_number=flight_number,
                    origin=origin,
                    destination=destination,
                    departure_time=departure_time,
                    arrival_time=arrival_time,
                    total_seats=total_seats,
                    base_price=base_price,
                )
            )
            await self.uow.commit()

        Logger.base.info(f'🛠️  [UPDATE-FLIGHT] {flight.flight_number} (id={flight_id}) updated')
        return flight
