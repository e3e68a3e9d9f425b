from datetime import datetime
from decimal import Decimal
from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.entity.user_entity import UserEntity


class CreateFlightUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
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

        flight = Flight.create(
            flight_number=flight_number,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
            total_seats=total_seats,
            base_price=base_price,
        )

        async with self.uow:
            if await self.uow.flight_command_repo.exists_by_flight_number(
                flight_number=flight_number
            ):
                raise ConflictError(f'Flight {flight_number} already exists')

            flight = await self.uow.flight_command_repo.create(flight=flight)
            await self.uow.commit()

        Logger.base.info(
            f'🛫 [CREATE-FLIGHT] {flight.flight_number} {flight.origin} -> {flight.destination} '
            f'with {flight.total_seats} seats'
        )
        if flight.id is not None:
            metrics.update_flight_availability(
                flight_id=flight.id, available_seats=flight.available_seats
            )
        return flight
