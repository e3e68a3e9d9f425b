from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.domain.entity.flight_entity import Flight


class FlightQueryUseCase:
    def __init__(self, flight_query_repo: IFlightQueryRepo) -> None:
        self.flight_query_repo = flight_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
    ) -> Self:
        return cls(flight_query_repo=flight_query_repo)

    @Logger.io
    async def get_by_id(self, flight_id: int) -> Flight:
        flight = await self.flight_query_repo.get_by_id(flight_id=flight_id)
        if not flight:
            raise NotFoundError('Flight not found')
        return flight

    @Logger.io
    async def list_all(self) -> List[Flight]:
        return await self.flight_query_repo.list_all()

    @Logger.io
    async def search(
        self,
        *,
        origin: str,
        destination: str,
        departure_date: date,
        passengers: Optional[int] = None,
    ) -> List[Flight]:
        """
        Flights on the route departing on the given (UTC) calendar day.

        When passengers is given and positive, only flights with at least that many
        seats left are returned.
        """
        if passengers is not None and passengers < 0:
            raise ValidationError('passengers cannot be negative')

        day_start = datetime.combine(departure_date, time.min, tzinfo=timezone.utc)
        flights = await self.flight_query_repo.search(
            origin=origin,
            destination=destination,
            departure_from=day_start,
            departure_to=day_start + timedelta(days=1),
            min_available_seats=passengers if passengers else None,
        )

        Logger.base.info(
            f'🔎 [SEARCH-FLIGHT] {origin} -> {destination} on {departure_date}: {len(flights)} found'
        )
        return flights
