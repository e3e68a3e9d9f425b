from datetime import datetime
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.repo.mapper import flight_to_entity


class FlightQueryRepoImpl(IFlightQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, flight_id: int) -> Optional[Flight]:
        async with self.session_factory() as session:
            result = await session.execute(select(FlightModel).where(FlightModel.id == flight_id))
            flight_model = result.scalar_one_or_none()
            return flight_to_entity(flight_model) if flight_model else None

    @Logger.io
    async def list_all(self) -> List[Flight]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(FlightModel).order_by(FlightModel.departure_time, FlightModel.id)
            )
            return [flight_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def search(
        self,
        *,
        origin: str,
        destination: str,
        departure_from: datetime,
        departure_to: datetime,
        min_available_seats: Optional[int] = None,
    ) -> List[Flight]:
        """Half-open window: departure_from <= departure_time < departure_to"""
        stmt = select(FlightModel).where(
            FlightModel.origin == origin,
            FlightModel.destination == destination,
            FlightModel.departure_time >= departure_from,
            FlightModel.departure_time < departure_to,
        )
        if min_available_seats is not None:
            stmt = stmt.where(FlightModel.available_seats >= min_available_seats)

        async with self.session_factory() as session:
            result = await session.execute(stmt.order_by(FlightModel.departure_time))
            return [flight_to_entity(m) for m in result.scalars().all()]
