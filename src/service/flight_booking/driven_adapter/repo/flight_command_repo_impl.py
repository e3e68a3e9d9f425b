from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.flight_booking.driven_adapter.repo.mapper import flight_to_entity


class FlightCommandRepoImpl(IFlightCommandRepo):
    """
    Flight writes bound to the caller's session.

    Nothing here commits: the unit of work owns the transaction, so a locked flight row
    stays locked until the use case commits or rolls back. Use cases that touch both a
    flight and its tickets lock the flight row first.
    """

    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_by_id_for_update(self, *, flight_id: int) -> Optional[Flight]:
        # populate_existing: the row may already sit in the identity map from an unlocked read
        result = await self.session.execute(
            select(FlightModel)
            .where(FlightModel.id == flight_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        flight_model = result.scalar_one_or_none()
        return flight_to_entity(flight_model) if flight_model else None

    @Logger.io
    async def get_by_ticket_id_for_update(self, *, ticket_id: int) -> Optional[Flight]:
        flight_id = select(TicketModel.flight_id).where(TicketModel.id == ticket_id)
        result = await self.session.execute(
            select(FlightModel)
            .where(FlightModel.id == flight_id.scalar_subquery())
            .with_for_update(of=FlightModel)
            .execution_options(populate_existing=True)
        )
        flight_model = result.scalar_one_or_none()
        return flight_to_entity(flight_model) if flight_model else None

    @Logger.io
    async def exists_by_flight_number(
        self, *, flight_number: str, exclude_flight_id: Optional[int] = None
    ) -> bool:
        stmt = select(FlightModel.id).where(FlightModel.flight_number == flight_number)
        if exclude_flight_id is not None:
            stmt = stmt.where(FlightModel.id != exclude_flight_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    @Logger.io
    async def create(self, *, flight: Flight) -> Flight:
        flight_model = FlightModel(
            flight_number=flight.flight_number,
            origin=flight.origin,
            destination=flight.destination,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            total_seats=flight.total_seats,
            available_seats=flight.available_seats,
            base_price=flight.base_price,
        )
        self.session.add(flight_model)
        await self.session.flush()
        await self.session.refresh(flight_model)
        return flight_to_entity(flight_model)

    @Logger.io
    async def update(self, *, flight: Flight) -> Flight:
        if flight.id is None:
            raise NotFoundError('Flight not found')

        flight_model = await self.session.get(FlightModel, flight.id)
        if not flight_model:
            raise NotFoundError('Flight not found')

        flight_model.flight_number = flight.flight_number
        flight_model.origin = flight.origin
        flight_model.destination = flight.destination
        flight_model.departure_time = flight.departure_time
        flight_model.arrival_time = flight.arrival_time
        flight_model.total_seats = flight.total_seats
        flight_model.available_seats = flight.available_seats
        flight_model.base_price = flight.base_price
        await self.session.flush()

        return flight_to_entity(flight_model)

    @Logger.io
    async def delete(self, *, flight_id: int) -> bool:
        result = await self.session.execute(
            delete(FlightModel).where(FlightModel.id == flight_id).returning(FlightModel.id)
        )
        return result.scalar_one_or_none() is not None
