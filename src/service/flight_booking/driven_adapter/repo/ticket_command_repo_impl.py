from typing import Optional

import attrs
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.flight_booking.driven_adapter.repo.mapper import ticket_to_entity


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_by_id_for_update(self, *, ticket_id: int) -> Optional[Ticket]:
        # Lock only the ticket row; callers that move seats lock the flight row before this
        result = await self.session.execute(
            select(TicketModel)
            .where(TicketModel.id == ticket_id)
            .with_for_update(of=TicketModel)
            .execution_options(populate_existing=True)
        )
        ticket_model = result.scalar_one_or_none()
        return ticket_to_entity(ticket_model) if ticket_model else None

    @Logger.io
    async def create(self, *, ticket: Ticket) -> Ticket:
        ticket_model = TicketModel(
            ticket_number=ticket.ticket_number,
            flight_id=ticket.flight_id,
            user_id=ticket.user_id,
            passenger_name=ticket.passenger_name,
            passenger_email=ticket.passenger_email,
            seat_number=ticket.seat_number,
            price=ticket.price,
            purchase_time=ticket.purchase_time,
            status=ticket.status,
        )
        self.session.add(ticket_model)
        await self.session.flush()

        return attrs.evolve(
            ticket_to_entity(ticket_model, include_flight=False), flight=ticket.flight
        )

    @Logger.io
    async def update(self, *, ticket: Ticket) -> Ticket:
        ticket_model = await self.session.get(TicketModel, ticket.id)
        if not ticket_model:
            raise NotFoundError('Ticket not found')

        ticket_model.passenger_name = ticket.passenger_name
        ticket_model.passenger_email = ticket.passenger_email
        ticket_model.seat_number = ticket.seat_number
        ticket_model.status = ticket.status
        await self.session.flush()

        return attrs.evolve(
            ticket_to_entity(ticket_model, include_flight=False), flight=ticket.flight
        )
