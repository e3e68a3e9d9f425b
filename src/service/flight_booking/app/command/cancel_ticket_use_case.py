from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.flight_booking.app.observer.ticket_subject import TicketSubject
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType


class CancelTicketUseCase:
    """
    Cancel a ticket and give its seat back to the flight.

    Flow:
    1. Lock the ticket's flight row, then the ticket row (same order as flight deletion)
    2. Check the caller owns the ticket (or is an admin)
    3. RESERVED/CONFIRMED -> CANCELLED; an already cancelled ticket is rejected,
       so a seat is never returned twice
    4. Return one seat (capped at total seats)
    5. Persist ticket and flight in one transaction, then publish CANCELLED
    """

    def __init__(self, *, uow: AbstractUnitOfWork, ticket_subject: TicketSubject) -> None:
        self.uow = uow
        self.ticket_subject = ticket_subject

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        ticket_subject: TicketSubject = Depends(Provide[Container.ticket_subject]),
    ) -> Self:
        return cls(uow=uow, ticket_subject=ticket_subject)

    @Logger.io
    async def execute(self, *, ticket_id: int, caller: UserEntity) -> Ticket:
        async with self.uow:
            flight = await self.uow.flight_command_repo.get_by_ticket_id_for_update(
                ticket_id=ticket_id
            )
            ticket = await self.uow.ticket_command_repo.get_by_id_for_update(ticket_id=ticket_id)
            if not flight or not ticket:
                raise NotFoundError('Ticket not found')

            caller.ensure_can_access_user(ticket.user_id, action='cancel this ticket')

            cancelled = ticket.cancel()
            flight = flight.increment_available_seats()

            await self.uow.flight_command_repo.update(flight=flight)
            ticket = await self.uow.ticket_command_repo.update(
                ticket=attrs.evolve(cancelled, flight=flight)
            )
            await self.uow.commit()

        Logger.base.info(
            f'🛑 [CANCEL-TICKET] {ticket.ticket_number} cancelled, flight {flight.flight_number} '
            f'back to {flight.available_seats}/{flight.total_seats} seats'
        )
        metrics.update_flight_availability(
            flight_id=flight.id or ticket.flight_id, available_seats=flight.available_seats
        )
        metrics.record_ticket_event(event_type=TicketEventType.CANCELLED)

        await self.ticket_subject.notify_observers(ticket, TicketEventType.CANCELLED)
        return ticket
