from typing import Optional, Self

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


class UpdateTicketUseCase:
    """Admin edit of passenger name/email and seat; status is left alone."""

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
    async def execute(
        self,
        *,
        ticket_id: int,
        caller: UserEntity,
        passenger_name: Optional[str] = None,
        passenger_email: Optional[str] = None,
        seat_number: Optional[str] = None,
    ) -> Ticket:
        caller.ensure_admin()

        async with self.uow:
            ticket = await self.uow.ticket_command_repo.get_by_id_for_update(ticket_id=ticket_id)
            if not ticket:
                raise NotFoundError('Ticket not found')

            ticket = await self.uow.ticket_command_repo.update(
                ticket=ticket.update_passenger_details(
                    passenger_name=passenger_name,
                    passenger_email=passenger_email,
                    seat_number=seat_number,
                )
            )
            await self.uow.commit()

        Logger.base.info(f'✏️  [UPDATE-TICKET] {ticket.ticket_number} updated by admin {caller.id}')
        metrics.record_ticket_event(event_type=TicketEventType.UPDATED)

        await self.ticket_subject.notify_observers(ticket, TicketEventType.UPDATED)
        return ticket
