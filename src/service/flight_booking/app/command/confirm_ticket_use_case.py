from typing import Self

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


class ConfirmTicketUseCase:
    """RESERVED -> CONFIRMED, by the ticket owner or an admin."""

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
            ticket = await self.uow.ticket_command_repo.get_by_id_for_update(ticket_id=ticket_id)
            if not ticket:
                raise NotFoundError('Ticket not found')

            caller.ensure_can_access_user(ticket.user_id, action='confirm this ticket')

            ticket = await self.uow.ticket_command_repo.update(ticket=ticket.confirm())
            await self.uow.commit()

        Logger.base.info(f'✅ [CONFIRM-TICKET] {ticket.ticket_number} confirmed')
        metrics.record_ticket_event(event_type=TicketEventType.CONFIRMED)

        await self.ticket_subject.notify_observers(ticket, TicketEventType.CONFIRMED)
        return ticket
