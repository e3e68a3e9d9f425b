from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import CapacityExceededError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.app.observer.ticket_subject import TicketSubject
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType


class CreateTicketUseCase:
    """
    Book a seat on a flight.

    Flow:
    1. Caller may book for themself; admins may book for any user
    2. Lock the flight row (SELECT ... FOR UPDATE) and take one seat
    3. Persist the RESERVED ticket in the same transaction and commit
    4. Publish CREATED to the ticket observers

    Concurrent bookings for the last seat serialize on the flight row lock, so the
    later one sees zero seats and fails with CapacityExceededError.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        user_query_repo: IUserQueryRepo,
        ticket_subject: TicketSubject,
    ) -> None:
        self.uow = uow
        self.user_query_repo = user_query_repo
        self.ticket_subject = ticket_subject

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        ticket_subject: TicketSubject = Depends(Provide[Container.ticket_subject]),
    ) -> Self:
        return cls(uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject)

    @Logger.io
    async def execute(
        self,
        *,
        flight_id: int,
        user_id: int,
        passenger_name: str,
        passenger_email: str,
        seat_number: str,
        price: Optional[Decimal] = None,
        caller: UserEntity,
    ) -> Ticket:
        caller.ensure_can_access_user(user_id, action='book tickets for another user')

        if not await self.user_query_repo.get_by_id(user_id):
            raise NotFoundError('User not found')

        async with self.uow:
            flight = await self.uow.flight_command_repo.get_by_id_for_update(flight_id=flight_id)
            if not flight:
                raise NotFoundError('Flight not found')

            try:
                flight = flight.decrement_available_seats()
            except CapacityExceededError:
                metrics.record_capacity_rejection(flight_id=flight_id)
                raise

            ticket = Ticket.create(
                flight=flight,
                user_id=user_id,
                passenger_name=passenger_name,
                passenger_email=passenger_email,
                seat_number=seat_number,
                price=price,
            )
            await self.uow.flight_command_repo.update(flight=flight)
            ticket = await self.uow.ticket_command_repo.create(ticket=ticket)
            await self.uow.commit()

        Logger.base.info(
            f'🎫 [CREATE-TICKET] {ticket.ticket_number} on flight {flight.flight_number} '
            f'for user {user_id}, {flight.available_seats}/{flight.total_seats} seats left'
        )
        metrics.update_flight_availability(
            flight_id=flight_id, available_seats=flight.available_seats
        )
        metrics.record_ticket_event(event_type=TicketEventType.CREATED)

        await self.ticket_subject.notify_observers(ticket, TicketEventType.CREATED)
        return ticket
