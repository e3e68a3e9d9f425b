"""
Unit tests for CreateTicketUseCase

Focus:
1. Booking takes exactly one seat and persists a RESERVED ticket in one transaction
2. A sold-out flight rejects the booking without creating a ticket
3. Clients can only book for themselves
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    CapacityExceededError,
    ForbiddenError,
    NotFoundError,
)
from src.service.flight_booking.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus
from test.service.flight_booking.unit.test_helpers import FakeUnitOfWork, make_flight


@pytest.fixture
def user_query_repo(client_user):
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=client_user)
    return repo


@pytest.fixture
def ticket_subject():
    subject = AsyncMock()
    subject.notify_observers = AsyncMock()
    return subject


def _booking(**overrides) -> dict:
    values = {
        'flight_id': 1,
        'user_id': 2,
        'passenger_name': 'Jane Doe',
        'passenger_email': 'jane.doe@example.com',
        'seat_number': '12A',
    }
    values.update(overrides)
    return values


@pytest.mark.unit
class TestCreateTicket:
    @pytest.mark.asyncio
    async def test_booking_takes_one_seat(self, client_user, user_query_repo, ticket_subject):
        """
        Given: A flight with 180 free seats
        When: A client books a ticket for themself
        Then: The flight drops to 179, a RESERVED ticket is stored and CREATED is published
        """
        uow = FakeUnitOfWork(flight=make_flight(total_seats=180))
        use_case = CreateTicketUseCase(
            uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        )

        ticket = await use_case.execute(**_booking(), caller=client_user)

        assert ticket.id == 100
        assert ticket.status == TicketStatus.RESERVED
        assert ticket.price == Decimal('129.99')
        assert ticket.ticket_number
        assert uow.committed

        updated_flight = uow.flight_command_repo.update.call_args.kwargs['flight']
        assert updated_flight.available_seats == 179
        uow.ticket_command_repo.create.assert_awaited_once()
        ticket_subject.notify_observers.assert_awaited_once_with(ticket, TicketEventType.CREATED)

    @pytest.mark.asyncio
    async def test_explicit_price_is_kept(self, client_user, user_query_repo, ticket_subject):
        uow = FakeUnitOfWork(flight=make_flight())
        use_case = CreateTicketUseCase(
            uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        )

        ticket = await use_case.execute(**_booking(price=Decimal('80.00')), caller=client_user)

        assert ticket.price == Decimal('80.00')

    @pytest.mark.asyncio
    async def test_last_seat_then_sold_out(self, client_user, user_query_repo, ticket_subject):
        """
        Given: A flight with total_seats=1, available_seats=1
        When: Two bookings are made one after another
        Then: The first succeeds leaving 0 seats, the second fails with CapacityExceededError
        """
        first_uow = FakeUnitOfWork(flight=make_flight(total_seats=1, available_seats=1))
        await CreateTicketUseCase(
            uow=first_uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        ).execute(**_booking(), caller=client_user)

        sold_out = first_uow.flight_command_repo.update.call_args.kwargs['flight']
        assert sold_out.available_seats == 0

        second_uow = FakeUnitOfWork(flight=sold_out)
        with pytest.raises(CapacityExceededError):
            await CreateTicketUseCase(
                uow=second_uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
            ).execute(**_booking(seat_number='12B'), caller=client_user)

        second_uow.ticket_command_repo.create.assert_not_awaited()
        second_uow.flight_command_repo.update.assert_not_awaited()
        assert not second_uow.committed
        assert second_uow.rolled_back
        assert ticket_subject.notify_observers.await_count == 1

    @pytest.mark.asyncio
    async def test_unknown_flight(self, client_user, user_query_repo, ticket_subject):
        uow = FakeUnitOfWork(flight=None)
        use_case = CreateTicketUseCase(
            uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        )

        with pytest.raises(NotFoundError, match='Flight not found'):
            await use_case.execute(**_booking(flight_id=999), caller=client_user)

        assert not uow.committed

    @pytest.mark.asyncio
    async def test_unknown_user(self, admin_user, ticket_subject):
        user_query_repo = AsyncMock()
        user_query_repo.get_by_id = AsyncMock(return_value=None)
        uow = FakeUnitOfWork(flight=make_flight())
        use_case = CreateTicketUseCase(
            uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        )

        with pytest.raises(NotFoundError, match='User not found'):
            await use_case.execute(**_booking(user_id=999), caller=admin_user)

        uow.flight_command_repo.get_by_id_for_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_client_cannot_book_for_someone_else(
        self, another_client_user, user_query_repo, ticket_subject
    ):
        uow = FakeUnitOfWork(flight=make_flight())
        use_case = CreateTicketUseCase(
            uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        )

        with pytest.raises(ForbiddenError):
            await use_case.execute(**_booking(user_id=2), caller=another_client_user)

        uow.flight_command_repo.get_by_id_for_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_can_book_for_any_user(self, admin_user, user_query_repo, ticket_subject):
        uow = FakeUnitOfWork(flight=make_flight())
        use_case = CreateTicketUseCase(
            uow=uow, user_query_repo=user_query_repo, ticket_subject=ticket_subject
        )

        ticket = await use_case.execute(**_booking(user_id=2), caller=admin_user)

        assert ticket.user_id == 2
        assert uow.committed
