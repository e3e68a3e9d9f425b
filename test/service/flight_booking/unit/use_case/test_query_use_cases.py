from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.platform.exception.exceptions import ForbiddenError, NotFoundError, ValidationError
from src.service.flight_booking.app.query.flight_query_use_case import FlightQueryUseCase
from src.service.flight_booking.app.query.render_ticket_pdf_use_case import (
    RenderTicketPdfUseCase,
)
from src.service.flight_booking.app.query.ticket_query_use_case import TicketQueryUseCase
from src.service.flight_booking.app.query.user_query_use_case import UserQueryUseCase
from src.service.flight_booking.domain.entity.user_entity import UserRole
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus
from test.service.flight_booking.unit.test_helpers import make_flight, make_ticket


@pytest.fixture
def flight_query_repo():
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=make_flight())
    repo.search = AsyncMock(return_value=[make_flight()])
    return repo


@pytest.fixture
def ticket_query_repo():
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=make_ticket(user_id=2))
    repo.get_by_ticket_number = AsyncMock(return_value=make_ticket(user_id=2))
    repo.list_by_user_and_purchase_time = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def user_query_repo(client_user):
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=client_user)
    return repo


@pytest.fixture
def ticket_query_use_case(ticket_query_repo, flight_query_repo, user_query_repo):
    return TicketQueryUseCase(
        ticket_query_repo=ticket_query_repo,
        flight_query_repo=flight_query_repo,
        user_query_repo=user_query_repo,
    )


@pytest.mark.unit
class TestFlightSearch:
    @pytest.mark.asyncio
    async def test_search_covers_the_whole_utc_day(self, flight_query_repo):
        """
        Given: A departure date of 2025-06-01 and 2 passengers
        When: Searching Madrid -> Paris
        Then: The repo is queried for [2025-06-01 00:00, 2025-06-02 00:00) UTC with >= 2 seats
        """
        flights = await FlightQueryUseCase(flight_query_repo).search(
            origin='Madrid', destination='Paris', departure_date=date(2025, 6, 1), passengers=2
        )

        assert len(flights) == 1
        flight_query_repo.search.assert_awaited_once_with(
            origin='Madrid',
            destination='Paris',
            departure_from=datetime(2025, 6, 1, tzinfo=timezone.utc),
            departure_to=datetime(2025, 6, 2, tzinfo=timezone.utc),
            min_available_seats=2,
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize('passengers', [None, 0])
    async def test_no_seat_filter_without_passengers(self, flight_query_repo, passengers):
        await FlightQueryUseCase(flight_query_repo).search(
            origin='Madrid', destination='Paris', departure_date=date(2025, 6, 1), passengers=passengers
        )

        assert flight_query_repo.search.call_args.kwargs['min_available_seats'] is None

    @pytest.mark.asyncio
    async def test_negative_passengers_rejected(self, flight_query_repo):
        with pytest.raises(ValidationError):
            await FlightQueryUseCase(flight_query_repo).search(
                origin='Madrid', destination='Paris', departure_date=date(2025, 6, 1), passengers=-1
            )

    @pytest.mark.asyncio
    async def test_get_unknown_flight(self, flight_query_repo):
        flight_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await FlightQueryUseCase(flight_query_repo).get_by_id(404)


@pytest.mark.unit
class TestTicketQuery:
    @pytest.mark.asyncio
    async def test_owner_reads_own_ticket(self, ticket_query_use_case, client_user):
        ticket = await ticket_query_use_case.get_by_id(ticket_id=100, caller=client_user)

        assert ticket.user_id == client_user.id

    @pytest.mark.asyncio
    async def test_other_client_is_forbidden(self, ticket_query_use_case, another_client_user):
        with pytest.raises(ForbiddenError):
            await ticket_query_use_case.get_by_id(ticket_id=100, caller=another_client_user)

    @pytest.mark.asyncio
    async def test_lookup_by_ticket_number_checks_access(
        self, ticket_query_use_case, another_client_user, admin_user
    ):
        number = '7f1c0c1e-5b2a-4f5e-9d62-0e0f8f3c7a11'

        assert await ticket_query_use_case.get_by_ticket_number(
            ticket_number=number, caller=admin_user
        )
        with pytest.raises(ForbiddenError):
            await ticket_query_use_case.get_by_ticket_number(
                ticket_number=number, caller=another_client_user
            )

    @pytest.mark.asyncio
    async def test_unknown_ticket(self, ticket_query_use_case, ticket_query_repo, admin_user):
        ticket_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await ticket_query_use_case.get_by_id(ticket_id=404, caller=admin_user)

    @pytest.mark.asyncio
    async def test_admin_only_listings(self, ticket_query_use_case, client_user):
        with pytest.raises(ForbiddenError):
            await ticket_query_use_case.list_all(caller=client_user)
        with pytest.raises(ForbiddenError):
            await ticket_query_use_case.list_by_user(user_id=3, caller=client_user)
        with pytest.raises(ForbiddenError):
            await ticket_query_use_case.list_by_flight(flight_id=1, caller=client_user)

    @pytest.mark.asyncio
    async def test_list_by_unknown_flight(
        self, ticket_query_use_case, flight_query_repo, admin_user
    ):
        flight_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Flight not found'):
            await ticket_query_use_case.list_by_flight(flight_id=404, caller=admin_user)

    @pytest.mark.asyncio
    async def test_list_mine_by_status_uses_caller(
        self, ticket_query_use_case, ticket_query_repo, client_user
    ):
        await ticket_query_use_case.list_mine_by_status(
            status=TicketStatus.CONFIRMED, caller=client_user
        )

        ticket_query_repo.list_by_user_and_status.assert_awaited_once_with(
            user_id=2, status=TicketStatus.CONFIRMED
        )

    @pytest.mark.asyncio
    async def test_purchase_time_range_must_be_ordered(self, ticket_query_use_case, client_user):
        with pytest.raises(ValidationError):
            await ticket_query_use_case.list_mine_by_purchase_time(
                start=datetime(2025, 6, 2, tzinfo=timezone.utc),
                end=datetime(2025, 6, 1, tzinfo=timezone.utc),
                caller=client_user,
            )

    @pytest.mark.asyncio
    async def test_purchase_time_range(
        self, ticket_query_use_case, ticket_query_repo, client_user
    ):
        start = datetime(2025, 5, 1, tzinfo=timezone.utc)
        end = datetime(2025, 5, 31, tzinfo=timezone.utc)

        await ticket_query_use_case.list_mine_by_purchase_time(
            start=start, end=end, caller=client_user
        )

        ticket_query_repo.list_by_user_and_purchase_time.assert_awaited_once_with(
            user_id=2, start=start, end=end
        )


@pytest.mark.unit
class TestRenderTicketPdf:
    @pytest.mark.asyncio
    async def test_renders_after_access_check(self, ticket_query_use_case, client_user):
        renderer = MagicMock()
        renderer.render.return_value = b'%PDF-1.4 fake'

        ticket, content = await RenderTicketPdfUseCase(
            ticket_query_use_case=ticket_query_use_case, pdf_renderer=renderer
        ).execute(ticket_id=100, caller=client_user)

        assert content == b'%PDF-1.4 fake'
        renderer.render.assert_called_once_with(ticket=ticket)

    @pytest.mark.asyncio
    async def test_forbidden_ticket_is_never_rendered(
        self, ticket_query_use_case, another_client_user
    ):
        renderer = MagicMock()

        with pytest.raises(ForbiddenError):
            await RenderTicketPdfUseCase(
                ticket_query_use_case=ticket_query_use_case, pdf_renderer=renderer
            ).execute(ticket_id=100, caller=another_client_user)

        renderer.render.assert_not_called()


@pytest.mark.unit
class TestUserQuery:
    @pytest.mark.asyncio
    async def test_client_reads_self_only(self, user_query_repo, client_user):
        use_case = UserQueryUseCase(user_query_repo)

        assert (await use_case.get_by_id(user_id=2, caller=client_user)).id == 2
        with pytest.raises(ForbiddenError):
            await use_case.get_by_id(user_id=3, caller=client_user)

    @pytest.mark.asyncio
    async def test_list_by_role_admin_only(self, user_query_repo, client_user, admin_user):
        use_case = UserQueryUseCase(user_query_repo)

        await use_case.list_by_role(role='ADMIN', caller=admin_user)
        user_query_repo.list_by_role.assert_awaited_once_with(UserRole.ADMIN)

        with pytest.raises(ForbiddenError):
            await use_case.list_by_role(role='ADMIN', caller=client_user)

    @pytest.mark.asyncio
    async def test_list_by_invalid_role(self, user_query_repo, admin_user):
        with pytest.raises(ValidationError):
            await UserQueryUseCase(user_query_repo).list_by_role(role='PILOT', caller=admin_user)
