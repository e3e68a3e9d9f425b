"""
Integration tests for the read side: model -> entity mapping and the range queries
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.service.flight_booking.domain.enum.ticket_status import TicketStatus


DAY = datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.mark.integration
class TestTicketMapping:
    @pytest.mark.asyncio
    async def test_ticket_comes_back_with_its_flight_snapshot(
        self, seed_flight, seed_user, book, ticket_query_repo
    ):
        """
        Given: A booked ticket without an explicit price
        When: It is read back by id and by ticket number
        Then: Both carry the flight's number and route, the base price and RESERVED status
        """
        flight = await seed_flight(origin='Lisbon', destination='Berlin')
        user = await seed_user()
        booked = await book(flight=flight, user=user, seat_number='14C')

        by_id = await ticket_query_repo.get_by_id(ticket_id=booked.id)
        by_number = await ticket_query_repo.get_by_ticket_number(
            ticket_number=booked.ticket_number
        )

        assert by_id == by_number
        assert by_id.flight.flight_number == flight.flight_number
        assert (by_id.flight.origin, by_id.flight.destination) == ('Lisbon', 'Berlin')
        assert by_id.price == Decimal('129.99')
        assert by_id.status == TicketStatus.RESERVED
        assert by_id.seat_number == '14C'
        assert by_id.purchase_time.tzinfo is not None

    @pytest.mark.asyncio
    async def test_explicit_price_is_kept(self, seed_flight, seed_user, book, ticket_query_repo):
        flight = await seed_flight()
        ticket = await book(flight=flight, user=await seed_user(), price=Decimal('75.50'))

        stored = await ticket_query_repo.get_by_id(ticket_id=ticket.id)

        assert stored.price == Decimal('75.50')

    @pytest.mark.asyncio
    async def test_ticket_numbers_are_unique(self, seed_flight, seed_user, book):
        flight = await seed_flight()
        user = await seed_user()

        numbers = {(await book(flight=flight, user=user)).ticket_number for _ in range(3)}

        assert len(numbers) == 3


@pytest.mark.integration
class TestFlightSearch:
    @pytest.mark.asyncio
    async def test_departure_window_is_half_open(self, seed_flight, flight_query_repo):
        """
        Given: Madrid -> Paris flights at 00:00 and 23:59 on one day and 00:00 the next
        When: Searching [day, day + 1)
        Then: Only the two same-day flights come back, in departure order
        """
        hour = timedelta(hours=1)
        early = await seed_flight(departure_time=DAY, arrival_time=DAY + hour)
        late_departure = DAY + timedelta(hours=23, minutes=59)
        late = await seed_flight(
            departure_time=late_departure, arrival_time=late_departure + hour
        )
        next_day = DAY + timedelta(days=1)
        await seed_flight(departure_time=next_day, arrival_time=next_day + hour)

        flights = await flight_query_repo.search(
            origin='Madrid',
            destination='Paris',
            departure_from=DAY,
            departure_to=DAY + timedelta(days=1),
        )

        assert [f.id for f in flights] == [early.id, late.id]

    @pytest.mark.asyncio
    async def test_min_available_seats_filter(
        self, seed_flight, seed_user, book, flight_query_repo
    ):
        small = await seed_flight(total_seats=1)
        large = await seed_flight(total_seats=5)
        await book(flight=small, user=await seed_user())

        flights = await flight_query_repo.search(
            origin='Madrid',
            destination='Paris',
            departure_from=DAY,
            departure_to=DAY + timedelta(days=1),
            min_available_seats=1,
        )

        assert [f.id for f in flights] == [large.id]


@pytest.mark.integration
class TestPurchaseDateRange:
    @pytest.mark.asyncio
    async def test_only_the_callers_tickets_inside_the_range(
        self, seed_flight, seed_user, book, ticket_query_repo
    ):
        flight = await seed_flight()
        owner, other = await seed_user(), await seed_user()
        mine = await book(flight=flight, user=owner)
        await book(flight=flight, user=other)
        now = datetime.now(timezone.utc)

        inside = await ticket_query_repo.list_by_user_and_purchase_time(
            user_id=owner.id, start=now - timedelta(hours=1), end=now + timedelta(hours=1)
        )
        later = await ticket_query_repo.list_by_user_and_purchase_time(
            user_id=owner.id, start=now + timedelta(hours=1), end=now + timedelta(hours=2)
        )

        assert [t.id for t in inside] == [mine.id]
        assert later == []
