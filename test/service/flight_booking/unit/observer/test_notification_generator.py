"""
Unit tests for NotificationGenerator

Each lifecycle event becomes exactly one notification record for the ticket owner
plus a best-effort email to the passenger.
"""

from unittest.mock import AsyncMock

import attrs
import pytest

from src.service.flight_booking.app.observer.notification_generator import (
    EMAIL_SUBJECT,
    NotificationGenerator,
    build_notification_content,
)
from src.service.flight_booking.app.observer.ticket_subject import TicketSubject
from src.service.flight_booking.domain.enum.notification_type import NotificationType
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType
from test.service.flight_booking.unit.test_helpers import make_ticket


TICKET_NUMBER = '7f1c0c1e-5b2a-4f5e-9d62-0e0f8f3c7a11'


@pytest.fixture
def notification_command_repo():
    repo = AsyncMock()
    repo.create = AsyncMock(side_effect=lambda *, notification: attrs.evolve(notification, id=7))
    return repo


@pytest.fixture
def email_sender():
    sender = AsyncMock()
    sender.send_email = AsyncMock(return_value=True)
    return sender


@pytest.fixture
def subject():
    return TicketSubject()


@pytest.fixture
def generator(subject, notification_command_repo, email_sender):
    return NotificationGenerator(
        ticket_subject=subject,
        notification_command_repo=notification_command_repo,
        email_sender=email_sender,
    )


@pytest.mark.unit
class TestBuildNotificationContent:
    def test_created_mentions_route_and_date(self):
        message, notification_type = build_notification_content(
            ticket=make_ticket(), event_type=TicketEventType.CREATED
        )

        assert message == (
            f'Your ticket #{TICKET_NUMBER} for flight IB3170 has been created. '
            'Departing from Madrid to Paris on 2025-06-01.'
        )
        assert notification_type == NotificationType.TICKET_CONFIRMATION

    def test_confirmed_mentions_seat(self):
        message, notification_type = build_notification_content(
            ticket=make_ticket(), event_type=TicketEventType.CONFIRMED
        )

        assert 'has been confirmed. Seat number: 12A.' in message
        assert notification_type == NotificationType.TICKET_CONFIRMATION

    def test_cancelled(self):
        message, notification_type = build_notification_content(
            ticket=make_ticket(), event_type=TicketEventType.CANCELLED
        )

        assert 'has been cancelled.' in message
        assert notification_type == NotificationType.TICKET_CANCELLATION

    def test_updated(self):
        message, notification_type = build_notification_content(
            ticket=make_ticket(), event_type=TicketEventType.UPDATED
        )

        assert 'has been updated.' in message
        assert notification_type == NotificationType.GENERAL

    def test_unknown_event_falls_back_to_general(self):
        message, notification_type = build_notification_content(
            ticket=make_ticket(), event_type='REFUNDED'
        )

        assert message == f'There has been an update to your ticket #{TICKET_NUMBER}'
        assert notification_type == NotificationType.GENERAL

    def test_missing_flight_snapshot_uses_flight_id(self):
        ticket = attrs.evolve(make_ticket(), flight=None)

        message, _ = build_notification_content(ticket=ticket, event_type=TicketEventType.CREATED)

        assert message == f'Your ticket #{TICKET_NUMBER} for flight 1 has been created.'


@pytest.mark.unit
class TestNotificationGenerator:
    def test_subscribes_itself_on_construction(self, subject, generator):
        assert subject.observers == (generator,)

    @pytest.mark.asyncio
    async def test_persists_notification_and_sends_email(
        self, subject, generator, notification_command_repo, email_sender
    ):
        """
        Given: A generator subscribed to the subject
        When: A CANCELLED event is published
        Then: One unseen notification for the owner is stored and one email goes out
        """
        ticket = make_ticket(user_id=2)

        await subject.notify_observers(ticket, TicketEventType.CANCELLED)

        notification_command_repo.create.assert_awaited_once()
        stored = notification_command_repo.create.call_args.kwargs['notification']
        assert stored.user_id == 2
        assert stored.ticket_id == ticket.id
        assert stored.type == NotificationType.TICKET_CANCELLATION
        assert stored.seen is False

        email_sender.send_email.assert_awaited_once()
        email_kwargs = email_sender.send_email.call_args.kwargs
        assert email_kwargs['to'] == 'jane.doe@example.com'
        assert email_kwargs['subject'] == EMAIL_SUBJECT
        assert email_kwargs['body'] == stored.message

    @pytest.mark.asyncio
    async def test_email_failure_does_not_propagate(
        self, generator, notification_command_repo, email_sender
    ):
        email_sender.send_email.side_effect = ConnectionError('smtp down')

        await generator.update(make_ticket(), TicketEventType.CONFIRMED)

        notification_command_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_record_failure_skips_email(
        self, generator, notification_command_repo, email_sender
    ):
        notification_command_repo.create.side_effect = RuntimeError('db down')

        with pytest.raises(RuntimeError):
            await generator.update(make_ticket(), TicketEventType.CONFIRMED)

        email_sender.send_email.assert_not_awaited()
