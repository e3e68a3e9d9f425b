from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.flight_booking.app.interface.i_email_sender import IEmailSender
from src.service.flight_booking.app.interface.i_notification_command_repo import (
    INotificationCommandRepo,
)
from src.service.flight_booking.app.interface.i_ticket_observer import ITicketObserver
from src.service.flight_booking.app.observer.ticket_subject import TicketSubject
from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.enum.notification_type import NotificationType
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType


EMAIL_SUBJECT = 'Flight Ticket Notification'


def build_notification_content(
    *, ticket: Ticket, event_type: TicketEventType | str
) -> tuple[str, NotificationType]:
    """Map a lifecycle event to its message text and notification type."""
    flight = ticket.flight
    flight_number = flight.flight_number if flight else str(ticket.flight_id)
    prefix = f'Your ticket #{ticket.ticket_number} for flight {flight_number}'

    if event_type == TicketEventType.CREATED:
        route = (
            f' Departing from {flight.origin} to {flight.destination} '
            f'on {flight.departure_time.date().isoformat()}.'
            if flight
            else ''
        )
        return f'{prefix} has been created.{route}', NotificationType.TICKET_CONFIRMATION
    if event_type == TicketEventType.CONFIRMED:
        return (
            f'{prefix} has been confirmed. Seat number: {ticket.seat_number}. '
            'Please arrive at the airport at least 2 hours before departure.',
            NotificationType.TICKET_CONFIRMATION,
        )
    if event_type == TicketEventType.CANCELLED:
        return (
            f'{prefix} has been cancelled. '
            'If you did not cancel this ticket, please contact customer support.',
            NotificationType.TICKET_CANCELLATION,
        )
    if event_type == TicketEventType.UPDATED:
        return (
            f'{prefix} has been updated. Please check your account for details.',
            NotificationType.GENERAL,
        )
    return f'There has been an update to your ticket #{ticket.ticket_number}', NotificationType.GENERAL


class NotificationGenerator(ITicketObserver):
    """
    Turns ticket lifecycle events into notification records and passenger emails.

    Subscribes itself to the given TicketSubject on construction. The notification
    record is written first; the email is best effort and a delivery failure is
    logged without reaching the caller.
    """

    def __init__(
        self,
        *,
        ticket_subject: TicketSubject,
        notification_command_repo: INotificationCommandRepo,
        email_sender: IEmailSender,
    ) -> None:
        self.notification_command_repo = notification_command_repo
        self.email_sender = email_sender
        ticket_subject.register_observer(self)

    @Logger.io
    async def update(self, ticket: Ticket, event_type: TicketEventType) -> None:
        message, notification_type = build_notification_content(
            ticket=ticket, event_type=event_type
        )

        try:
            notification = await self.notification_command_repo.create(
                notification=Notification.create(
                    user_id=ticket.user_id,
                    message=message,
                    notification_type=notification_type,
                    ticket_id=ticket.id,
                )
            )
        except Exception:
            metrics.record_notification(channel='record', result='failure')
            raise
        metrics.record_notification(channel='record', result='success')

        Logger.base.info(
            f'🔔 [NOTIFY] {event_type} notification {notification.id} '
            f'for user {ticket.user_id}, ticket {ticket.ticket_number}'
        )

        await self._send_email(to=ticket.passenger_email, body=message)

    async def _send_email(self, *, to: str, body: str) -> None:
        try:
            sent = await self.email_sender.send_email(to=to, subject=EMAIL_SUBJECT, body=body)
        except Exception as e:
            sent = False
            Logger.base.warning(f'📧 [NOTIFY] Email to {to} failed: {type(e).__name__}: {e}')

        metrics.record_notification(channel='email', result='success' if sent else 'failure')
