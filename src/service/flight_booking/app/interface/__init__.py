"""Application layer interfaces (Ports)"""

from src.service.flight_booking.app.interface.i_email_sender import IEmailSender
from src.service.flight_booking.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.app.interface.i_notification_command_repo import (
    INotificationCommandRepo,
)
from src.service.flight_booking.app.interface.i_notification_query_repo import (
    INotificationQueryRepo,
)
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.flight_booking.app.interface.i_ticket_observer import ITicketObserver
from src.service.flight_booking.app.interface.i_ticket_pdf_renderer import ITicketPdfRenderer
from src.service.flight_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.flight_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IEmailSender',
    'IFlightCommandRepo',
    'IFlightQueryRepo',
    'INotificationCommandRepo',
    'INotificationQueryRepo',
    'IPasswordHasher',
    'ITicketCommandRepo',
    'ITicketObserver',
    'ITicketPdfRenderer',
    'ITicketQueryRepo',
    'IUserCommandRepo',
    'IUserQueryRepo',
]
