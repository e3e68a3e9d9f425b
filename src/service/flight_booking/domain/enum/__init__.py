"""Flight Booking Domain Enums"""

from src.service.flight_booking.domain.enum.notification_type import NotificationType
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus

__all__ = ['NotificationType', 'TicketEventType', 'TicketStatus']
