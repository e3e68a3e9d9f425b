"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.model.notification_model import NotificationModel
from src.service.flight_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.flight_booking.driven_adapter.model.user_model import UserModel

__all__ = [
    'FlightModel',
    'NotificationModel',
    'TicketModel',
    'UserModel',
]
