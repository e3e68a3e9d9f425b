"""Model -> entity conversion shared by the command and query repositories"""

from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.entity.notification_entity import Notification
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.entity.user_entity import UserEntity, UserRole
from src.service.flight_booking.domain.enum.notification_type import NotificationType
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel
from src.service.flight_booking.driven_adapter.model.notification_model import NotificationModel
from src.service.flight_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.flight_booking.driven_adapter.model.user_model import UserModel


def flight_to_entity(flight_model: FlightModel) -> Flight:
    return Flight(
        id=flight_model.id,
        flight_number=flight_model.flight_number,
        origin=flight_model.origin,
        destination=flight_model.destination,
        departure_time=flight_model.departure_time,
        arrival_time=flight_model.arrival_time,
        total_seats=flight_model.total_seats,
        available_seats=flight_model.available_seats,
        base_price=flight_model.base_price,
        created_at=flight_model.created_at,
    )


def ticket_to_entity(ticket_model: TicketModel, *, include_flight: bool = True) -> Ticket:
    """include_flight=False skips the relationship, for rows that were just flushed."""
    return Ticket(
        id=ticket_model.id,
        ticket_number=ticket_model.ticket_number,
        flight_id=ticket_model.flight_id,
        user_id=ticket_model.user_id,
        passenger_name=ticket_model.passenger_name,
        passenger_email=ticket_model.passenger_email,
        seat_number=ticket_model.seat_number,
        price=ticket_model.price,
        purchase_time=ticket_model.purchase_time,
        status=TicketStatus(ticket_model.status),
        flight=(
            flight_to_entity(ticket_model.flight)
            if include_flight and ticket_model.flight
            else None
        ),
    )


def user_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        first_name=user_model.first_name,
        last_name=user_model.last_name,
        phone=user_model.phone,
        hashed_password=user_model.hashed_password,
        role=UserRole(user_model.role),
        created_at=user_model.created_at,
    )


def notification_to_entity(notification_model: NotificationModel) -> Notification:
    return Notification(
        id=notification_model.id,
        user_id=notification_model.user_id,
        ticket_id=notification_model.ticket_id,
        message=notification_model.message,
        type=NotificationType(notification_model.type),
        seen=notification_model.seen,
        created_at=notification_model.created_at,
    )
