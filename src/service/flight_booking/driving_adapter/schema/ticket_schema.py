from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus


class TicketCreateRequest(BaseModel):
    flight_id: int
    user_id: Optional[int] = None  # Defaults to the caller
    passenger_name: str = Field(min_length=1, max_length=255)
    passenger_email: EmailStr
    seat_number: str = Field(min_length=1, max_length=10)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)

    class Config:
        json_schema_extra = {
            'example': {
                'flight_id': 1,
                'passenger_name': 'Jane Doe',
                'passenger_email': 'jane.doe@example.com',
                'seat_number': '12A',
            }
        }


class TicketUpdateRequest(BaseModel):
    passenger_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    passenger_email: Optional[EmailStr] = None
    seat_number: Optional[str] = Field(default=None, min_length=1, max_length=10)

    class Config:
        json_schema_extra = {'example': {'seat_number': '14C'}}


class TicketResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'ticket_number': '7f1c0c1e-5b2a-4f5e-9d62-0e0f8f3c7a11',
                'flight_id': 1,
                'user_id': 2,
                'passenger_name': 'Jane Doe',
                'passenger_email': 'jane.doe@example.com',
                'seat_number': '12A',
                'price': '129.99',
                'purchase_time': '2025-05-01T09:12:00Z',
                'status': 'RESERVED',
                'flight_number': 'IB3170',
                'origin': 'Madrid',
                'destination': 'Paris',
                'departure_time': '2025-06-01T08:00:00Z',
                'arrival_time': '2025-06-01T10:05:00Z',
            }
        }
    }

    id: int
    ticket_number: str
    flight_id: int
    user_id: int
    passenger_name: str
    passenger_email: str
    seat_number: str
    price: Decimal
    purchase_time: datetime
    status: TicketStatus
    # Flight snapshot for display
    flight_number: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None

    @classmethod
    def from_entity(cls, ticket: Ticket) -> 'TicketResponse':
        flight = ticket.flight
        return cls(
            id=ticket.id or 0,
            ticket_number=ticket.ticket_number,
            flight_id=ticket.flight_id,
            user_id=ticket.user_id,
            passenger_name=ticket.passenger_name,
            passenger_email=ticket.passenger_email,
            seat_number=ticket.seat_number,
            price=ticket.price,
            purchase_time=ticket.purchase_time,
            status=ticket.status,
            flight_number=flight.flight_number if flight else None,
            origin=flight.origin if flight else None,
            destination=flight.destination if flight else None,
            departure_time=flight.departure_time if flight else None,
            arrival_time=flight.arrival_time if flight else None,
        )
