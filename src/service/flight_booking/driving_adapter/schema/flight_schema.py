from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from src.service.flight_booking.domain.entity.flight_entity import Flight


class FlightRequest(BaseModel):
    """Body for both create and update; available seats are never part of it."""

    flight_number: str = Field(min_length=1, max_length=20)
    origin: str = Field(min_length=1, max_length=100)
    destination: str = Field(min_length=1, max_length=100)
    departure_time: datetime
    arrival_time: datetime
    total_seats: int = Field(gt=0)
    base_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    class Config:
        json_schema_extra = {
            'example': {
                'flight_number': 'IB3170',
                'origin': 'Madrid',
                'destination': 'Paris',
                'departure_time': '2025-06-01T08:00:00Z',
                'arrival_time': '2025-06-01T10:05:00Z',
                'total_seats': 180,
                'base_price': '129.99',
            }
        }


class FlightResponse(BaseModel):
    id: int
    flight_number: str
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    total_seats: int
    available_seats: int
    base_price: Decimal
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, flight: Flight) -> 'FlightResponse':
        return cls(
            id=flight.id or 0,
            flight_number=flight.flight_number,
            origin=flight.origin,
            destination=flight.destination,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            total_seats=flight.total_seats,
            available_seats=flight.available_seats,
            base_price=flight.base_price,
            created_at=flight.created_at,
        )
