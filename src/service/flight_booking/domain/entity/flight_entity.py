from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import CapacityExceededError, ValidationError
from src.platform.logging.loguru_io import Logger


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f'Flight {attribute.name} cannot be empty')


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValidationError(f'Flight {attribute.name} must be positive')


def _validate_non_negative_price(instance: object, attribute: attrs.Attribute, value: Decimal) -> None:
    if value < 0:
        raise ValidationError('Flight base_price cannot be negative')


@attrs.define
class Flight:
    flight_number: str = attrs.field(validator=_validate_non_empty_string)
    origin: str = attrs.field(validator=_validate_non_empty_string)
    destination: str = attrs.field(validator=_validate_non_empty_string)
    departure_time: datetime
    arrival_time: datetime
    total_seats: int = attrs.field(validator=_validate_positive)
    available_seats: int
    base_price: Decimal = attrs.field(converter=Decimal, validator=_validate_non_negative_price)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        if not 0 <= self.available_seats <= self.total_seats:
            raise ValidationError('available_seats must be between 0 and total_seats')
        if self.arrival_time <= self.departure_time:
            raise ValidationError('arrival_time must be after departure_time')

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        flight_number: str,
        origin: str,
        destination: str,
        departure_time: datetime,
        arrival_time: datetime,
        total_seats: int,
        base_price: Decimal,
    ) -> 'Flight':
        """A new flight starts with every seat available."""
        return cls(
            flight_number=flight_number,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
            total_seats=total_seats,
            available_seats=total_seats,
            base_price=base_price,
        )

    # ========== Seat inventory ==========

    def has_available_seats(self) -> bool:
        return self.available_seats > 0

    @Logger.io
    def decrement_available_seats(self) -> 'Flight':
        """
        Take one seat out of the pool.

        Raises:
            CapacityExceededError: When the flight is sold out
        """
        if not self.has_available_seats():
            raise CapacityExceededError()
        return attrs.evolve(self, available_seats=self.available_seats - 1)

    @Logger.io
    def increment_available_seats(self) -> 'Flight':
        """Return one seat to the pool; never exceeds total_seats."""
        if self.available_seats >= self.total_seats:
            return self
        return attrs.evolve(self, available_seats=self.available_seats + 1)

    # ========== General update ==========

    @Logger.io
    def update_details(
        self,
        *,
        flight_number: str,
        origin: str,
        destination: str,
        departure_time: datetime,
        arrival_time: datetime,
        total_seats: int,
        base_price: Decimal,
    ) -> 'Flight':
        """
        Replace the schedule and pricing fields.

        available_seats is owned by seat inventory and is carried over as-is, so the
        new capacity may not drop below the seats that are still available.
        """
        if total_seats < self.available_seats:
            raise ValidationError(
                f'total_seats cannot be lower than the {self.available_seats} seats still available'
            )
        return attrs.evolve(
            self,
            flight_number=flight_number,
            origin=origin,
            destination=destination,
            departure_time=departure_time,
            arrival_time=arrival_time,
            total_seats=total_seats,
            base_price=base_price,
        )
