from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
import uuid

import attrs

from src.platform.exception.exceptions import DomainError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus


# Allowed lifecycle transitions: current status -> reachable statuses
_TRANSITIONS: dict[TicketStatus, frozenset[TicketStatus]] = {
    TicketStatus.RESERVED: frozenset({TicketStatus.CONFIRMED, TicketStatus.CANCELLED}),
    TicketStatus.CONFIRMED: frozenset({TicketStatus.CANCELLED}),
    TicketStatus.CANCELLED: frozenset(),
}


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f'Ticket {attribute.name} cannot be empty')


def generate_ticket_number() -> str:
    return str(uuid.uuid4())


@attrs.define
class Ticket:
    ticket_number: str
    flight_id: int
    user_id: int
    passenger_name: str = attrs.field(validator=_validate_non_empty_string)
    passenger_email: str = attrs.field(validator=_validate_non_empty_string)
    seat_number: str = attrs.field(validator=_validate_non_empty_string)
    price: Decimal = attrs.field(converter=Decimal)
    purchase_time: datetime
    status: TicketStatus = TicketStatus.RESERVED
    id: Optional[int] = None
    # Read-side snapshot of the owning flight, filled in by query repos
    flight: Optional[Flight] = attrs.field(default=None, eq=False)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        flight: Flight,
        user_id: int,
        passenger_name: str,
        passenger_email: str,
        seat_number: str,
        price: Optional[Decimal] = None,
    ) -> 'Ticket':
        """
        Create a RESERVED ticket with a fresh ticket number.

        Price is a snapshot taken at purchase time and defaults to the flight's base price.
        """
        if flight.id is None:
            raise DomainError('Cannot book a ticket on an unsaved flight')
        if price is not None and price < 0:
            raise ValidationError('Ticket price cannot be negative')

        return cls(
            ticket_number=generate_ticket_number(),
            flight_id=flight.id,
            user_id=user_id,
            passenger_name=passenger_name,
            passenger_email=passenger_email,
            seat_number=seat_number,
            price=flight.base_price if price is None else price,
            purchase_time=datetime.now(timezone.utc),
            status=TicketStatus.RESERVED,
            flight=flight,
        )

    def can_transition_to(self, target: TicketStatus) -> bool:
        return target in _TRANSITIONS[self.status]

    def _transition_to(self, target: TicketStatus) -> 'Ticket':
        if not self.can_transition_to(target):
            raise DomainError(f'Cannot change ticket status from {self.status} to {target}')
        return attrs.evolve(self, status=target)

    @Logger.io
    def confirm(self) -> 'Ticket':
        """
        Raises:
            DomainError: When the ticket is not RESERVED
        """
        if self.status == TicketStatus.CONFIRMED:
            raise DomainError('Ticket already confirmed')
        if self.status == TicketStatus.CANCELLED:
            raise DomainError('Cannot confirm a cancelled ticket')
        return self._transition_to(TicketStatus.CONFIRMED)

    @Logger.io
    def cancel(self) -> 'Ticket':
        """
        Raises:
            DomainError: When the ticket is already cancelled
        """
        if self.status == TicketStatus.CANCELLED:
            raise DomainError('Ticket already cancelled')
        return self._transition_to(TicketStatus.CANCELLED)

    @Logger.io
    def update_passenger_details(
        self,
        *,
        passenger_name: Optional[str] = None,
        passenger_email: Optional[str] = None,
        seat_number: Optional[str] = None,
    ) -> 'Ticket':
        """Apply only the supplied fields; status is never touched here."""
        changes = {
            key: value
            for key, value in (
                ('passenger_name', passenger_name),
                ('passenger_email', passenger_email),
                ('seat_number', seat_number),
            )
            if value is not None
        }
        return attrs.evolve(self, **changes)

    def is_owned_by(self, user_id: Optional[int]) -> bool:
        return user_id is not None and self.user_id == user_id
