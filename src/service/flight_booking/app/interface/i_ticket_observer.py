from abc import ABC, abstractmethod

from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType


class ITicketObserver(ABC):
    """Receives ticket lifecycle events from TicketSubject"""

    @abstractmethod
    async def update(self, ticket: Ticket, event_type: TicketEventType) -> None:
        pass
