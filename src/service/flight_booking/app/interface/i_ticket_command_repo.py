from abc import ABC, abstractmethod
from typing import Optional

from src.service.flight_booking.domain.entity.ticket_entity import Ticket


class ITicketCommandRepo(ABC):
    """Ticket write repository, bound to a unit-of-work session"""

    @abstractmethod
    async def get_by_id_for_update(self, *, ticket_id: int) -> Optional[Ticket]:
        """Load a ticket (with its flight snapshot) and hold its row lock"""
        pass

    @abstractmethod
    async def create(self, *, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    async def update(self, *, ticket: Ticket) -> Ticket:
        pass
