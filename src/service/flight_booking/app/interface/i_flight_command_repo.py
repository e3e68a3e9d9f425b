from abc import ABC, abstractmethod
from typing import Optional

from src.service.flight_booking.domain.entity.flight_entity import Flight


class IFlightCommandRepo(ABC):
    """Flight write repository, bound to a unit-of-work session"""

    @abstractmethod
    async def get_by_id_for_update(self, *, flight_id: int) -> Optional[Flight]:
        """Load a flight and hold its row lock until the transaction ends"""
        pass

    @abstractmethod
    async def get_by_ticket_id_for_update(self, *, ticket_id: int) -> Optional[Flight]:
        """Lock the flight a ticket belongs to; None when the ticket does not exist"""
        pass

    @abstractmethod
    async def exists_by_flight_number(
        self, *, flight_number: str, exclude_flight_id: Optional[int] = None
    ) -> bool:
        pass

    @abstractmethod
    async def create(self, *, flight: Flight) -> Flight:
        pass

    @abstractmethod
    async def update(self, *, flight: Flight) -> Flight:
        pass

    @abstractmethod
    async def delete(self, *, flight_id: int) -> bool:
        """Delete a flight; its tickets are removed by cascade"""
        pass
