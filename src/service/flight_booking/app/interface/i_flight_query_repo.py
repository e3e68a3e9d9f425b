from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.service.flight_booking.domain.entity.flight_entity import Flight


class IFlightQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, flight_id: int) -> Optional[Flight]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Flight]:
        pass

    @abstractmethod
    async def search(
        self,
        *,
        origin: str,
        destination: str,
        departure_from: datetime,
        departure_to: datetime,
        min_available_seats: Optional[int] = None,
    ) -> List[Flight]:
        """Flights on the route departing in [departure_from, departure_to)"""
        pass
