from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus


class ITicketQueryRepo(ABC):
    """Ticket read repository; every returned ticket carries its flight snapshot"""

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def get_by_ticket_number(self, *, ticket_number: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_by_flight(self, *, flight_id: int) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_by_user_and_status(self, *, user_id: int, status: TicketStatus) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_by_user_and_purchase_time(
        self, *, user_id: int, start: datetime, end: datetime
    ) -> List[Ticket]:
        pass
