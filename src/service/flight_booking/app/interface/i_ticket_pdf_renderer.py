from abc import ABC, abstractmethod

from src.service.flight_booking.domain.entity.ticket_entity import Ticket


class ITicketPdfRenderer(ABC):
    @abstractmethod
    def render(self, *, ticket: Ticket) -> bytes:
        """Render a boarding pass; raises DocumentRenderError on failure"""
        pass
