from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_ticket_observer import ITicketObserver
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.enum.ticket_event_type import TicketEventType


class TicketSubject:
    """
    Publisher side of the ticket lifecycle fan-out.

    Observers are registered once at composition time and awaited one after another,
    in registration order, on every lifecycle event. A failing observer is logged and
    skipped; it never interrupts the remaining observers or the publishing use case.
    """

    def __init__(self) -> None:
        self._observers: List[ITicketObserver] = []

    @property
    def observers(self) -> tuple[ITicketObserver, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: ITicketObserver) -> None:
        if any(existing is observer for existing in self._observers):
            return
        self._observers.append(observer)
        Logger.base.info(f'👂 [OBSERVER] Registered {type(observer).__name__}')

    def remove_observer(self, observer: ITicketObserver) -> None:
        self._observers = [existing for existing in self._observers if existing is not observer]

    async def notify_observers(self, ticket: Ticket, event_type: TicketEventType) -> None:
        for observer in list(self._observers):
            try:
                await observer.update(ticket, event_type)
            except Exception as e:
                Logger.base.opt(exception=e).error(
                    f'❌ [OBSERVER] {type(observer).__name__} failed on {event_type} '
                    f'for ticket {ticket.ticket_number}: {e}'
                )
