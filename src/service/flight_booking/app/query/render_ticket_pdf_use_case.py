from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_ticket_pdf_renderer import ITicketPdfRenderer
from src.service.flight_booking.app.query.ticket_query_use_case import TicketQueryUseCase
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.entity.user_entity import UserEntity


class RenderTicketPdfUseCase:
    def __init__(
        self, *, ticket_query_use_case: TicketQueryUseCase, pdf_renderer: ITicketPdfRenderer
    ) -> None:
        self.ticket_query_use_case = ticket_query_use_case
        self.pdf_renderer = pdf_renderer

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
        pdf_renderer: ITicketPdfRenderer = Depends(Provide[Container.pdf_renderer]),
    ) -> Self:
        return cls(ticket_query_use_case=ticket_query_use_case, pdf_renderer=pdf_renderer)

    @Logger.io
    async def execute(self, *, ticket_id: int, caller: UserEntity) -> tuple[Ticket, bytes]:
        ticket = await self.ticket_query_use_case.get_by_id(ticket_id=ticket_id, caller=caller)
        content = self.pdf_renderer.render(ticket=ticket)

        Logger.base.info(f'🧾 [TICKET-PDF] {ticket.ticket_number}: {len(content)} bytes')
        return ticket, content
