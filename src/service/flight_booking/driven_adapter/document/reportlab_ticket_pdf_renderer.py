from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from src.platform.exception.exceptions import DocumentRenderError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_ticket_pdf_renderer import ITicketPdfRenderer
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.entity.ticket_entity import Ticket


PDF_DATE_TIME_FORMAT = '%d-%m-%Y %H:%M'
TERMS_TEXT = (
    'Please arrive at the airport at least 2 hours before departure. '
    'This ticket is non-refundable and cannot be transferred to another person. '
    'Flight schedules are subject to change without prior notice.'
)


class ReportlabTicketPdfRenderer(ITicketPdfRenderer):
    """Boarding pass as a single A4 page built with reportlab platypus."""

    @Logger.io
    def render(self, *, ticket: Ticket) -> bytes:
        if ticket.flight is None:
            raise DocumentRenderError('Ticket has no flight details to render')

        try:
            buffer = BytesIO()
            doc = SimpleDocTemplate(
                buffer, pagesize=A4, title=f'Boarding pass {ticket.ticket_number}'
            )
            doc.build(self._build_story(ticket, ticket.flight))
            return buffer.getvalue()
        except DocumentRenderError:
            raise
        except Exception as e:
            raise DocumentRenderError(f'Failed to render ticket PDF: {e}') from e

    def _build_story(self, ticket: Ticket, flight: Flight) -> list:
        styles = getSampleStyleSheet()

        rows = [
            ['Flight', flight.flight_number],
            ['Route', f'{flight.origin} → {flight.destination}'],
            ['Passenger', ticket.passenger_name],
            ['Seat', ticket.seat_number],
            ['Departure', flight.departure_time.strftime(PDF_DATE_TIME_FORMAT)],
            ['Arrival', flight.arrival_time.strftime(PDF_DATE_TIME_FORMAT)],
            ['Ticket #', ticket.ticket_number],
            ['Price', f'${ticket.price:.2f}'],
            ['Status', ticket.status.value],
        ]
        table = Table(rows, colWidths=[1.5 * inch, 4.5 * inch])
        table.setStyle(
            TableStyle(
                [
                    ('GRID', (0, 0), (-1, -1), 1, colors.black),
                    ('BACKGROUND', (0, 0), (0, -1), colors.lightgrey),
                    ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
                    ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
                ]
            )
        )

        return [
            Paragraph('BOARDING PASS', styles['Title']),
            Spacer(1, 0.3 * inch),
            table,
            Spacer(1, 0.4 * inch),
            Paragraph(f'*{ticket.ticket_number}*', styles['Code']),
            Spacer(1, 0.3 * inch),
            Paragraph(TERMS_TEXT, styles['Italic']),
        ]
