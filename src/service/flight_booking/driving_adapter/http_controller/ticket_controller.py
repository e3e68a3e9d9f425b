from typing import List

from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.flight_booking.app.command.confirm_ticket_use_case import ConfirmTicketUseCase
from src.service.flight_booking.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.flight_booking.app.command.update_ticket_use_case import UpdateTicketUseCase
from src.service.flight_booking.app.query.render_ticket_pdf_use_case import (
    RenderTicketPdfUseCase,
)
from src.service.flight_booking.app.query.ticket_query_use_case import TicketQueryUseCase
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.flight_booking.driving_adapter.http_controller.query_param import (
    parse_date_time,
)
from src.service.flight_booking.driving_adapter.schema.ticket_schema import (
    TicketCreateRequest,
    TicketResponse,
    TicketUpdateRequest,
)


router = APIRouter()

# Static paths are declared before /{ticket_id} so they are matched first


@router.get('')
@Logger.io
async def list_tickets(
    current_user: UserEntity = Depends(require_admin),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_all(caller=current_user)
    return [TicketResponse.from_entity(t) for t in tickets]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket(
    request: TicketCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(
        flight_id=request.flight_id,
        user_id=request.user_id if request.user_id is not None else current_user.id or 0,
        passenger_name=request.passenger_name,
        passenger_email=request.passenger_email,
        seat_number=request.seat_number,
        price=request.price,
        caller=current_user,
    )
    return TicketResponse.from_entity(ticket)


@router.get('/my-tickets')
@Logger.io
async def list_my_tickets(
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_mine(caller=current_user)
    return [TicketResponse.from_entity(t) for t in tickets]


@router.get('/status/{ticket_status}')
@Logger.io
async def list_my_tickets_by_status(
    ticket_status: TicketStatus,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_mine_by_status(status=ticket_status, caller=current_user)
    return [TicketResponse.from_entity(t) for t in tickets]


@router.get('/date-range')
@Logger.io
async def list_my_tickets_by_date_range(
    start: str,
    end: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_mine_by_purchase_time(
        start=parse_date_time(start, name='start'),
        end=parse_date_time(end, name='end'),
        caller=current_user,
    )
    return [TicketResponse.from_entity(t) for t in tickets]


@router.get('/number/{ticket_number}')
@Logger.io
async def get_ticket_by_number(
    ticket_number: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get_by_ticket_number(ticket_number=ticket_number, caller=current_user)
    return TicketResponse.from_entity(ticket)


@router.get('/user/{user_id}')
@Logger.io
async def list_tickets_by_user(
    user_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_by_user(user_id=user_id, caller=current_user)
    return [TicketResponse.from_entity(t) for t in tickets]


@router.get('/flight/{flight_id}')
@Logger.io
async def list_tickets_by_flight(
    flight_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_by_flight(flight_id=flight_id, caller=current_user)
    return [TicketResponse.from_entity(t) for t in tickets]


@router.get('/{ticket_id}')
@Logger.io
async def get_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: TicketQueryUseCase = Depends(TicketQueryUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get_by_id(ticket_id=ticket_id, caller=current_user)
    return TicketResponse.from_entity(ticket)


@router.post('/{ticket_id}/confirm')
@Logger.io
async def confirm_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ConfirmTicketUseCase = Depends(ConfirmTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, caller=current_user)
    return TicketResponse.from_entity(ticket)


@router.post('/{ticket_id}/cancel')
@Logger.io
async def cancel_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CancelTicketUseCase = Depends(CancelTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(ticket_id=ticket_id, caller=current_user)
    return TicketResponse.from_entity(ticket)


@router.put('/{ticket_id}')
@Logger.io
async def update_ticket(
    ticket_id: int,
    request: TicketUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateTicketUseCase = Depends(UpdateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.execute(
        ticket_id=ticket_id,
        caller=current_user,
        passenger_name=request.passenger_name,
        passenger_email=request.passenger_email,
        seat_number=request.seat_number,
    )
    return TicketResponse.from_entity(ticket)


@router.get('/{ticket_id}/pdf')
@Logger.io
async def download_ticket_pdf(
    ticket_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: RenderTicketPdfUseCase = Depends(RenderTicketPdfUseCase.depends),
) -> Response:
    ticket, content = await use_case.execute(ticket_id=ticket_id, caller=current_user)
    return Response(
        content=content,
        media_type='application/pdf',
        headers={
            'Content-Disposition': f'attachment; filename=ticket_{ticket.ticket_number}.pdf'
        },
    )
