from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.create_flight_use_case import CreateFlightUseCase
from src.service.flight_booking.app.command.delete_flight_use_case import DeleteFlightUseCase
from src.service.flight_booking.app.command.update_flight_use_case import UpdateFlightUseCase
from src.service.flight_booking.app.query.flight_query_use_case import FlightQueryUseCase
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from src.service.flight_booking.driving_adapter.schema.flight_schema import (
    FlightRequest,
    FlightResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_flights(
    use_case: FlightQueryUseCase = Depends(FlightQueryUseCase.depends),
) -> List[FlightResponse]:
    flights = await use_case.list_all()
    return [FlightResponse.from_entity(f) for f in flights]


@router.get('/search')
@Logger.io
async def search_flights(
    origin: str,
    destination: str,
    departure_date: date,
    passengers: Optional[int] = Query(default=None, ge=0),
    use_case: FlightQueryUseCase = Depends(FlightQueryUseCase.depends),
) -> List[FlightResponse]:
    flights = await use_case.search(
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        passengers=passengers,
    )
    return [FlightResponse.from_entity(f) for f in flights]


@router.get('/{flight_id}')
@Logger.io
async def get_flight(
    flight_id: int,
    use_case: FlightQueryUseCase = Depends(FlightQueryUseCase.depends),
) -> FlightResponse:
    return FlightResponse.from_entity(await use_case.get_by_id(flight_id))


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_flight(
    request: FlightRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: CreateFlightUseCase = Depends(CreateFlightUseCase.depends),
) -> FlightResponse:
    flight = await use_case.execute(
        flight_number=request.flight_number,
        origin=request.origin,
        destination=request.destination,
        departure_time=request.departure_time,
        arrival_time=request.arrival_time,
        total_seats=request.total_seats,
        base_price=request.base_price,
        caller=current_user,
    )
    return FlightResponse.from_entity(flight)


@router.put('/{flight_id}')
@Logger.io
async def update_flight(
    flight_id: int,
    request: FlightRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateFlightUseCase = Depends(UpdateFlightUseCase.depends),
) -> FlightResponse:
    flight = await use_case.execute(
        flight_id=flight_id,
        flight_number=request.flight_number,
        origin=request.origin,
        destination=request.destination,
        departure_time=request.departure_time,
        arrival_time=request.arrival_time,
        total_seats=request.total_seats,
        base_price=request.base_price,
        caller=current_user,
    )
    return FlightResponse.from_entity(flight)


@router.delete('/{flight_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_flight(
    flight_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteFlightUseCase = Depends(DeleteFlightUseCase.depends),
) -> None:
    await use_case.execute(flight_id=flight_id, caller=current_user)
