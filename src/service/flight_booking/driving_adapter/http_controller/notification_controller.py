from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.mark_notification_seen_use_case import (
    MarkNotificationSeenUseCase,
)
from src.service.flight_booking.app.query.notification_query_use_case import (
    NotificationQueryUseCase,
)
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.enum.notification_type import NotificationType
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.flight_booking.driving_adapter.http_controller.query_param import (
    parse_date_time,
)
from src.service.flight_booking.driving_adapter.schema.notification_schema import (
    MarkAllSeenResponse,
    NotificationResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_my_notifications(
    current_user: UserEntity = Depends(get_current_user),
    use_case: NotificationQueryUseCase = Depends(NotificationQueryUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_mine(caller=current_user)
    return [NotificationResponse.from_entity(n) for n in notifications]


@router.get('/unseen')
@Logger.io
async def list_my_unseen_notifications(
    current_user: UserEntity = Depends(get_current_user),
    use_case: NotificationQueryUseCase = Depends(NotificationQueryUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_mine_unseen(caller=current_user)
    return [NotificationResponse.from_entity(n) for n in notifications]


@router.get('/date-range')
@Logger.io
async def list_my_notifications_by_date_range(
    start: str,
    end: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: NotificationQueryUseCase = Depends(NotificationQueryUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_mine_by_created_at(
        start=parse_date_time(start, name='start'),
        end=parse_date_time(end, name='end'),
        caller=current_user,
    )
    return [NotificationResponse.from_entity(n) for n in notifications]


@router.post('/mark-all-seen')
@Logger.io
async def mark_all_seen(
    current_user: UserEntity = Depends(get_current_user),
    use_case: MarkNotificationSeenUseCase = Depends(MarkNotificationSeenUseCase.depends),
) -> MarkAllSeenResponse:
    return MarkAllSeenResponse(updated=await use_case.mark_all_seen(caller=current_user))


@router.post('/{notification_id}/mark-seen')
@Logger.io
async def mark_seen(
    notification_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: MarkNotificationSeenUseCase = Depends(MarkNotificationSeenUseCase.depends),
) -> NotificationResponse:
    notification = await use_case.mark_seen(notification_id=notification_id, caller=current_user)
    return NotificationResponse.from_entity(notification)


@router.get('/type/{notification_type}')
@Logger.io
async def list_notifications_by_type(
    notification_type: NotificationType,
    current_user: UserEntity = Depends(require_admin),
    use_case: NotificationQueryUseCase = Depends(NotificationQueryUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_by_type(
        notification_type=notification_type, caller=current_user
    )
    return [NotificationResponse.from_entity(n) for n in notifications]


@router.get('/user/{user_id}')
@Logger.io
async def list_notifications_by_user(
    user_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: NotificationQueryUseCase = Depends(NotificationQueryUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_by_user(user_id=user_id, caller=current_user)
    return [NotificationResponse.from_entity(n) for n in notifications]


@router.get('/ticket/{ticket_id}')
@Logger.io
async def list_notifications_by_ticket(
    ticket_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: NotificationQueryUseCase = Depends(NotificationQueryUseCase.depends),
) -> List[NotificationResponse]:
    notifications = await use_case.list_by_ticket(ticket_id=ticket_id, caller=current_user)
    return [NotificationResponse.from_entity(n) for n in notifications]
