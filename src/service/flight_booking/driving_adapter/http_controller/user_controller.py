from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.user_command_use_case import UserCommandUseCase
from src.service.flight_booking.app.query.user_query_use_case import UserQueryUseCase
from src.service.flight_booking.domain.entity.user_entity import UserEntity, UserRole
from src.service.flight_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.flight_booking.driving_adapter.schema.user_schema import (
    ChangePasswordRequest,
    UserResponse,
    UserUpdateRequest,
)


router = APIRouter()


@router.get('/me')
@Logger.io
async def get_me(
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    user = await use_case.get_by_id(user_id=current_user.id or 0, caller=current_user)
    return UserResponse.from_entity(user)


@router.get('')
@Logger.io
async def list_users(
    current_user: UserEntity = Depends(require_admin),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> List[UserResponse]:
    users = await use_case.list_all(caller=current_user)
    return [UserResponse.from_entity(u) for u in users]


@router.get('/role/{role}')
@Logger.io
async def list_users_by_role(
    role: UserRole,
    current_user: UserEntity = Depends(require_admin),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> List[UserResponse]:
    users = await use_case.list_by_role(role=role, caller=current_user)
    return [UserResponse.from_entity(u) for u in users]


@router.get('/{user_id}')
@Logger.io
async def get_user(
    user_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    user = await use_case.get_by_id(user_id=user_id, caller=current_user)
    return UserResponse.from_entity(user)


@router.put('/{user_id}')
@Logger.io
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> UserResponse:
    user = await use_case.update_user(
        user_id=user_id,
        caller=current_user,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        phone=request.phone,
        role=request.role,
    )
    return UserResponse.from_entity(user)


@router.post('/{user_id}/change-password')
@Logger.io
async def change_password(
    user_id: int,
    request: ChangePasswordRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> dict[str, str]:
    await use_case.change_password(
        user_id=user_id,
        current_password=request.current_password.get_secret_value(),
        new_password=request.new_password.get_secret_value(),
        caller=current_user,
    )
    return {'message': 'Password changed'}


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_user(
    user_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> None:
    await use_case.delete_user(user_id=user_id, caller=current_user)
