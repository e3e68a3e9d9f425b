from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.domain.entity.user_entity import UserEntity, UserRole


class UserQueryUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def get_by_id(self, *, user_id: int, caller: UserEntity) -> UserEntity:
        caller.ensure_can_access_user(user_id, action='view this user')
        user = await self.user_query_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError('User not found')
        return user

    @Logger.io
    async def list_all(self, *, caller: UserEntity) -> List[UserEntity]:
        caller.ensure_admin()
        return await self.user_query_repo.list_all()

    @Logger.io
    async def list_by_role(self, *, role: UserRole | str, caller: UserEntity) -> List[UserEntity]:
        caller.ensure_admin()
        return await self.user_query_repo.list_by_role(UserEntity.validate_role(role))
