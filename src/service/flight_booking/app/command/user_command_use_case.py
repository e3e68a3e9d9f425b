"""
User Management Use Cases (Use Case Layer)
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    ConflictError,
    ForbiddenError,
    LoginError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.flight_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.domain.entity.user_entity import UserEntity, UserRole


class UserCommandUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
            ticket_query_repo=ticket_query_repo,
        )

    @Logger.io
    async def register(
        self,
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        phone: Optional[str] = None,
    ) -> UserEntity:
        """Self-registration always yields a CLIENT."""
        if await self.user_query_repo.exists_by_email(email):
            raise ConflictError(f'User with email {email} already exists')

        user_entity = UserEntity(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            role=UserRole.CLIENT,
        )
        user_entity.set_password(password, self.password_hasher)

        created = await self.user_command_repo.create(user_entity)
        Logger.base.info(f'👤 [REGISTER] user {created.id} registered')
        return created

    @Logger.io
    async def update_user(
        self,
        *,
        user_id: int,
        caller: UserEntity,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        role: Optional[UserRole | str] = None,
    ) -> UserEntity:
        """
        Update profile fields given as non-None.

        Role changes are applied only when an admin asks for them; from anyone else
        the role field is ignored.
        """
        caller.ensure_can_access_user(user_id, action='update this user')

        user_entity = await self.user_query_repo.get_by_id(user_id)
        if not user_entity:
            raise NotFoundError('User not found')

        if email is not None and email != user_entity.email:
            if await self.user_query_repo.exists_by_email(email):
                raise ConflictError(f'User with email {email} already exists')
            user_entity.email = email
        if first_name is not None:
            user_entity.first_name = first_name
        if last_name is not None:
            user_entity.last_name = last_name
        if phone is not None:
            user_entity.phone = phone
        if role is not None and caller.is_admin:
            user_entity.role = UserEntity.validate_role(role)

        updated = await self.user_command_repo.update(user_entity)
        if not updated:
            raise NotFoundError('User not found')
        return updated

    @Logger.io
    async def change_password(
        self, *, user_id: int, current_password: str, new_password: str, caller: UserEntity
    ) -> None:
        # Self only, admins included
        if caller.id != user_id:
            raise ForbiddenError("You are not allowed to change another user's password")

        user_entity = await self.user_query_repo.get_by_id(user_id)
        if not user_entity:
            raise NotFoundError('User not found')
        if not user_entity.check_password(current_password, self.password_hasher):
            raise LoginError('Current password is incorrect')

        user_entity.set_password(new_password, self.password_hasher)
        await self.user_command_repo.update_password(
            user_id=user_id, hashed_password=user_entity.hashed_password
        )
        Logger.base.info(f'🔑 [CHANGE-PASSWORD] user {user_id} changed password')

    @Logger.io
    async def delete_user(self, *, user_id: int, caller: UserEntity) -> None:
        """A user who still holds tickets, in any status, cannot be deleted."""
        caller.ensure_admin()
        if await self.ticket_query_repo.list_by_user(user_id=user_id):
            raise ConflictError('User still holds tickets and cannot be deleted')
        if not await self.user_command_repo.delete(user_id=user_id):
            raise NotFoundError('User not found')
        Logger.base.info(f'🗑️  [DELETE-USER] user {user_id} deleted by admin {caller.id}')
