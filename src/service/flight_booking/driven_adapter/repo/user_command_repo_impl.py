from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.driven_adapter.model.user_model import UserModel
from src.service.flight_booking.driven_adapter.repo.mapper import user_to_entity


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                first_name=user_entity.first_name,
                last_name=user_entity.last_name,
                phone=user_entity.phone,
                role=user_entity.role,
            )

            session.add(user_model)
            await session.commit()
            await session.refresh(user_model)

            return user_to_entity(user_model)

    @Logger.io
    async def update(self, user_entity: UserEntity) -> Optional[UserEntity]:
        """Profile fields and role only; the password goes through update_password."""
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_entity.id)
            if not user_model:
                return None

            user_model.email = user_entity.email
            user_model.first_name = user_entity.first_name
            user_model.last_name = user_entity.last_name
            user_model.phone = user_entity.phone
            user_model.role = user_entity.role

            await session.commit()
            await session.refresh(user_model)

            return user_to_entity(user_model)

    @Logger.io
    async def update_password(self, *, user_id: int, hashed_password: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(hashed_password=hashed_password)
                .returning(UserModel.id)
            )
            updated = result.scalar_one_or_none() is not None
            await session.commit()
            return updated

    @Logger.io
    async def delete(self, *, user_id: int) -> bool:
        async with self.session_factory() as session:
            try:
                result = await session.execute(
                    delete(UserModel).where(UserModel.id == user_id).returning(UserModel.id)
                )
            except IntegrityError as e:
                # ticket.user_id is ON DELETE RESTRICT
                raise ConflictError('User still holds tickets and cannot be deleted') from e
            deleted = result.scalar_one_or_none() is not None
            await session.commit()
            return deleted
