from abc import ABC, abstractmethod
from typing import Optional

from src.service.flight_booking.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def update(self, user_entity: UserEntity) -> Optional[UserEntity]:
        """Persist profile fields and role; returns None when the user is gone"""
        pass

    @abstractmethod
    async def update_password(self, *, user_id: int, hashed_password: str) -> bool:
        pass

    @abstractmethod
    async def delete(self, *, user_id: int) -> bool:
        pass
