from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import ForbiddenError, LoginError, ValidationError


if TYPE_CHECKING:
    from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    CLIENT = 'CLIENT'
    ADMIN = 'ADMIN'


@attrs.define
class UserEntity:
    email: str = ''
    first_name: str = ''
    last_name: str = ''
    phone: Optional[str] = None
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.CLIENT
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('LOGIN_BAD_CREDENTIALS')

        return user_entity

    @staticmethod
    def validate_role(role: UserRole | str) -> UserRole:
        """Validate if the role is valid"""
        valid_roles = [r.value for r in UserRole]
        if role not in valid_roles:
            raise ValidationError(f'Invalid role: {role}. Must be one of: {", ".join(valid_roles)}')
        return UserRole(role)

    def can_access_user(self, user_id: int) -> bool:
        return self.is_admin or self.id == user_id

    def ensure_can_access_user(self, user_id: int, *, action: str = 'access this user') -> None:
        if not self.can_access_user(user_id):
            raise ForbiddenError(f'You are not allowed to {action}')

    def ensure_admin(self) -> None:
        if not self.is_admin:
            raise ForbiddenError('Only admins can perform this action')

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        """Set password using provided password hasher"""
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def check_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        )
