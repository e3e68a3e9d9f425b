from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, SecretStr

from src.service.flight_booking.domain.entity.user_entity import UserEntity, UserRole


class UserResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'email': 'jane.doe@example.com',
                'first_name': 'Jane',
                'last_name': 'Doe',
                'phone': '+34600000000',
                'role': 'CLIENT',
                'created_at': '2025-01-10T10:30:00Z',
            }
        }
    }

    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: UserRole
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserResponse':
        return cls(
            id=user.id or 0,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            role=user.role,
            created_at=user.created_at,
        )


class UserUpdateRequest(BaseModel):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    role: Optional[UserRole] = None  # Applied only for admins

    class Config:
        json_schema_extra = {'example': {'first_name': 'Janet', 'phone': '+34611111111'}}


class ChangePasswordRequest(BaseModel):
    current_password: SecretStr
    new_password: SecretStr = Field(min_length=8)

    class Config:
        json_schema_extra = {
            'example': {'current_password': 'old-P@ssw0rd', 'new_password': 'new-P@ssw0rd'}
        }
