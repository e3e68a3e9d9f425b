from typing import Optional

from pydantic import BaseModel, EmailStr, Field, SecretStr

from src.service.flight_booking.driving_adapter.schema.user_schema import UserResponse


class RegisterRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(min_length=8)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'jane.doe@example.com',
                'password': 'P@ssw0rd!',
                'first_name': 'Jane',
                'last_name': 'Doe',
                'phone': '+34600000000',
            }
        }


class AuthenticateRequest(BaseModel):
    email: EmailStr
    password: SecretStr

    class Config:
        json_schema_extra = {'example': {'email': 'jane.doe@example.com', 'password': 'P@ssw0rd!'}}


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    refresh_token: str
    token_type: str = 'bearer'


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = 'bearer'
