"""
JWT issuing and verification

Access tokens carry enough of the user (id, email, names, role) to rebuild the
caller without a database read. Refresh tokens carry only the subject and a
`type: refresh` claim, and are exchanged for a fresh pair.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.domain.entity.user_entity import UserEntity


ACCESS_TOKEN_TYPE = 'access'
REFRESH_TOKEN_TYPE = 'refresh'


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.access_token_expire = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.refresh_token_expire = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

    def create_access_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'type': ACCESS_TOKEN_TYPE,
            'iat': now,
            'exp': now + self.access_token_expire,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'first_name': user_entity.first_name,
            'last_name': user_entity.last_name,
            'role': user_entity.role.value,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def create_refresh_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'type': REFRESH_TOKEN_TYPE,
            'iat': now,
            'exp': now + self.refresh_token_expire,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str, *, expected_type: str = ACCESS_TOKEN_TYPE) -> Dict:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError('Token has expired')
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

        if payload.get('type') != expected_type:
            raise AuthenticationError('Invalid token')
        return payload

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, email: str, password: str
    ) -> UserEntity:
        user_entity = await user_query_repo.verify_password(email=email, plain_password=password)
        return UserEntity.validate_user_exists(user_entity)

    async def refresh(self, user_query_repo: IUserQueryRepo, refresh_token: str) -> UserEntity:
        """Resolve a refresh token to the current user row; role changes apply from here on."""
        payload = self.decode_jwt_token(refresh_token, expected_type=REFRESH_TOKEN_TYPE)
        try:
            user_id = int(payload['sub'])
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError('Invalid token')

        user_entity = await user_query_repo.get_by_id(user_id)
        if not user_entity:
            raise AuthenticationError('Invalid token')
        return user_entity

    def get_current_user_info_from_jwt(self, token: str | None) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        email = payload.get('email')
        role = payload.get('role')
        if not user_id or not email or not role:
            raise AuthenticationError('Invalid token')

        # Rebuild UserEntity from JWT payload (no DB query)
        return UserEntity(
            id=user_id,
            email=email,
            first_name=payload.get('first_name') or '',
            last_name=payload.get('last_name') or '',
            role=UserEntity.validate_role(role),
        )
