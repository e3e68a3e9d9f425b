from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.user_command_use_case import UserCommandUseCase
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.flight_booking.driving_adapter.schema.auth_schema import (
    AuthenticateRequest,
    AuthResponse,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
)
from src.service.flight_booking.driving_adapter.schema.user_schema import UserResponse


router = APIRouter()


def _set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )


def _auth_response(jwt_auth: JwtAuth, response: Response, user: UserEntity) -> AuthResponse:
    access_token = jwt_auth.create_access_token(user)
    _set_auth_cookie(response, access_token)
    return AuthResponse(
        user=UserResponse.from_entity(user),
        access_token=access_token,
        refresh_token=jwt_auth.create_refresh_token(user),
    )


@router.post('/register', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register(
    request: RegisterRequest,
    response: Response,
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user = await use_case.register(
        email=request.email,
        password=request.password.get_secret_value(),
        first_name=request.first_name,
        last_name=request.last_name,
        phone=request.phone,
    )
    return _auth_response(jwt_auth, response, user)


@router.post('/authenticate')
@Logger.io
@inject
async def authenticate(
    request: AuthenticateRequest,
    response: Response,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )
    return _auth_response(jwt_auth, response, user)


@router.post('/refresh-token')
@Logger.io
@inject
async def refresh_token(
    request: RefreshTokenRequest,
    response: Response,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> TokenResponse:
    user = await jwt_auth.refresh(user_query_repo, request.refresh_token)
    access_token = jwt_auth.create_access_token(user)
    _set_auth_cookie(response, access_token)
    return TokenResponse(
        access_token=access_token, refresh_token=jwt_auth.create_refresh_token(user)
    )


@router.post('/logout')
@Logger.io
async def logout(response: Response) -> dict[str, str]:
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, httponly=True, samesite='lax')
    return {'message': 'Logged out'}
