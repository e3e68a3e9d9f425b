"""
Integration fixtures: real PostgreSQL behind the real repositories and unit of work

- The test database (POSTGRES_DB from test/conftest.py) is created if missing and its
  schema rebuilt from the ORM metadata once per session
- Every table is truncated after each test
- The whole suite is skipped when PostgreSQL cannot be reached
"""

import asyncio
from collections.abc import AsyncGenerator
from decimal import Decimal
from itertools import count
from typing import Any, Optional

import attrs
import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base, Database, dispose_engine, get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.flight_booking.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.flight_booking.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.flight_booking.app.command.delete_flight_use_case import DeleteFlightUseCase
from src.service.flight_booking.app.observer.ticket_subject import TicketSubject
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.entity.ticket_entity import Ticket
from src.service.flight_booking.domain.entity.user_entity import UserEntity, UserRole
from src.service.flight_booking.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from test.service.flight_booking.unit.test_helpers import make_flight


ADMIN = UserEntity(id=0, email='ops@flights.test', role=UserRole.ADMIN)

_flight_numbers = count(1000)
_emails = count(1)


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _server_url() -> str:
    return settings.DATABASE_URL_ASYNC.rsplit('/', 1)[0] + '/postgres'


async def _setup_test_database() -> None:
    # Register every model on Base.metadata
    import src.service.flight_booking.driven_adapter.model  # noqa: F401

    server_engine = create_async_engine(_server_url(), isolation_level='AUTOCOMMIT')
    try:
        async with server_engine.connect() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': settings.POSTGRES_DB},
            )
            if not result.first():
                await conn.execute(text(f'CREATE DATABASE "{settings.POSTGRES_DB}"'))
    finally:
        await server_engine.dispose()

    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


async def _clean_all_tables() -> None:
    quoted = ', '.join(f'"{table.name}"' for table in Base.metadata.sorted_tables)
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.execute(text(f'TRUNCATE {quoted} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


@pytest.fixture(scope='session')
def postgres() -> None:
    try:
        asyncio.run(_setup_test_database())
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f'PostgreSQL not reachable at {settings.POSTGRES_SERVER}: {e}')


@pytest.fixture(autouse=True)
async def clean_database(postgres: None) -> AsyncGenerator[None, None]:
    yield
    # The engine is bound to this test's event loop
    await dispose_engine()
    await _clean_all_tables()


# =============================================================================
# Repositories
# =============================================================================
@pytest.fixture
def database() -> Database:
    return Database()


@pytest.fixture
def flight_query_repo(database: Database) -> FlightQueryRepoImpl:
    return FlightQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def ticket_query_repo(database: Database) -> TicketQueryRepoImpl:
    return TicketQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def user_command_repo(database: Database) -> UserCommandRepoImpl:
    return UserCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def user_query_repo(database: Database) -> UserQueryRepoImpl:
    return UserQueryRepoImpl(
        session_factory=database.session, password_hasher=BcryptPasswordHasher()
    )


# =============================================================================
# Seeding and use case runners (one session per call, like one request each)
# =============================================================================
@pytest.fixture
def seed_user(user_command_repo: UserCommandRepoImpl):
    async def _seed(**overrides: Any) -> UserEntity:
        fields = {
            'email': f'passenger{next(_emails)}@flights.test',
            'first_name': 'Jane',
            'last_name': 'Doe',
            'hashed_password': 'not-a-real-hash',
            'role': UserRole.CLIENT,
        }
        fields.update(overrides)
        return await user_command_repo.create(UserEntity(**fields))

    return _seed


@pytest.fixture
def seed_flight():
    async def _seed(*, total_seats: int = 180, **overrides: Any) -> Flight:
        flight = make_flight(
            flight_id=None, total_seats=total_seats, flight_number=f'FB{next(_flight_numbers)}'
        )
        flight = attrs.evolve(flight, **overrides)
        async with get_session_maker()() as session:
            uow = SqlAlchemyUnitOfWork(session)
            async with uow:
                created = await uow.flight_command_repo.create(flight=flight)
                await uow.commit()
        return created

    return _seed


@pytest.fixture
def book(user_query_repo: UserQueryRepoImpl):
    async def _book(
        *,
        flight: Flight,
        user: UserEntity,
        seat_number: str = '1A',
        price: Optional[Decimal] = None,
    ) -> Ticket:
        async with get_session_maker()() as session:
            use_case = CreateTicketUseCase(
                uow=SqlAlchemyUnitOfWork(session),
                user_query_repo=user_query_repo,
                ticket_subject=TicketSubject(),
            )
            return await use_case.execute(
                flight_id=flight.id,
                user_id=user.id,
                passenger_name=user.full_name,
                passenger_email=user.email,
                seat_number=seat_number,
                price=price,
                caller=user,
            )

    return _book


@pytest.fixture
def cancel():
    async def _cancel(*, ticket_id: int, caller: UserEntity = ADMIN) -> Ticket:
        async with get_session_maker()() as session:
            use_case = CancelTicketUseCase(
                uow=SqlAlchemyUnitOfWork(session), ticket_subject=TicketSubject()
            )
            return await use_case.execute(ticket_id=ticket_id, caller=caller)

    return _cancel


@pytest.fixture
def delete_flight():
    async def _delete(*, flight_id: int) -> None:
        async with get_session_maker()() as session:
            await DeleteFlightUseCase(uow=SqlAlchemyUnitOfWork(session)).execute(
                flight_id=flight_id, caller=ADMIN
            )

    return _delete
