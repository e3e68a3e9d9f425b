"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules read settings
- Caller fixtures (client and admin users) shared by unit and controller tests

Architecture:
- Unit tests (test/**/unit/): use cases and entities with AsyncMock repositories
  and a fake unit of work, no database
- Controller tests: FastAPI TestClient with use cases replaced through
  app.dependency_overrides
- Integration tests (test/**/integration/): real repositories and unit of work
  against PostgreSQL, fixtures in their own conftest.py
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ['POSTGRES_DB'] = 'flight_booking_test_db'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key_for_unit_tests_only')
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

import pytest  # noqa: E402

from src.service.flight_booking.domain.entity.user_entity import (  # noqa: E402
    UserEntity,
    UserRole,
)


@pytest.fixture
def client_user() -> UserEntity:
    return UserEntity(
        id=2,
        email='client@test.com',
        first_name='Jane',
        last_name='Doe',
        role=UserRole.CLIENT,
    )


@pytest.fixture
def another_client_user() -> UserEntity:
    return UserEntity(
        id=3,
        email='another.client@test.com',
        first_name='John',
        last_name='Roe',
        role=UserRole.CLIENT,
    )


@pytest.fixture
def admin_user() -> UserEntity:
    return UserEntity(
        id=1,
        email='admin@test.com',
        first_name='Ada',
        last_name='Admin',
        role=UserRole.ADMIN,
    )
