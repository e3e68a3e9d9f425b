"""
Production FastAPI Application

Serve with: granian src.main:app --interface asgi
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Flight Booking] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Flight Booking] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Flight Booking] Database tables ready')

    setup()
    Logger.base.info('👂 [Flight Booking] Ticket observers registered')

    yield

    Logger.base.info('🛑 [Flight Booking] Shutting down...')

    await dispose_engine()
    cleanup()
    container.unwire()

    Logger.base.info('👋 [Flight Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
