"""
Production FastAPI Application

Serves the REST API, the web pages and the Prometheus endpoint from one process.

Run:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.cinema.app.command.reset_sample_data_use_case import ResetSampleDataUseCase


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Movie Service] Starting up...')

    # Setup OpenTelemetry tracing (exporter only when configured)
    tracing = TracingConfig(service_name='movie-ticket-service')
    tracing.setup()
    Logger.base.info('📊 [Movie Service] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Movie Service] Dependency injection wired')

    if container.config_service().LOAD_SAMPLE_DATA:
        movies = await ResetSampleDataUseCase(
            movie_store=container.movie_store(),
            booking_store=container.booking_store(),
            show_lock_registry=container.show_lock_registry(),
        ).execute()
        Logger.base.info(f'🌱 [Movie Service] Sample catalog loaded ({len(movies)} movies)')

    Logger.base.info('✅ [Movie Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Movie Service] Shutting down...')

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Movie Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)
