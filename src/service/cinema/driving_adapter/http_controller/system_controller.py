from datetime import datetime, timezone

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.constant.route_constant import (
    SYSTEM_HEALTH,
    SYSTEM_INFO,
    SYSTEM_INIT_DATA,
    SYSTEM_STATS,
    SYSTEM_STATUS,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.reset_sample_data_use_case import ResetSampleDataUseCase
from src.service.cinema.app.query.get_stats_use_case import GetStatsUseCase
from src.service.cinema.driving_adapter.http_controller.schema.booking_schema import (
    BookingStatsResponse,
)
from src.service.cinema.driving_adapter.http_controller.schema.system_schema import (
    InitDataResponse,
    SystemHealthResponse,
    SystemInfoResponse,
    SystemStatusResponse,
)


router = APIRouter(tags=['system'])

FEATURES = [
    'Movie catalog with shows and seat maps',
    'Seat booking with per-show locking',
    'Coupon discounts',
    'Booking cancellation',
    'Booking statistics',
]


@router.get(SYSTEM_STATUS)
@Logger.io
async def get_status(
    use_case: GetStatsUseCase = Depends(GetStatsUseCase.depends),
) -> SystemStatusResponse:
    stats = await use_case.get_stats()
    return SystemStatusResponse(
        status='running',
        total_movies=stats.total_movies,
        total_bookings=stats.total_bookings,
        price_per_seat=stats.price_per_seat,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(SYSTEM_HEALTH)
@inject
async def get_health(
    config_service: Settings = Depends(Provide[Container.config_service]),
) -> SystemHealthResponse:
    return SystemHealthResponse(status='healthy', service=config_service.PROJECT_NAME)


@router.get(SYSTEM_INFO)
@inject
async def get_info(
    config_service: Settings = Depends(Provide[Container.config_service]),
) -> SystemInfoResponse:
    return SystemInfoResponse(
        name=config_service.PROJECT_NAME,
        version=config_service.VERSION,
        description='In-memory movie ticket booking with REST, web and console front ends',
        features=FEATURES,
    )


@router.get(SYSTEM_STATS)
@Logger.io
async def get_system_stats(
    use_case: GetStatsUseCase = Depends(GetStatsUseCase.depends),
) -> BookingStatsResponse:
    return BookingStatsResponse.from_dto(await use_case.get_stats())


@router.post(SYSTEM_INIT_DATA)
@Logger.io
async def init_sample_data(
    use_case: ResetSampleDataUseCase = Depends(ResetSampleDataUseCase.depends),
) -> InitDataResponse:
    movies = await use_case.execute()
    return InitDataResponse(message='Sample data loaded', movies_loaded=len(movies))
