"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.cinema.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_movie_use_case,
    reset_sample_data_use_case,
)
from src.service.cinema.app.query import (
    coupon_query_use_case,
    get_booking_use_case,
    get_movie_use_case,
    get_stats_use_case,
    list_bookings_use_case,
    list_movies_use_case,
)
from src.service.cinema.driving_adapter.http_controller import system_controller


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    cancel_booking_use_case,
    create_movie_use_case,
    reset_sample_data_use_case,
    list_movies_use_case,
    get_movie_use_case,
    list_bookings_use_case,
    get_booking_use_case,
    coupon_query_use_case,
    get_stats_use_case,
    system_controller,
]
