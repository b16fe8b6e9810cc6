from typing import Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.system_stats import SystemStats
from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.app.interface.i_movie_store import IMovieStore


class GetStatsUseCase:
    def __init__(
        self,
        *,
        movie_store: IMovieStore,
        booking_store: IBookingStore,
        price_per_seat: float,
    ) -> None:
        self.movie_store = movie_store
        self.booking_store = booking_store
        self.price_per_seat = price_per_seat

    @classmethod
    @inject
    def depends(
        cls,
        movie_store: IMovieStore = Depends(Provide[Container.movie_store]),
        booking_store: IBookingStore = Depends(Provide[Container.booking_store]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            movie_store=movie_store,
            booking_store=booking_store,
            price_per_seat=config_service.PRICE_PER_SEAT,
        )

    @Logger.io
    async def get_stats(self) -> SystemStats:
        movies = await self.movie_store.list_all()
        bookings = await self.booking_store.list_all()

        revenue_by_movie: Dict[int, float] = {}
        for booking in bookings:
            revenue_by_movie[booking.movie_id] = round(
                revenue_by_movie.get(booking.movie_id, 0.0) + booking.total_price, 2
            )

        occupancy_by_show: Dict[int, float] = {
            show.id: round(show.occupancy_percentage(), 2)
            for movie in movies
            for show in movie.shows
        }

        return SystemStats(
            total_movies=len(movies),
            total_shows=len(occupancy_by_show),
            total_bookings=len(bookings),
            total_seats_booked=sum(booking.seat_count for booking in bookings),
            total_revenue=round(sum(booking.total_price for booking in bookings), 2),
            price_per_seat=self.price_per_seat,
            revenue_by_movie=revenue_by_movie,
            occupancy_by_show=occupancy_by_show,
        )
