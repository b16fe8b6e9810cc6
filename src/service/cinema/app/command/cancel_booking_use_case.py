from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.cinema_metrics import metrics
from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.app.interface.i_show_lock_registry import IShowLockRegistry
from src.service.cinema.domain.entity.booking_entity import Booking


class CancelBookingUseCase:
    """
    Cancel a booking and free its seats.

    Flow:
    1. Resolve booking to find its show (NotFoundError, nothing changes)
    2. Under the show lock: remove the booking from the ledger; if a concurrent
       cancel got there first, NotFoundError and no seat is touched
    3. Free every seat if the show still exists
    """

    def __init__(
        self,
        *,
        movie_store: IMovieStore,
        booking_store: IBookingStore,
        show_lock_registry: IShowLockRegistry,
    ) -> None:
        self.movie_store = movie_store
        self.booking_store = booking_store
        self.show_lock_registry = show_lock_registry

    @classmethod
    @inject
    def depends(
        cls,
        movie_store: IMovieStore = Depends(Provide[Container.movie_store]),
        booking_store: IBookingStore = Depends(Provide[Container.booking_store]),
        show_lock_registry: IShowLockRegistry = Depends(Provide[Container.show_lock_registry]),
    ) -> Self:
        return cls(
            movie_store=movie_store,
            booking_store=booking_store,
            show_lock_registry=show_lock_registry,
        )

    @Logger.io
    async def execute(self, *, booking_id: int) -> Booking:
        booking = await self.booking_store.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError(f'Booking {booking_id} not found')

        async with self.show_lock_registry.hold(show_id=booking.show_id):
            # Only the cancel that actually removes the booking may free its seats
            booking = await self.booking_store.delete(booking_id=booking_id)
            if not booking:
                raise NotFoundError(f'Booking {booking_id} not found')

            movie = await self.movie_store.get_by_id(movie_id=booking.movie_id)
            show = movie.find_show_by_id(booking.show_id) if movie else None
            if show:
                for seat_number in booking.seats:
                    show.cancel_seat(seat_number)
            else:
                Logger.base.warning(
                    f'⚠️ [CANCEL-BOOKING] Show {booking.show_id} no longer exists, '
                    f'dropping booking {booking_id} only'
                )

        metrics.record_booking_cancelled(movie_id=booking.movie_id)
        if show:
            metrics.update_show_occupancy(
                movie_id=booking.movie_id, show_id=show.id, percent=show.occupancy_percentage()
            )
        Logger.base.info(
            f'🗑️ [CANCEL-BOOKING] Booking {booking_id} cancelled, freed seats {booking.seats}'
        )
        return booking
