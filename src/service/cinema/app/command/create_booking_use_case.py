import time
from typing import List, Optional, Self, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, SeatUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.cinema_metrics import metrics
from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.app.interface.i_movie_store import IMovieStore
from src.service.cinema.app.interface.i_show_lock_registry import IShowLockRegistry
from src.service.cinema.domain.entity.booking_entity import Booking, validate_booking_request
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.show_entity import Show
from src.service.cinema.domain.value_object.coupon import CouponBook


class CreateBookingUseCase:
    """
    Book seats for one show, all or nothing.

    Flow:
    1. Validate customer name and seat list (Fail Fast, before any lookup)
    2. Resolve movie and show
    3. Under the show lock: resolve again, check every seat, price, assign id, book seats, store
    4. Return the stored booking

    Dependencies:
    - movie_store / booking_store: catalog and ledger
    - show_lock_registry: closes the check-then-book race between concurrent requests
    - coupon_book / price_per_seat: pricing rules from settings
    """

    def __init__(
        self,
        *,
        movie_store: IMovieStore,
        booking_store: IBookingStore,
        show_lock_registry: IShowLockRegistry,
        coupon_book: CouponBook,
        price_per_seat: float,
    ) -> None:
        self.movie_store = movie_store
        self.booking_store = booking_store
        self.show_lock_registry = show_lock_registry
        self.coupon_book = coupon_book
        self.price_per_seat = price_per_seat
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        movie_store: IMovieStore = Depends(Provide[Container.movie_store]),
        booking_store: IBookingStore = Depends(Provide[Container.booking_store]),
        show_lock_registry: IShowLockRegistry = Depends(Provide[Container.show_lock_registry]),
        coupon_book: CouponBook = Depends(Provide[Container.coupon_book]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            movie_store=movie_store,
            booking_store=booking_store,
            show_lock_registry=show_lock_registry,
            coupon_book=coupon_book,
            price_per_seat=config_service.PRICE_PER_SEAT,
        )

    async def _resolve_show(self, *, movie_id: int, show_id: int) -> Tuple[Movie, Show]:
        movie = await self.movie_store.get_by_id(movie_id=movie_id)
        if not movie:
            raise NotFoundError(f'Movie {movie_id} not found')

        show = movie.find_show_by_id(show_id)
        if not show:
            raise NotFoundError(f'Show {show_id} not found for movie {movie_id}')
        return movie, show

    @Logger.io
    async def create_booking(
        self,
        *,
        movie_id: int,
        show_id: int,
        seat_numbers: List[int],
        customer_name: str,
        coupon_code: Optional[str] = None,
    ) -> Booking:
        """
        Args:
            movie_id: Movie the show belongs to
            show_id: Show to book seats for
            seat_numbers: Requested seats, 1-based, no duplicates
            customer_name: Name the booking is filed under
            coupon_code: Optional discount code, unknown codes are ignored

        Returns:
            The created booking

        Raises:
            InvalidInputError: blank name or malformed seat list
            NotFoundError: movie or show does not exist
            SeatUnavailableError: any requested seat is booked or out of range
        """
        started_at = time.perf_counter()
        result = 'success'

        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'movie.id': movie_id,
                'show.id': show_id,
                'seat.count': len(seat_numbers or []),
            },
        ) as span:
            try:
                customer_name = validate_booking_request(
                    customer_name=customer_name, seat_numbers=seat_numbers
                )

                movie, show = await self._resolve_show(movie_id=movie_id, show_id=show_id)

                async with self.show_lock_registry.hold(show_id=show.id):
                    # A reset may have replaced the catalog while this request waited
                    movie, show = await self._resolve_show(movie_id=movie_id, show_id=show_id)
                    unavailable = show.unavailable_among(seat_numbers)
                    if unavailable:
                        raise SeatUnavailableError(
                            f'Seats not available: {", ".join(str(seat) for seat in unavailable)}',
                            seat_numbers=unavailable,
                        )

                    priced = self.coupon_book.price_seats(
                        seat_count=len(seat_numbers),
                        price_per_seat=self.price_per_seat,
                        code=coupon_code,
                    )
                    if coupon_code and not priced.coupon:
                        Logger.base.info(
                            f'🏷️ [CREATE-BOOKING] Ignoring unknown coupon {coupon_code}'
                        )

                    booking = Booking.create(
                        id=await self.booking_store.next_booking_id(),
                        customer_name=customer_name,
                        movie_id=movie.id,
                        movie_title=movie.title,
                        show_id=show.id,
                        show_time=show.show_time,
                        seats=seat_numbers,
                        total_price=priced.total_price,
                        coupon_code=priced.coupon_code,
                        discount_percent=priced.discount_percent,
                    )

                    for seat_number in seat_numbers:
                        show.book_seat(seat_number)
                    await self.booking_store.save(booking=booking)

                span.set_attribute('booking.id', booking.id)
                metrics.record_booking_created(
                    movie_id=movie.id, seat_count=booking.seat_count, revenue=booking.total_price
                )
                metrics.update_show_occupancy(
                    movie_id=movie.id, show_id=show.id, percent=show.occupancy_percentage()
                )
                Logger.base.info(
                    f'🎟️ [CREATE-BOOKING] Booking {booking.id} for {customer_name}: '
                    f'{movie.title} @ {show.show_time}, seats {booking.seats}, '
                    f'total {booking.total_price:.2f}'
                )
                return booking

            except Exception as e:
                result = type(e).__name__
                raise
            finally:
                metrics.record_booking_request(
                    movie_id=movie_id,
                    show_id=show_id,
                    result=result,
                    duration=time.perf_counter() - started_at,
                )
