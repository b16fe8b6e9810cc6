from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.command.reset_sample_data_use_case import ResetSampleDataUseCase
from src.service.cinema.app.query.coupon_query_use_case import CouponQueryUseCase
from src.service.cinema.app.query.get_booking_use_case import GetBookingUseCase
from src.service.cinema.app.query.get_movie_use_case import GetMovieUseCase
from src.service.cinema.app.query.get_stats_use_case import GetStatsUseCase
from src.service.cinema.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.domain.value_object.coupon import CouponBook
from src.service.cinema.driven_adapter.repo.in_memory_booking_store import InMemoryBookingStore
from src.service.cinema.driven_adapter.repo.in_memory_movie_store import InMemoryMovieStore
from src.service.cinema.driven_adapter.state.show_lock_registry_impl import ShowLockRegistryImpl


@pytest.fixture
async def sample_catalog(
    movie_store: InMemoryMovieStore,
    booking_store: InMemoryBookingStore,
    show_lock_registry: ShowLockRegistryImpl,
) -> None:
    await ResetSampleDataUseCase(
        movie_store=movie_store,
        booking_store=booking_store,
        show_lock_registry=show_lock_registry,
    ).execute()


@pytest.fixture
def create_booking(
    movie_store: InMemoryMovieStore,
    booking_store: InMemoryBookingStore,
    show_lock_registry: ShowLockRegistryImpl,
) -> CreateBookingUseCase:
    return CreateBookingUseCase(
        movie_store=movie_store,
        booking_store=booking_store,
        show_lock_registry=show_lock_registry,
        coupon_book=CouponBook.from_mapping({'SAVE20': 20}),
        price_per_seat=10.0,
    )


@pytest.mark.unit
class TestListMovies:
    async def test_all_movies_in_id_order(
        self, movie_store: InMemoryMovieStore, sample_catalog: None
    ) -> None:
        movies = await ListMoviesUseCase(movie_store=movie_store).list_movies()

        assert [movie.id for movie in movies] == [1, 2, 3]

    async def test_genre_filter_is_case_insensitive_exact(
        self, movie_store: InMemoryMovieStore, sample_catalog: None
    ) -> None:
        use_case = ListMoviesUseCase(movie_store=movie_store)

        assert [m.title for m in await use_case.list_movies(genre='sci-fi')] == [
            'The Matrix Resurrections'
        ]
        assert await use_case.list_movies(genre='Sci') == []

    async def test_title_search_is_case_insensitive_substring(
        self, movie_store: InMemoryMovieStore, sample_catalog: None
    ) -> None:
        movies = await ListMoviesUseCase(movie_store=movie_store).list_movies(title='MATRIX')

        assert [movie.id for movie in movies] == [1]

    async def test_empty_store(self) -> None:
        store = AsyncMock()
        store.list_all = AsyncMock(return_value=[])

        assert await ListMoviesUseCase(movie_store=store).list_movies(genre='Drama') == []


@pytest.mark.unit
class TestGetMovie:
    async def test_get_show_and_available_seats(
        self, movie_store: InMemoryMovieStore, sample_catalog: None
    ) -> None:
        use_case = GetMovieUseCase(movie_store=movie_store)

        show = await use_case.get_show(movie_id=2, show_id=4)
        seats = await use_case.list_available_seats(movie_id=2, show_id=4)

        assert show.show_time == '3:00 PM'
        assert seats == list(range(1, 21))
        assert len(await use_case.list_shows(movie_id=1)) == 3

    async def test_show_of_another_movie_is_not_found(
        self, movie_store: InMemoryMovieStore, sample_catalog: None
    ) -> None:
        with pytest.raises(NotFoundError, match='Show 4 not found for movie 1'):
            await GetMovieUseCase(movie_store=movie_store).get_show(movie_id=1, show_id=4)

    async def test_unknown_movie(self, movie_store: InMemoryMovieStore) -> None:
        with pytest.raises(NotFoundError, match='Movie 9 not found'):
            await GetMovieUseCase(movie_store=movie_store).list_shows(movie_id=9)


@pytest.mark.unit
class TestBookingQueries:
    async def test_list_and_filter_by_customer(
        self,
        booking_store: InMemoryBookingStore,
        create_booking: CreateBookingUseCase,
        sample_catalog: None,
    ) -> None:
        await create_booking.create_booking(
            movie_id=1, show_id=1, seat_numbers=[1], customer_name='Alice'
        )
        await create_booking.create_booking(
            movie_id=2, show_id=4, seat_numbers=[2], customer_name='Bob'
        )
        await create_booking.create_booking(
            movie_id=3, show_id=6, seat_numbers=[3], customer_name='alice'
        )
        use_case = ListBookingsUseCase(booking_store=booking_store)

        assert [b.id for b in await use_case.list_all()] == [1, 2, 3]
        assert [b.id for b in await use_case.list_by_customer(customer_name='ALICE')] == [1, 3]
        assert await use_case.list_by_customer(customer_name='Ali') == []
        assert await use_case.list_by_customer(customer_name='  ') == []

    async def test_get_booking(
        self,
        booking_store: InMemoryBookingStore,
        create_booking: CreateBookingUseCase,
        sample_catalog: None,
    ) -> None:
        created = await create_booking.create_booking(
            movie_id=1, show_id=2, seat_numbers=[4, 5], customer_name='Alice'
        )
        use_case = GetBookingUseCase(booking_store=booking_store)

        assert await use_case.get_booking(booking_id=created.id) == created
        with pytest.raises(NotFoundError, match='Booking 99 not found'):
            await use_case.get_booking(booking_id=99)


@pytest.mark.unit
class TestCouponQueries:
    @pytest.fixture
    def use_case(self) -> CouponQueryUseCase:
        return CouponQueryUseCase(
            coupon_book=CouponBook.from_mapping({'SAVE10': 10, 'STUDENT15': 15})
        )

    async def test_list_coupons(self, use_case: CouponQueryUseCase) -> None:
        coupons = await use_case.list_coupons()

        assert [(c.code, c.discount_percent) for c in coupons] == [
            ('SAVE10', 10),
            ('STUDENT15', 15),
        ]

    async def test_validate_known_code(self, use_case: CouponQueryUseCase) -> None:
        result = await use_case.validate_coupon(coupon_code='student15')

        assert result.valid is True
        assert result.code == 'STUDENT15'
        assert result.discount_percent == 15

    async def test_validate_unknown_code(self, use_case: CouponQueryUseCase) -> None:
        result = await use_case.validate_coupon(coupon_code='nope')

        assert result.valid is False
        assert result.code == 'NOPE'
        assert result.discount_percent == 0.0


@pytest.mark.unit
class TestGetStats:
    async def test_stats_after_bookings(
        self,
        movie_store: InMemoryMovieStore,
        booking_store: InMemoryBookingStore,
        create_booking: CreateBookingUseCase,
        sample_catalog: None,
    ) -> None:
        await create_booking.create_booking(
            movie_id=1, show_id=1, seat_numbers=[1, 2, 3], customer_name='Alice'
        )
        await create_booking.create_booking(
            movie_id=1, show_id=2, seat_numbers=[1], customer_name='Bob', coupon_code='SAVE20'
        )
        await create_booking.create_booking(
            movie_id=2, show_id=4, seat_numbers=[1, 2], customer_name='Carol'
        )
        use_case = GetStatsUseCase(
            movie_store=movie_store, booking_store=booking_store, price_per_seat=10.0
        )

        stats = await use_case.get_stats()

        assert stats.total_movies == 3
        assert stats.total_shows == 7
        assert stats.total_bookings == 3
        assert stats.total_seats_booked == 6
        assert stats.total_revenue == 58.0
        assert stats.revenue_by_movie == {1: 38.0, 2: 20.0}
        assert stats.occupancy_by_show[1] == 20.0
        assert stats.occupancy_by_show[4] == 10.0
        assert stats.occupancy_by_show[7] == 0.0
        assert stats.price_per_seat == 10.0

    async def test_stats_on_empty_system(
        self, movie_store: InMemoryMovieStore, booking_store: InMemoryBookingStore
    ) -> None:
        stats = await GetStatsUseCase(
            movie_store=movie_store, booking_store=booking_store, price_per_seat=12.5
        ).get_stats()

        assert stats.total_movies == 0
        assert stats.total_revenue == 0
        assert stats.revenue_by_movie == {}
        assert stats.occupancy_by_show == {}
