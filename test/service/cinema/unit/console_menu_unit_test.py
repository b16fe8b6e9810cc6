"""
Unit tests for the console menu

Inputs are scripted through input_func and output is captured through output_func.
"""

from collections.abc import Callable, Iterator

import pytest

from src.service.cinema.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.command.reset_sample_data_use_case import ResetSampleDataUseCase
from src.service.cinema.app.query.get_movie_use_case import GetMovieUseCase
from src.service.cinema.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.domain.value_object.coupon import CouponBook
from src.service.cinema.driven_adapter.repo.in_memory_booking_store import InMemoryBookingStore
from src.service.cinema.driven_adapter.repo.in_memory_movie_store import InMemoryMovieStore
from src.service.cinema.driven_adapter.state.show_lock_registry_impl import ShowLockRegistryImpl
from src.service.cinema.driving_adapter.cli.console_menu import ConsoleMenu


def _scripted(lines: list[str]) -> Callable[[str], str]:
    answers: Iterator[str] = iter(lines)

    def _input(prompt: str) -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.mark.unit
class TestConsoleMenu:
    @pytest.fixture
    async def build_menu(
        self,
        movie_store: InMemoryMovieStore,
        booking_store: InMemoryBookingStore,
        show_lock_registry: ShowLockRegistryImpl,
    ) -> Callable[[list[str], list[str]], ConsoleMenu]:
        await ResetSampleDataUseCase(
            movie_store=movie_store,
            booking_store=booking_store,
            show_lock_registry=show_lock_registry,
        ).execute()

        def _build(lines: list[str], output: list[str]) -> ConsoleMenu:
            return ConsoleMenu(
                list_movies_use_case=ListMoviesUseCase(movie_store=movie_store),
                get_movie_use_case=GetMovieUseCase(movie_store=movie_store),
                create_booking_use_case=CreateBookingUseCase(
                    movie_store=movie_store,
                    booking_store=booking_store,
                    show_lock_registry=show_lock_registry,
                    coupon_book=CouponBook.from_mapping({'SAVE10': 10}),
                    price_per_seat=10.0,
                ),
                list_bookings_use_case=ListBookingsUseCase(booking_store=booking_store),
                cancel_booking_use_case=CancelBookingUseCase(
                    movie_store=movie_store,
                    booking_store=booking_store,
                    show_lock_registry=show_lock_registry,
                ),
                input_func=_scripted(lines),
                output_func=output.append,
            )

        return _build

    async def test_view_movies_then_exit(self, build_menu) -> None:
        output: list[str] = []

        await build_menu(['1', '6'], output).run()

        text = '\n'.join(output)
        assert '[1] The Matrix Resurrections (Sci-Fi, 148 min)' in text
        assert 'Show 4: 3:00 PM - 20/20 seats available' in text
        assert output[-1] == 'Goodbye!'

    async def test_book_tickets_with_coupon(
        self, build_menu, booking_store: InMemoryBookingStore
    ) -> None:
        output: list[str] = []

        await build_menu(['2', '1', '1', '1, 2', 'Alice', 'save10', '6'], output).run()

        assert 'Booking confirmed!' in output
        booking = await booking_store.get_by_id(booking_id=1)
        assert booking is not None
        assert booking.seats == [1, 2]
        assert booking.total_price == 18.0
        assert any('total $18.00 (coupon SAVE10)' in line for line in output)

    async def test_errors_are_printed_and_menu_repeats(
        self, build_menu, booking_store: InMemoryBookingStore
    ) -> None:
        output: list[str] = []

        await build_menu(
            [
                '2', 'abc',                              # movie id is not a number
                '2', '1', '1', '1,x',                    # bad seat list
                '2', '1', '1', '99', 'Alice', '',        # seat out of range
                '5', '42',                               # unknown booking
                '9',                                     # unknown option
                '6',
            ],
            output,
        ).run()

        errors = [line for line in output if line.startswith('Error: ')]
        assert errors == [
            "Error: Please enter a number, got 'abc'",
            "Error: Invalid seat number: 'x'",
            'Error: Seats not available: 99',
            'Error: Booking 42 not found',
        ]
        assert 'Invalid choice, please enter 1-6.' in output
        assert await booking_store.count() == 0

    async def test_bookings_by_customer_and_cancel(
        self, build_menu, booking_store: InMemoryBookingStore
    ) -> None:
        output: list[str] = []

        await build_menu(
            ['2', '2', '4', '5', 'Bob', '', '4', 'bob', '5', '1', '3', '6'],
            output,
        ).run()

        assert any(line.startswith('#1 Bob: Inception @ 3:00 PM, seats 5') for line in output)
        cancelled_at = output.index('Booking 1 cancelled, seats [5] released.')
        assert output[cancelled_at + 2] == 'No bookings found.'
        assert await booking_store.count() == 0

    async def test_end_of_input_stops_the_menu(self, build_menu) -> None:
        output: list[str] = []

        await build_menu([], output).run()

        assert 'Goodbye!' not in output
