"""
Console front end

Line-oriented menu over the same use cases as the REST API. Every error is printed and
the menu is shown again.

Usage:
    movie-console
    python -m src.service.cinema.driving_adapter.cli.console_menu
"""

from typing import Callable, List

import anyio

from src.platform.config.di import container
from src.platform.exception.exceptions import CustomBaseError, InvalidInputError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.command.reset_sample_data_use_case import ResetSampleDataUseCase
from src.service.cinema.app.query.get_movie_use_case import GetMovieUseCase
from src.service.cinema.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.driving_adapter.seat_input_parser import parse_seat_numbers


MENU = """
===== Movie Ticket Booking =====
1. View movies
2. Book tickets
3. View all bookings
4. View bookings by customer
5. Cancel booking
6. Exit
"""

EXIT_CHOICE = '6'


class ConsoleMenu:
    def __init__(
        self,
        *,
        list_movies_use_case: ListMoviesUseCase,
        get_movie_use_case: GetMovieUseCase,
        create_booking_use_case: CreateBookingUseCase,
        list_bookings_use_case: ListBookingsUseCase,
        cancel_booking_use_case: CancelBookingUseCase,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self.list_movies_use_case = list_movies_use_case
        self.get_movie_use_case = get_movie_use_case
        self.create_booking_use_case = create_booking_use_case
        self.list_bookings_use_case = list_bookings_use_case
        self.cancel_booking_use_case = cancel_booking_use_case
        self._input = input_func
        self._output = output_func

    async def run(self) -> None:
        actions = {
            '1': self.view_movies,
            '2': self.book_tickets,
            '3': self.view_all_bookings,
            '4': self.view_customer_bookings,
            '5': self.cancel_booking,
        }
        while True:
            self._output(MENU)
            try:
                choice = self._input('Choose an option: ').strip()
            except EOFError:
                break

            if choice == EXIT_CHOICE:
                self._output('Goodbye!')
                break

            action = actions.get(choice)
            if not action:
                self._output('Invalid choice, please enter 1-6.')
                continue

            try:
                await action()
            except CustomBaseError as e:
                self._output(f'Error: {e.message}')
            except EOFError:
                break

    async def view_movies(self) -> None:
        movies = await self.list_movies_use_case.list_movies()
        if not movies:
            self._output('No movies available.')
            return

        for movie in movies:
            self._output(f'[{movie.id}] {movie.title} ({movie.genre}, {movie.duration} min)')
            for show in movie.shows:
                self._output(
                    f'    Show {show.id}: {show.show_time} - '
                    f'{show.available_seat_count}/{show.total_seats} seats available'
                )

    async def book_tickets(self) -> None:
        await self.view_movies()
        movie_id = self._read_int('Movie ID: ')
        movie = await self.get_movie_use_case.get_movie(movie_id=movie_id)

        show_id = self._read_int('Show ID: ')
        seats = await self.get_movie_use_case.list_available_seats(
            movie_id=movie.id, show_id=show_id
        )
        self._output(f'Available seats: {", ".join(str(seat) for seat in seats) or "none"}')

        seat_numbers = parse_seat_numbers(self._input('Seats (comma separated): '))
        customer_name = self._input('Your name: ')
        coupon_code = self._input('Coupon code (optional): ').strip() or None

        booking = await self.create_booking_use_case.create_booking(
            movie_id=movie.id,
            show_id=show_id,
            seat_numbers=seat_numbers,
            customer_name=customer_name,
            coupon_code=coupon_code,
        )
        self._output('Booking confirmed!')
        self._print_booking(booking)

    async def view_all_bookings(self) -> None:
        self._print_bookings(await self.list_bookings_use_case.list_all())

    async def view_customer_bookings(self) -> None:
        customer_name = self._input('Customer name: ')
        self._print_bookings(
            await self.list_bookings_use_case.list_by_customer(customer_name=customer_name)
        )

    async def cancel_booking(self) -> None:
        booking_id = self._read_int('Booking ID to cancel: ')
        booking = await self.cancel_booking_use_case.execute(booking_id=booking_id)
        self._output(f'Booking {booking.id} cancelled, seats {booking.seats} released.')

    def _read_int(self, prompt: str) -> int:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            raise InvalidInputError(f'Please enter a number, got {raw!r}') from None

    def _print_bookings(self, bookings: List[Booking]) -> None:
        if not bookings:
            self._output('No bookings found.')
            return
        for booking in bookings:
            self._print_booking(booking)

    def _print_booking(self, booking: Booking) -> None:
        coupon = f' (coupon {booking.coupon_code})' if booking.coupon_code else ''
        self._output(
            f'#{booking.id} {booking.customer_name}: {booking.movie_title} @ {booking.show_time}, '
            f'seats {", ".join(str(seat) for seat in booking.seats)}, '
            f'total ${booking.total_price:.2f}{coupon}'
        )


def build_console_menu() -> ConsoleMenu:
    movie_store = container.movie_store()
    booking_store = container.booking_store()
    show_lock_registry = container.show_lock_registry()

    return ConsoleMenu(
        list_movies_use_case=ListMoviesUseCase(movie_store=movie_store),
        get_movie_use_case=GetMovieUseCase(movie_store=movie_store),
        create_booking_use_case=CreateBookingUseCase(
            movie_store=movie_store,
            booking_store=booking_store,
            show_lock_registry=show_lock_registry,
            coupon_book=container.coupon_book(),
            price_per_seat=container.config_service().PRICE_PER_SEAT,
        ),
        list_bookings_use_case=ListBookingsUseCase(booking_store=booking_store),
        cancel_booking_use_case=CancelBookingUseCase(
            movie_store=movie_store,
            booking_store=booking_store,
            show_lock_registry=show_lock_registry,
        ),
    )


async def run_console() -> None:
    await ResetSampleDataUseCase(
        movie_store=container.movie_store(),
        booking_store=container.booking_store(),
        show_lock_registry=container.show_lock_registry(),
    ).execute()
    await build_console_menu().run()


def main() -> None:
    try:
        anyio.run(run_console)
    except KeyboardInterrupt:
        Logger.base.info('⚠️ Received interrupt signal')


if __name__ == '__main__':
    main()
