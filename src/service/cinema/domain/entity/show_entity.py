from typing import List, Set

import attrs

from src.platform.exception.exceptions import InvalidInputError


def _validate_show_time(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise InvalidInputError('Show time cannot be empty')


def _validate_total_seats(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise InvalidInputError('A show needs at least one seat')


@attrs.define
class Show:
    """
    A screening of a movie together with its seat inventory.

    Seats are numbered 1..total_seats. A seat is either in booked_seats or available,
    never both. book_seat/cancel_seat never signal errors: callers check availability
    first and hold the show lock across check and mutation.
    """

    id: int
    show_time: str = attrs.field(validator=_validate_show_time)
    total_seats: int = attrs.field(validator=_validate_total_seats)
    booked_seats: Set[int] = attrs.field(factory=set)

    def is_seat_available(self, seat_number: int) -> bool:
        return 1 <= seat_number <= self.total_seats and seat_number not in self.booked_seats

    def book_seat(self, seat_number: int) -> None:
        if self.is_seat_available(seat_number):
            self.booked_seats.add(seat_number)

    def cancel_seat(self, seat_number: int) -> None:
        self.booked_seats.discard(seat_number)

    def available_seats(self) -> List[int]:
        return [seat for seat in range(1, self.total_seats + 1) if seat not in self.booked_seats]

    def unavailable_among(self, seat_numbers: List[int]) -> List[int]:
        return [seat for seat in seat_numbers if not self.is_seat_available(seat)]

    @property
    def booked_seat_count(self) -> int:
        return len(self.booked_seats)

    @property
    def available_seat_count(self) -> int:
        return self.total_seats - self.booked_seat_count

    @property
    def is_fully_booked(self) -> bool:
        return self.available_seat_count == 0

    def occupancy_percentage(self) -> float:
        if self.total_seats <= 0:
            return 0.0
        return self.booked_seat_count / self.total_seats * 100
