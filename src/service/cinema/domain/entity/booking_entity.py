from datetime import datetime, timezone
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger


def validate_booking_request(*, customer_name: str, seat_numbers: List[int]) -> str:
    """
    Validate the caller-supplied part of a booking request.

    Returns:
        The trimmed customer name

    Raises:
        InvalidInputError: blank name, empty seat list, non-positive or duplicate seats
    """
    name = (customer_name or '').strip()
    if not name:
        raise InvalidInputError('Customer name cannot be empty')

    if not seat_numbers:
        raise InvalidInputError('At least one seat must be selected')

    for seat_number in seat_numbers:
        # bool is an int subclass, reject it explicitly
        if isinstance(seat_number, bool) or not isinstance(seat_number, int):
            raise InvalidInputError(f'Invalid seat number: {seat_number!r}')
        if seat_number <= 0:
            raise InvalidInputError('Seat numbers must be positive')

    duplicates = sorted({seat for seat in seat_numbers if seat_numbers.count(seat) > 1})
    if duplicates:
        raise InvalidInputError(f'Duplicate seat numbers in request: {duplicates}')

    return name


@attrs.define
class Booking:
    """
    A confirmed purchase of seats for one show.

    movie_title and show_time are copied at purchase time and are not refreshed
    when the catalog changes later.
    """

    id: int
    customer_name: str
    movie_id: int
    movie_title: str
    show_id: int
    show_time: str
    seats: List[int]
    total_price: float
    coupon_code: Optional[str] = None
    discount_percent: float = 0.0
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: int,
        customer_name: str,
        movie_id: int,
        movie_title: str,
        show_id: int,
        show_time: str,
        seats: List[int],
        total_price: float,
        coupon_code: Optional[str] = None,
        discount_percent: float = 0.0,
    ) -> 'Booking':
        name = validate_booking_request(customer_name=customer_name, seat_numbers=seats)
        if total_price < 0:
            raise InvalidInputError('Total price cannot be negative')

        return cls(
            id=id,
            customer_name=name,
            movie_id=movie_id,
            movie_title=movie_title,
            show_id=show_id,
            show_time=show_time,
            seats=list(seats),
            total_price=total_price,
            coupon_code=coupon_code,
            discount_percent=discount_percent,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    def belongs_to(self, customer_name: str) -> bool:
        return self.customer_name.casefold() == customer_name.strip().casefold()
