"""In-memory booking ledger, process lifetime"""

from typing import Dict, List, Optional

from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.domain.entity.booking_entity import Booking


class InMemoryBookingStore(IBookingStore):
    def __init__(self) -> None:
        self._bookings: Dict[int, Booking] = {}
        self._last_booking_id = 0

    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    async def list_all(self) -> List[Booking]:
        return [self._bookings[booking_id] for booking_id in sorted(self._bookings)]

    async def save(self, *, booking: Booking) -> Booking:
        self._bookings[booking.id] = booking
        self._last_booking_id = max(self._last_booking_id, booking.id)
        return booking

    async def delete(self, *, booking_id: int) -> Optional[Booking]:
        return self._bookings.pop(booking_id, None)

    async def next_booking_id(self) -> int:
        self._last_booking_id += 1
        return self._last_booking_id

    async def clear(self) -> None:
        self._bookings.clear()
        self._last_booking_id = 0

    async def count(self) -> int:
        return len(self._bookings)
