from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema.domain.entity.booking_entity import Booking


class IBookingStore(ABC):
    """Booking ledger storage"""

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Booking]:
        """All bookings ordered by id"""
        pass

    @abstractmethod
    async def save(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def delete(self, *, booking_id: int) -> Optional[Booking]:
        """Remove a booking and return it, None when absent"""
        pass

    @abstractmethod
    async def next_booking_id(self) -> int:
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
