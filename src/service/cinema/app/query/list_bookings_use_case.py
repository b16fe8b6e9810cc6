from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, *, booking_store: IBookingStore) -> None:
        self.booking_store = booking_store

    @classmethod
    @inject
    def depends(
        cls,
        booking_store: IBookingStore = Depends(Provide[Container.booking_store]),
    ) -> Self:
        return cls(booking_store=booking_store)

    @Logger.io
    async def list_all(self) -> List[Booking]:
        return await self.booking_store.list_all()

    @Logger.io
    async def list_by_customer(self, *, customer_name: str) -> List[Booking]:
        """Case-insensitive exact match on the customer name"""
        if not customer_name or not customer_name.strip():
            return []

        bookings = await self.booking_store.list_all()
        matched = [booking for booking in bookings if booking.belongs_to(customer_name)]

        Logger.base.info(
            f'📋 [LIST-BY-CUSTOMER] Found {len(matched)} bookings for {customer_name}'
        )
        return matched
