from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_booking_store import IBookingStore
from src.service.cinema.domain.entity.booking_entity import Booking


class GetBookingUseCase:
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
    async def get_booking(self, *, booking_id: int) -> Booking:
        booking = await self.booking_store.get_by_id(booking_id=booking_id)

        if not booking:
            raise NotFoundError(f'Booking {booking_id} not found')

        return booking
