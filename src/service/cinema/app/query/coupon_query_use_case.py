from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.coupon_validation import CouponValidation
from src.service.cinema.domain.value_object.coupon import Coupon, CouponBook


class CouponQueryUseCase:
    def __init__(self, *, coupon_book: CouponBook) -> None:
        self.coupon_book = coupon_book

    @classmethod
    @inject
    def depends(
        cls,
        coupon_book: CouponBook = Depends(Provide[Container.coupon_book]),
    ) -> Self:
        return cls(coupon_book=coupon_book)

    @Logger.io
    async def list_coupons(self) -> List[Coupon]:
        return self.coupon_book.list_all()

    @Logger.io
    async def validate_coupon(self, *, coupon_code: str) -> CouponValidation:
        coupon = self.coupon_book.find(coupon_code)
        if not coupon:
            return CouponValidation(code=(coupon_code or '').strip().upper(), valid=False)
        return CouponValidation(
            code=coupon.code, valid=True, discount_percent=coupon.discount_percent
        )
