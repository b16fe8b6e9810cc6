from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.constant.route_constant import (
    BOOKING_BY_CUSTOMER,
    BOOKING_CANCEL,
    BOOKING_COUPON_VALIDATE,
    BOOKING_COUPONS,
    BOOKING_CREATE,
    BOOKING_GET,
    BOOKING_LIST,
    BOOKING_STATS,
)
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.query.coupon_query_use_case import CouponQueryUseCase
from src.service.cinema.app.query.get_booking_use_case import GetBookingUseCase
from src.service.cinema.app.query.get_stats_use_case import GetStatsUseCase
from src.service.cinema.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingStatsResponse,
    CancelBookingResponse,
    CouponResponse,
    CouponValidationResponse,
)


router = APIRouter(tags=['booking'])
tracer = trace.get_tracer(__name__)


# Static paths first: /{booking_id} would otherwise swallow them


@router.get(BOOKING_COUPONS)
@Logger.io
async def list_coupons(
    use_case: CouponQueryUseCase = Depends(CouponQueryUseCase.depends),
) -> List[CouponResponse]:
    coupons = await use_case.list_coupons()
    return [
        CouponResponse(code=coupon.code, discount_percent=coupon.discount_percent)
        for coupon in coupons
    ]


@router.get(BOOKING_COUPON_VALIDATE)
@Logger.io
async def validate_coupon(
    coupon_code: str,
    use_case: CouponQueryUseCase = Depends(CouponQueryUseCase.depends),
) -> CouponValidationResponse:
    result = await use_case.validate_coupon(coupon_code=coupon_code)
    return CouponValidationResponse(
        code=result.code, valid=result.valid, discount_percent=result.discount_percent
    )


@router.get(BOOKING_STATS)
@Logger.io
async def get_booking_stats(
    use_case: GetStatsUseCase = Depends(GetStatsUseCase.depends),
) -> BookingStatsResponse:
    return BookingStatsResponse.from_dto(await use_case.get_stats())


@router.get(BOOKING_BY_CUSTOMER)
@Logger.io
async def list_customer_bookings(
    customer_name: str,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_by_customer(customer_name=customer_name)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get(BOOKING_LIST)
@Logger.io
async def list_bookings(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_all()
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.post(BOOKING_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('movie_id', request.movie_id)
        span.set_attribute('show_id', request.show_id)

        booking = await use_case.create_booking(
            movie_id=request.movie_id,
            show_id=request.show_id,
            seat_numbers=request.seat_numbers,
            customer_name=request.customer_name,
            coupon_code=request.coupon_code,
        )

        span.set_attribute('booking.id', booking.id)
        return BookingResponse.from_entity(booking)


@router.get(BOOKING_GET)
@Logger.io
async def get_booking(
    booking_id: int,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return BookingResponse.from_entity(booking)


@router.delete(BOOKING_CANCEL)
@Logger.io
async def cancel_booking(
    booking_id: int,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> CancelBookingResponse:
    booking = await use_case.execute(booking_id=booking_id)
    return CancelBookingResponse(
        message=f'Booking {booking.id} cancelled',
        booking=BookingResponse.from_entity(booking),
    )
