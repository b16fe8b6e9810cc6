from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.cinema.app.dto.system_stats import SystemStats
from src.service.cinema.domain.entity.booking_entity import Booking


class BookingCreateRequest(BaseModel):
    movie_id: int
    show_id: int
    seat_numbers: List[int]
    customer_name: str
    coupon_code: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {'movie_id': 1, 'show_id': 1, 'seat_numbers': [1, 2], 'customer_name': 'Alice'},
                {
                    'movie_id': 2,
                    'show_id': 4,
                    'seat_numbers': [5],
                    'customer_name': 'Bob',
                    'coupon_code': 'SAVE10',
                },
            ]
        }
    )


class BookingResponse(BaseModel):
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
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id,
            customer_name=booking.customer_name,
            movie_id=booking.movie_id,
            movie_title=booking.movie_title,
            show_id=booking.show_id,
            show_time=booking.show_time,
            seats=list(booking.seats),
            total_price=booking.total_price,
            coupon_code=booking.coupon_code,
            discount_percent=booking.discount_percent,
            created_at=booking.created_at,
        )


class CancelBookingResponse(BaseModel):
    message: str
    booking: BookingResponse


class CouponResponse(BaseModel):
    code: str
    discount_percent: float


class CouponValidationResponse(BaseModel):
    code: str
    valid: bool
    discount_percent: float = 0.0


class BookingStatsResponse(BaseModel):
    total_movies: int
    total_shows: int
    total_bookings: int
    total_seats_booked: int
    total_revenue: float
    price_per_seat: float
    revenue_by_movie: Dict[int, float]
    occupancy_by_show: Dict[int, float]

    @classmethod
    def from_dto(cls, stats: SystemStats) -> 'BookingStatsResponse':
        return cls(
            total_movies=stats.total_movies,
            total_shows=stats.total_shows,
            total_bookings=stats.total_bookings,
            total_seats_booked=stats.total_seats_booked,
            total_revenue=stats.total_revenue,
            price_per_seat=stats.price_per_seat,
            revenue_by_movie=dict(stats.revenue_by_movie),
            occupancy_by_show=dict(stats.occupancy_by_show),
        )
