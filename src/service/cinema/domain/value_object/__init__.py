"""Cinema Domain Value Objects"""

from src.service.cinema.domain.value_object.coupon import Coupon, CouponBook, PricedSeats

__all__ = ['Coupon', 'CouponBook', 'PricedSeats']
