"""Application layer DTOs"""

from src.service.cinema.app.dto.coupon_validation import CouponValidation
from src.service.cinema.app.dto.system_stats import SystemStats

__all__ = [
    'CouponValidation',
    'SystemStats',
]
