"""Coupon validation result DTO."""

import attrs


@attrs.define(frozen=True)
class CouponValidation:
    code: str
    valid: bool
    discount_percent: float = 0.0
