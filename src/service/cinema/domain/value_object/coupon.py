from typing import Dict, List, Mapping, Optional

import attrs


@attrs.define(frozen=True)
class Coupon:
    code: str
    discount_percent: float

    def apply(self, base_price: float) -> float:
        return round(base_price * (100 - self.discount_percent) / 100, 2)


@attrs.define(frozen=True)
class PricedSeats:
    """Outcome of pricing a seat selection, with the coupon that was honoured (if any)."""

    base_price: float
    total_price: float
    coupon: Optional[Coupon] = None

    @property
    def coupon_code(self) -> Optional[str]:
        return self.coupon.code if self.coupon else None

    @property
    def discount_percent(self) -> float:
        return self.coupon.discount_percent if self.coupon else 0.0


@attrs.define(frozen=True)
class CouponBook:
    """Known coupon codes keyed by upper-cased code."""

    coupons: Dict[str, Coupon] = attrs.field(factory=dict)

    @classmethod
    def from_mapping(cls, codes: Mapping[str, float]) -> 'CouponBook':
        return cls(
            coupons={
                code.strip().upper(): Coupon(code=code.strip().upper(), discount_percent=percent)
                for code, percent in codes.items()
            }
        )

    def find(self, code: Optional[str]) -> Optional[Coupon]:
        if not code or not code.strip():
            return None
        return self.coupons.get(code.strip().upper())

    def list_all(self) -> List[Coupon]:
        return sorted(self.coupons.values(), key=lambda coupon: coupon.code)

    def price_seats(
        self, *, seat_count: int, price_per_seat: float, code: Optional[str] = None
    ) -> PricedSeats:
        base_price = seat_count * price_per_seat
        coupon = self.find(code)
        return PricedSeats(
            base_price=base_price,
            total_price=coupon.apply(base_price) if coupon else base_price,
            coupon=coupon,
        )
