"""Booking statistics DTO."""

from typing import Dict

import attrs


@attrs.define(frozen=True)
class SystemStats:
    """
    Snapshot of catalog and ledger figures.

    revenue_by_movie is keyed by movie id, occupancy_by_show by show id (percent 0-100).
    """

    total_movies: int
    total_shows: int
    total_bookings: int
    total_seats_booked: int
    total_revenue: float
    price_per_seat: float
    revenue_by_movie: Dict[int, float] = attrs.field(factory=dict)
    occupancy_by_show: Dict[int, float] = attrs.field(factory=dict)
