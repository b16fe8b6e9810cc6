from prometheus_client import Counter, Gauge, Histogram


class CinemaMetrics:
    """
    Booking workflow metrics

    Tracks booking/cancellation outcomes and per-show seat occupancy
    """

    def __init__(self):
        # ========== Booking Metrics ==========
        self.booking_requests = Counter(
            'cinema_booking_requests_total',
            'Total booking requests',
            ['movie_id', 'show_id', 'result'],  # result: success/seat_unavailable/...
        )

        self.booking_duration = Histogram(
            'cinema_booking_duration_seconds',
            'Booking processing time',
            ['movie_id', 'show_id'],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )

        self.seats_booked = Counter(
            'cinema_seats_booked_total',
            'Total seats booked',
            ['movie_id'],
        )

        self.booking_revenue = Counter(
            'cinema_booking_revenue_total',
            'Total revenue of created bookings',
            ['movie_id'],
        )

        self.booking_cancellations = Counter(
            'cinema_booking_cancellations_total',
            'Total cancelled bookings',
            ['movie_id'],
        )

        # ========== Inventory Metrics ==========
        self.show_occupancy = Gauge(
            'cinema_show_occupancy_percent',
            'Booked seats percentage per show',
            ['movie_id', 'show_id'],
        )

    # ========== Helper Methods ==========

    def record_booking_request(
        self, *, movie_id: int, show_id: int, result: str, duration: float
    ) -> None:
        self.booking_requests.labels(movie_id=movie_id, show_id=show_id, result=result).inc()
        self.booking_duration.labels(movie_id=movie_id, show_id=show_id).observe(duration)

    def record_booking_created(self, *, movie_id: int, seat_count: int, revenue: float) -> None:
        self.seats_booked.labels(movie_id=movie_id).inc(seat_count)
        self.booking_revenue.labels(movie_id=movie_id).inc(revenue)

    def record_booking_cancelled(self, *, movie_id: int) -> None:
        self.booking_cancellations.labels(movie_id=movie_id).inc()

    def update_show_occupancy(self, *, movie_id: int, show_id: int, percent: float) -> None:
        self.show_occupancy.labels(movie_id=movie_id, show_id=show_id).set(percent)


# Global metrics instance
metrics = CinemaMetrics()
