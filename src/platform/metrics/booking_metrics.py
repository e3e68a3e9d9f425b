from prometheus_client import Counter, Gauge


class BookingMetrics:
    """
    Flight booking business metrics, exposed on /metrics

    Tracks ticket lifecycle traffic, sold-out rejections, notification delivery
    and per-flight seat availability.
    """

    def __init__(self) -> None:
        # ========== Ticket Lifecycle ==========
        self.ticket_lifecycle_events = Counter(
            'ticket_lifecycle_events_total',
            'Ticket lifecycle events published',
            ['event_type'],  # CREATED/CONFIRMED/CANCELLED/UPDATED
        )

        self.booking_capacity_rejections = Counter(
            'booking_capacity_rejections_total',
            'Bookings rejected because the flight was sold out',
            ['flight_id'],
        )

        # ========== Seat Inventory ==========
        self.flight_available_seats = Gauge(
            'flight_available_seats',
            'Seats still available per flight',
            ['flight_id'],
        )

        # ========== Notifications ==========
        self.notifications_dispatched = Counter(
            'notifications_dispatched_total',
            'Notification deliveries by channel and result',
            ['channel', 'result'],  # channel: record/email, result: success/failure
        )

    # ========== Helper Methods ==========

    def record_ticket_event(self, *, event_type: str) -> None:
        self.ticket_lifecycle_events.labels(event_type=event_type).inc()

    def record_capacity_rejection(self, *, flight_id: int) -> None:
        self.booking_capacity_rejections.labels(flight_id=str(flight_id)).inc()

    def update_flight_availability(self, *, flight_id: int, available_seats: int) -> None:
        self.flight_available_seats.labels(flight_id=str(flight_id)).set(available_seats)

    def record_notification(self, *, channel: str, result: str) -> None:
        self.notifications_dispatched.labels(channel=channel, result=result).inc()


# Global metrics instance
metrics = BookingMetrics()
