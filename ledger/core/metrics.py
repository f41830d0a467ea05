"""
Metrics instrumentation for observability.
Counters live in a dedicated registry and are rendered in the
Prometheus text exposition format by render_metrics().
"""

from prometheus_client import CollectorRegistry, Counter, generate_latest

from ledger.core.config import get_settings

registry = CollectorRegistry()

# Reservation metrics
reservation_attempts = Counter(
    'reservation_attempts_total',
    'Total reservation attempts',
    ['status'],  # success, not_found, invalid, capacity
    registry=registry,
)

reservation_cancellations = Counter(
    'reservation_cancellations_total',
    'Total reservation cancellation requests',
    ['result'],  # cancelled, already_cancelled, orphaned
    registry=registry,
)

# Seat inventory metrics
seats_reserved = Counter(
    'seats_reserved_total',
    'Seats deducted from events by confirmed reservations',
    registry=registry,
)

seats_released = Counter(
    'seats_released_total',
    'Seats restored to events by cancellations',
    registry=registry,
)


def render_metrics() -> str:
    """Current metrics in the Prometheus text format."""
    return generate_latest(registry).decode("utf-8")


def _enabled() -> bool:
    return get_settings().METRICS_ENABLED


def record_reservation_attempt(status: str):
    """Record reservation attempt. Status: success, not_found, invalid, capacity"""
    if _enabled():
        reservation_attempts.labels(status=status).inc()


def record_cancellation(result: str):
    """Record cancellation. Result: cancelled, already_cancelled, orphaned"""
    if _enabled():
        reservation_cancellations.labels(result=result).inc()


def record_seats_reserved(count: int):
    if _enabled():
        seats_reserved.inc(count)


def record_seats_released(count: int):
    if _enabled():
        seats_released.inc(count)
