"""
Read-only statistics derived from the ledger on demand.
"""

from decimal import Decimal

from ledger.core.exceptions import NotFoundError
from ledger.db.store import LedgerStore
from ledger.models.reservation import ReservationStatus
from ledger.schemas.report import EventFillRate, LedgerReport


def fill_rate(store: LedgerStore, event_id: str) -> float:
    """Percentage (0-100) of an event's capacity held by reservations."""
    event = store.find_event(event_id)
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")
    if event.max_capacity == 0:
        return 0.0
    used = event.max_capacity - event.available_seats
    return used / event.max_capacity * 100


def active_reservation_count(store: LedgerStore) -> int:
    return sum(1 for r in store.reservations() if r.status == ReservationStatus.CONFIRMED)


def total_revenue(store: LedgerStore) -> Decimal:
    """
    Sum of price * seats over confirmed reservations.
    A reservation whose event can no longer be found contributes nothing.
    """
    total = Decimal("0")
    for reservation in store.reservations():
        if reservation.status != ReservationStatus.CONFIRMED:
            continue
        event = store.find_event(reservation.event_id)
        unit_price = event.price if event is not None else Decimal("0")
        total += unit_price * reservation.seat_count
    return total


def build_report(store: LedgerStore) -> LedgerReport:
    """Fill rate for every event plus the ledger-wide totals."""
    events = [
        EventFillRate(
            event_id=e.id,
            name=e.name,
            max_capacity=e.max_capacity,
            available_seats=e.available_seats,
            fill_rate=fill_rate(store, e.id),
        )
        for e in store.events()
    ]
    return LedgerReport(
        events=events,
        active_reservations=active_reservation_count(store),
        total_revenue=total_revenue(store),
    )
