"""
Event Reservation Ledger - in-memory events, users and capacity-checked reservations.
"""

from ledger.db.store import LedgerStore
from ledger.models import Event, EventCategory, Reservation, ReservationStatus, User

__version__ = "1.0.0"

__all__ = [
    "LedgerStore",
    "Event", "EventCategory",
    "User",
    "Reservation", "ReservationStatus",
]
