from ledger.models.event import Event, EventCategory
from ledger.models.user import User
from ledger.models.reservation import Reservation, ReservationStatus

__all__ = [
    "Event", "EventCategory",
    "User",
    "Reservation", "ReservationStatus",
]
