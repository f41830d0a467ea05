"""
In-memory repository for events, users and reservations.

SEAT ACCOUNTING: conditional update under a store lock
======================================================

Problem:
  Two callers try to reserve the last seat at the same time.
  Both read available_seats=1, both decrement to 0, both succeed.
  Result: overbooking.

Solution:
  Every change to an event's available seats goes through
  adjust_available_seats(), which applies a delta only if the result stays
  within [0, max_capacity] (or clamps into that range when asked to), and
  bumps the event's version on every write. It is the in-memory equivalent of

    UPDATE events SET available_seats = available_seats + :delta, version = version + 1
    WHERE id = :event_id AND available_seats + :delta BETWEEN 0 AND max_capacity

  Services that need a multi-step check-then-write (validate the user,
  validate the event, then adjust and append) hold `store.lock` for the
  whole sequence. The lock is re-entrant, so store methods called inside
  that block take it again without deadlocking.

Records are kept in insertion-ordered dicts keyed by id. The listing
methods hand out copies; find_*() return the live record, which callers
read but only change through the store methods.
"""

import threading
from typing import Optional

from ledger.core.exceptions import NotFoundError
from ledger.models.event import Event
from ledger.models.reservation import Reservation, ReservationStatus
from ledger.models.user import User


class LedgerStore:
    """Process-local store. Construct one per ledger and pass it to the services."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._events: dict[str, Event] = {}
        self._users: dict[str, User] = {}
        self._reservations: dict[str, Reservation] = {}

    # Writes

    def add_event(self, event: Event) -> Event:
        with self.lock:
            self._events[event.id] = event
        return event.model_copy()

    def add_user(self, user: User) -> User:
        with self.lock:
            self._users[user.id] = user
        return user

    def add_reservation(self, reservation: Reservation) -> Reservation:
        with self.lock:
            self._reservations[reservation.id] = reservation
        return reservation.model_copy()

    def adjust_available_seats(self, event_id: str, delta: int, clamp: bool = False) -> bool:
        """
        Atomically add `delta` to an event's available seats.

        Without `clamp`, the update is refused (returns False) when the result
        would fall outside [0, max_capacity]. With `clamp`, the result is
        forced into that range instead and the update always applies.
        """
        with self.lock:
            event = self._events.get(event_id)
            if event is None:
                raise NotFoundError(f"Event {event_id} not found")

            updated = event.available_seats + delta
            if clamp:
                updated = max(0, min(updated, event.max_capacity))
            elif updated < 0 or updated > event.max_capacity:
                return False

            event.available_seats = updated
            event.version += 1
            return True

    def set_reservation_status(self, reservation_id: str, status: ReservationStatus) -> Reservation:
        with self.lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                raise NotFoundError(f"Reservation {reservation_id} not found")
            reservation.status = status
            return reservation.model_copy()

    # Reads

    def find_event(self, event_id: str) -> Optional[Event]:
        return self._events.get(event_id)

    def find_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def find_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self._reservations.get(reservation_id)

    def events(self) -> list[Event]:
        with self.lock:
            return [e.model_copy() for e in self._events.values()]

    def users(self) -> list[User]:
        with self.lock:
            return list(self._users.values())

    def reservations(self) -> list[Reservation]:
        with self.lock:
            return [r.model_copy() for r in self._reservations.values()]
