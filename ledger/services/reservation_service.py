"""
Reservation engine: creates and cancels reservations against event capacity.

Seat accounting goes through LedgerStore.adjust_available_seats(), and each
operation holds the store lock across its checks and writes, so a failed
call never leaves a partial change behind.

Validation order for create_reservation is fixed and observable:
  1. user exists              -> NotFoundError
  2. event exists             -> NotFoundError
  3. seat_count is an int > 0 -> InvalidArgumentError
  4. enough seats left        -> CapacityExceededError (carries available count)

State machine: CONFIRMED -> CANCELLED, one-way. Cancelling twice is a no-op.
"""

from ledger.core.config import get_settings
from ledger.core.exceptions import CapacityExceededError, InvalidArgumentError, NotFoundError
from ledger.core.ids import generate_id
from ledger.core.logging import get_logger
from ledger.core.metrics import (
    record_cancellation,
    record_reservation_attempt,
    record_seats_released,
    record_seats_reserved,
)
from ledger.db.store import LedgerStore
from ledger.models.reservation import Reservation, ReservationStatus

logger = get_logger(__name__)


def create_reservation(
    store: LedgerStore,
    user_id: str,
    event_id: str,
    seat_count: int,
) -> Reservation:
    """Reserve seats on an event for a user."""
    with store.lock:
        if store.find_user(user_id) is None:
            record_reservation_attempt("not_found")
            raise NotFoundError(f"User {user_id} not found")

        event = store.find_event(event_id)
        if event is None:
            record_reservation_attempt("not_found")
            raise NotFoundError(f"Event {event_id} not found")

        if not isinstance(seat_count, int) or seat_count <= 0:
            record_reservation_attempt("invalid")
            raise InvalidArgumentError("Seat count must be a whole number greater than zero")

        reservation = Reservation(
            id=generate_id(get_settings().RESERVATION_ID_PREFIX),
            user_id=user_id,
            event_id=event_id,
            seat_count=seat_count,
            status=ReservationStatus.CONFIRMED,
        )

        available = event.available_seats
        if not store.adjust_available_seats(event_id, -seat_count):
            logger.warning(
                "reservation_failed_no_seats",
                event_id=event_id,
                requested=seat_count,
                available=available,
            )
            record_reservation_attempt("capacity")
            raise CapacityExceededError(requested=seat_count, available=available)

        reservation = store.add_reservation(reservation)

    record_reservation_attempt("success")
    record_seats_reserved(seat_count)
    logger.info(
        "reservation_created",
        reservation_id=reservation.id,
        user_id=user_id,
        event_id=event_id,
        seats=seat_count,
    )
    return reservation


def cancel_reservation(store: LedgerStore, reservation_id: str) -> Reservation:
    """
    Cancel a reservation and release its seats back to the event.
    Restored seats are clamped to the event's capacity.
    """
    with store.lock:
        reservation = store.find_reservation(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found")

        if reservation.status == ReservationStatus.CANCELLED:
            record_cancellation("already_cancelled")
            return reservation.model_copy()

        if store.find_event(reservation.event_id) is None:
            # Nowhere to return the seats; cancel the record alone.
            cancelled = store.set_reservation_status(reservation_id, ReservationStatus.CANCELLED)
            record_cancellation("orphaned")
            logger.warning(
                "reservation_cancelled_event_missing",
                reservation_id=reservation_id,
                event_id=reservation.event_id,
            )
            return cancelled

        store.adjust_available_seats(reservation.event_id, reservation.seat_count, clamp=True)
        cancelled = store.set_reservation_status(reservation_id, ReservationStatus.CANCELLED)

    record_cancellation("cancelled")
    record_seats_released(cancelled.seat_count)
    logger.info(
        "reservation_cancelled",
        reservation_id=cancelled.id,
        user_id=cancelled.user_id,
        event_id=cancelled.event_id,
        seats_restored=cancelled.seat_count,
    )
    return cancelled


def list_reservations(store: LedgerStore) -> list[Reservation]:
    return store.reservations()


def get_reservations_by_user(store: LedgerStore, user_id: str) -> list[Reservation]:
    """All reservations for a user, any status, in creation order."""
    return [r for r in store.reservations() if r.user_id == user_id]
