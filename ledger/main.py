"""
Event Reservation Ledger - demonstration entry point.

Walks the ledger end to end:
- catalog creation, category filter and name search
- reservations, including a rejected over-booking
- cancellation and seat restoration
- fill rate, active reservation count and revenue
"""

from datetime import datetime

from ledger.core.config import get_settings
from ledger.core.exceptions import CapacityExceededError
from ledger.core.logging import setup_logging, get_logger
from ledger.core.metrics import render_metrics
from ledger.db.store import LedgerStore
from ledger.models.event import EventCategory
from ledger.schemas.report import LedgerReport
from ledger.services.event_service import (
    create_event,
    filter_events_by_category,
    get_event,
    list_events,
    search_events_by_name,
)
from ledger.services.report_service import (
    active_reservation_count,
    build_report,
    fill_rate,
    total_revenue,
)
from ledger.services.reservation_service import (
    cancel_reservation,
    create_reservation,
    get_reservations_by_user,
    list_reservations,
)
from ledger.services.user_service import create_user, list_users

logger = get_logger(__name__)


def run_demo(store: LedgerStore) -> LedgerReport:
    """Replay the reference scenario against `store` and return the final report."""
    alice = create_user(store, "Alice Dupont", "alice@example.com")
    bob = create_user(store, "Bob Martin", "bob@example.com")
    logger.info("demo_users", users=[u.model_dump() for u in list_users(store)])

    concert = create_event(
        store, "Rock Night", datetime(2025, 12, 10, 20, 0), "Hall A", 100, EventCategory.CONCERT, 30
    )
    conference = create_event(
        store, "AI Conference", datetime(2025, 11, 20, 9, 0), "Conference Center", 50, EventCategory.CONFERENCE, 100
    )
    workshop = create_event(
        store, "Python Workshop", datetime(2025, 11, 15, 14, 0), "Room B", 20, EventCategory.WORKSHOP, 25
    )
    logger.info("demo_events", events=[repr(e) for e in list_events(store)])

    logger.info(
        "demo_concerts",
        events=[e.name for e in filter_events_by_category(store, EventCategory.CONCERT)],
    )
    logger.info("demo_search", term="rock", events=[e.name for e in search_events_by_name(store, "rock")])

    first = create_reservation(store, alice.id, concert.id, 2)
    logger.info("demo_reservation_confirmed", reservation=repr(first))

    try:
        create_reservation(store, bob.id, workshop.id, 25)
    except CapacityExceededError as e:
        logger.info("demo_overbooking_rejected", detail=e.message)

    second = create_reservation(store, bob.id, concert.id, 5)
    create_reservation(store, alice.id, conference.id, 1)
    logger.info("demo_reservations", reservations=[repr(r) for r in list_reservations(store)])

    cancel_reservation(store, second.id)
    logger.info(
        "demo_after_cancellation",
        reservations=[repr(r) for r in list_reservations(store)],
        concert_available=get_event(store, concert.id).available_seats,
    )

    create_reservation(store, bob.id, workshop.id, 20)
    logger.info("demo_workshop_full", workshop=repr(get_event(store, workshop.id)))

    try:
        create_reservation(store, alice.id, workshop.id, 1)
    except CapacityExceededError as e:
        logger.info("demo_event_full", detail=e.message)

    logger.info(
        "demo_statistics",
        concert_fill_rate=f"{fill_rate(store, concert.id):.2f}%",
        active_reservations=active_reservation_count(store),
        total_revenue=str(total_revenue(store)),
    )
    logger.info(
        "demo_user_reservations",
        user_id=alice.id,
        reservations=[repr(r) for r in get_reservations_by_user(store, alice.id)],
    )
    return build_report(store)


def main() -> None:
    setup_logging()
    settings = get_settings()
    logger.info(
        "demo_starting",
        version=settings.APP_VERSION,
    )

    report = run_demo(LedgerStore())
    print(report.model_dump_json(indent=2))
    if settings.METRICS_ENABLED:
        print(render_metrics())

    logger.info("demo_finished")


if __name__ == "__main__":
    main()
