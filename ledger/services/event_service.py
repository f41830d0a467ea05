"""
Event catalog operations: creation, lookup, listing, filtering and search.
"""

from datetime import datetime
from decimal import Decimal
from typing import Union

from ledger.core.config import get_settings
from ledger.core.exceptions import NotFoundError
from ledger.core.ids import generate_id
from ledger.core.logging import get_logger
from ledger.db.store import LedgerStore
from ledger.models.event import Event, EventCategory

logger = get_logger(__name__)


def create_event(
    store: LedgerStore,
    name: str,
    date: datetime,
    location: str,
    max_capacity: int,
    category: EventCategory,
    price: Union[int, float, Decimal],
) -> Event:
    """Create a new event with full seat availability."""
    event = Event(
        id=generate_id(get_settings().EVENT_ID_PREFIX),
        name=name,
        date=date,
        location=location,
        max_capacity=max_capacity,
        available_seats=max_capacity,  # All seats available initially
        category=category,
        price=price,
    )
    event = store.add_event(event)

    logger.info("event_created", event_id=event.id, name=event.name, seats=event.max_capacity)
    return event


def get_event(store: LedgerStore, event_id: str) -> Event:
    """Get a single event by ID."""
    event = store.find_event(event_id)
    if event is None:
        raise NotFoundError(f"Event {event_id} not found")
    return event.model_copy()


def list_events(store: LedgerStore) -> list[Event]:
    return store.events()


def filter_events_by_category(store: LedgerStore, category: EventCategory) -> list[Event]:
    return [e for e in store.events() if e.category == category]


def filter_available_events(store: LedgerStore) -> list[Event]:
    """Events that still have at least one seat left."""
    return [e for e in store.events() if e.available_seats > 0]


def search_events_by_name(store: LedgerStore, term: str) -> list[Event]:
    """
    Case-insensitive substring search on event names.
    A blank term matches nothing rather than the whole catalog.
    """
    needle = term.strip().lower()
    if not needle:
        return []
    return [e for e in store.events() if needle in e.name.lower()]
