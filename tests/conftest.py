"""
Pytest fixtures for an isolated ledger store per test.
"""

from datetime import datetime, timezone, timedelta

import pytest

from ledger.core.config import get_settings
from ledger.db.store import LedgerStore
from ledger.models.event import Event, EventCategory
from ledger.models.user import User
from ledger.services.event_service import create_event
from ledger.services.user_service import create_user


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached process-wide; reset around tests that patch the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> LedgerStore:
    return LedgerStore()


@pytest.fixture
def test_user(store: LedgerStore) -> User:
    return create_user(store, "Test User", "test@example.com")


@pytest.fixture
def test_event(store: LedgerStore) -> Event:
    """A concert with 100 seats at 30 per seat."""
    return create_event(
        store,
        "Test Concert",
        datetime.now(timezone.utc) + timedelta(days=30),
        "Test Venue",
        100,
        EventCategory.CONCERT,
        30,
    )


@pytest.fixture
def sold_out_event(store: LedgerStore) -> Event:
    """An event with 0 available seats."""
    event = Event(
        id="evt-sold-out",
        name="Sold Out Show",
        date=datetime.now(timezone.utc) + timedelta(days=30),
        location="Full Venue",
        max_capacity=50,
        available_seats=0,
        category=EventCategory.THEATER,
        price=40,
    )
    return store.add_event(event)
