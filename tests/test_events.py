"""
Tests for event catalog operations.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from ledger.core.exceptions import NotFoundError
from ledger.models.event import EventCategory
from ledger.services.event_service import (
    create_event,
    filter_available_events,
    filter_events_by_category,
    get_event,
    list_events,
    search_events_by_name,
)


def _event(store, name, category=EventCategory.CONCERT, capacity=10, price=15):
    return create_event(store, name, datetime(2030, 6, 1, 20, 0), "Main Hall", capacity, category, price)


def test_create_event(store):
    """New events start with every seat available."""
    event = _event(store, "Python Conference 2026", EventCategory.CONFERENCE, capacity=500, price=120)

    assert event.id.startswith("evt-")
    assert event.name == "Python Conference 2026"
    assert event.max_capacity == 500
    assert event.available_seats == 500
    assert event.category == EventCategory.CONFERENCE
    assert event.price == Decimal("120")
    assert event.version == 1


def test_create_event_zero_capacity(store):
    event = _event(store, "Private Viewing", capacity=0)
    assert event.available_seats == 0


def test_created_event_is_a_copy(store):
    """Mutating the returned event does not touch the stored record."""
    event = _event(store, "Jazz Evening")
    event.available_seats = 0

    assert get_event(store, event.id).available_seats == 10


def test_get_event_not_found(store):
    with pytest.raises(NotFoundError) as exc:
        get_event(store, "evt-missing")
    assert exc.value.status_code == 404
    assert "evt-missing" in exc.value.message


def test_list_events_insertion_order(store):
    names = ["First", "Second", "Third"]
    for name in names:
        _event(store, name)

    assert [e.name for e in list_events(store)] == names


def test_list_events_is_snapshot(store):
    _event(store, "Only")
    snapshot = list_events(store)
    snapshot.clear()

    assert len(list_events(store)) == 1


def test_filter_by_category(store):
    _event(store, "Rock Night", EventCategory.CONCERT)
    _event(store, "Knitting", EventCategory.WORKSHOP)
    _event(store, "Pop Night", EventCategory.CONCERT)

    concerts = filter_events_by_category(store, EventCategory.CONCERT)
    assert [e.name for e in concerts] == ["Rock Night", "Pop Night"]
    assert filter_events_by_category(store, EventCategory.SPORT) == []


def test_filter_available_events(store, test_event, sold_out_event):
    available = filter_available_events(store)
    assert [e.id for e in available] == [test_event.id]


def test_search_by_name_case_insensitive(store):
    _event(store, "Rock Night")
    _event(store, "Classical Morning")

    results = search_events_by_name(store, "  ROCK ")
    assert [e.name for e in results] == ["Rock Night"]


def test_search_substring(store):
    _event(store, "Summer Rock Festival")
    _event(store, "Rockabilly Revival")
    _event(store, "Opera Gala")

    assert len(search_events_by_name(store, "rock")) == 2


@pytest.mark.parametrize("term", ["", "   ", "\t\n"])
def test_search_blank_term_returns_nothing(store, term):
    """A blank search never returns the full catalog."""
    _event(store, "Rock Night")
    assert search_events_by_name(store, term) == []
