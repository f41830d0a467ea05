"""
Tests for user registry operations.
"""

import pytest

from ledger.core.exceptions import NotFoundError
from ledger.services.user_service import create_user, get_user, list_users


def test_create_user(store):
    user = create_user(store, "Alice Dupont", "alice@example.com")
    assert user.id.startswith("usr-")
    assert user.name == "Alice Dupont"
    assert user.email == "alice@example.com"


def test_duplicate_email_allowed(store):
    """No uniqueness check is made on email."""
    first = create_user(store, "Alice", "shared@example.com")
    second = create_user(store, "Alice Again", "shared@example.com")

    assert first.id != second.id
    assert len(list_users(store)) == 2


def test_list_users_insertion_order(store):
    create_user(store, "Alice", "alice@example.com")
    create_user(store, "Bob", "bob@example.com")

    assert [u.name for u in list_users(store)] == ["Alice", "Bob"]


def test_get_user(store, test_user):
    assert get_user(store, test_user.id) == test_user


def test_get_user_not_found(store):
    with pytest.raises(NotFoundError):
        get_user(store, "usr-missing")


def test_stores_are_isolated(store):
    """Fresh store per test: nothing leaks from other tests."""
    assert list_users(store) == []


def test_created_user_matches_stored_record(store):
    user = create_user(store, "Carol", "carol@example.com")
    assert list_users(store) == [user]
    assert get_user(store, user.id) is user
