"""
User registry operations.
"""

from ledger.core.config import get_settings
from ledger.core.exceptions import NotFoundError
from ledger.core.ids import generate_id
from ledger.core.logging import get_logger
from ledger.db.store import LedgerStore
from ledger.models.user import User

logger = get_logger(__name__)


def create_user(store: LedgerStore, name: str, email: str) -> User:
    """Register a user. No format or duplicate check is made on the email."""
    user = User(
        id=generate_id(get_settings().USER_ID_PREFIX),
        name=name,
        email=email,
    )
    user = store.add_user(user)

    logger.info("user_created", user_id=user.id, email=user.email)
    return user


def get_user(store: LedgerStore, user_id: str) -> User:
    user = store.find_user(user_id)
    if user is None:
        raise NotFoundError(f"User {user_id} not found")
    return user


def list_users(store: LedgerStore) -> list[User]:
    return store.users()
