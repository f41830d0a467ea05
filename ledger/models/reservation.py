"""
Reservation record linking a user to seats on an event.

Key design decisions:
- Status allows cancellation without deleting records
- seat_count allows multi-seat reservations in one operation
- user_id / event_id are references checked only at creation time
"""

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ReservationStatus(str, enum.Enum):
    """Reservation status enum."""

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    # Declared for future flows (e.g. approval queues); nothing produces it yet.
    PENDING = "PENDING"


class Reservation(BaseModel):
    id: str
    user_id: str
    event_id: str
    seat_count: int = Field(..., gt=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: ReservationStatus = ReservationStatus.CONFIRMED

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, user={self.user_id}, event={self.event_id}, status={self.status.value})>"
