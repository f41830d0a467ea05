"""
Event record with seat inventory tracking.

Key design decisions:
- `available_seats` is denormalized so capacity checks never scan reservations
- `version` is bumped on every seat adjustment, mirroring an optimistic-lock column
- Instances held by the store are mutated in place; callers only ever see copies
"""

import enum
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class EventCategory(str, enum.Enum):
    """Closed set of event categories."""

    CONCERT = "CONCERT"
    CONFERENCE = "CONFERENCE"
    WORKSHOP = "WORKSHOP"
    SPORT = "SPORT"
    THEATER = "THEATER"


class Event(BaseModel):
    id: str
    name: str
    date: datetime
    location: str
    max_capacity: int = Field(..., ge=0)
    available_seats: int
    category: EventCategory
    price: Decimal

    # Incremented on every seat adjustment
    version: int = 1

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.name}, available={self.available_seats}/{self.max_capacity})>"
