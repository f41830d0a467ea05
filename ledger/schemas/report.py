"""
Pydantic schemas for aggregate ledger reports.
"""

from decimal import Decimal
from pydantic import BaseModel, Field


class EventFillRate(BaseModel):
    event_id: str
    name: str
    max_capacity: int
    available_seats: int
    fill_rate: float = Field(..., ge=0, le=100)


class LedgerReport(BaseModel):
    events: list[EventFillRate]
    active_reservations: int
    total_revenue: Decimal
