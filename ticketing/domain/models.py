"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in ticketing/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from ticketing.domain.value_objects import Capacity, EventId, Money, TicketId

MAX_TICKETS_PER_USER = 5
MAX_TICKETS_PER_PURCHASE = MAX_TICKETS_PER_USER
REDEMPTION_OPENS_BEFORE = timedelta(hours=2)
REDEMPTION_CLOSES_AFTER = timedelta(hours=6)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    price: Money
    max_tickets: Capacity
    tickets_sold: int
    event_time: datetime
    active: bool

    @property
    def remaining(self) -> int:
        return self.max_tickets.value - self.tickets_sold

    def has_occurred(self, now: datetime) -> bool:
        return now >= self.event_time

    def in_redemption_window(self, now: datetime) -> bool:
        opens = self.event_time - REDEMPTION_OPENS_BEFORE
        closes = self.event_time + REDEMPTION_CLOSES_AFTER
        return opens <= now <= closes

    def with_sold(self, quantity: int) -> "Event":
        return replace(self, tickets_sold=self.tickets_sold + quantity)

    def toggled(self) -> "Event":
        return replace(self, active=not self.active)


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    event_id: EventId
    holder: str
    used: bool
    purchased_at: datetime

    def redeemed(self) -> "Ticket":
        return replace(self, used=True)

    def transferred_to(self, holder: str) -> "Ticket":
        return replace(self, holder=holder)
