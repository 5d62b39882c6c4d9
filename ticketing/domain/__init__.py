from ticketing.domain.models import (
    MAX_TICKETS_PER_PURCHASE,
    MAX_TICKETS_PER_USER,
    REDEMPTION_CLOSES_AFTER,
    REDEMPTION_OPENS_BEFORE,
    Event,
    Ticket,
)
from ticketing.domain.value_objects import Capacity, EventId, Money, TicketId

__all__ = [
    "Event",
    "Ticket",
    "EventId",
    "TicketId",
    "Money",
    "Capacity",
    "MAX_TICKETS_PER_USER",
    "MAX_TICKETS_PER_PURCHASE",
    "REDEMPTION_OPENS_BEFORE",
    "REDEMPTION_CLOSES_AFTER",
]
