from ticketing.services.authority import Authority, OwnerAuthority
from ticketing.services.event_catalog import EventCatalog
from ticketing.services.ticket_ledger import TicketLedger

__all__ = [
    "Authority",
    "OwnerAuthority",
    "EventCatalog",
    "TicketLedger",
]
