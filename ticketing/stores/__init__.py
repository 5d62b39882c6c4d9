from ticketing.stores.interfaces import TicketingStore
from ticketing.stores.memory_store import InMemoryTicketingStore

__all__ = [
    "TicketingStore",
    "InMemoryTicketingStore",
]
