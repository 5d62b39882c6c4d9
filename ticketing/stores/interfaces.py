"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import AbstractContextManager

from ticketing.domain import Event, EventId, Money, Ticket, TicketId


class TicketingStore(ABC):
    """Interface for event and ticket persistence operations.

    Mutating service calls run inside ``atomic()``. Reads made with
    ``for_update=True`` inside that scope hold the record until it closes.
    """

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Return a context manager making the enclosed operations indivisible."""
        ...

    @abstractmethod
    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run callback once the current atomic scope has committed."""
        ...

    # Events

    @abstractmethod
    def reserve_event_id(self) -> EventId:
        """Return the next sequential event id and advance the counter."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        ...

    @abstractmethod
    def get_event(self, event_id: EventId, for_update: bool = False) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Persist the mutable fields of an existing event."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by id ascending."""
        ...

    @abstractmethod
    def event_count(self) -> int:
        ...

    # Tickets

    @abstractmethod
    def reserve_ticket_ids(self, quantity: int) -> list[TicketId]:
        """Return the next ``quantity`` sequential ticket ids and advance the counter."""
        ...

    @abstractmethod
    def add_tickets(self, tickets: list[Ticket]) -> None:
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId, for_update: bool = False) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def save_ticket(self, ticket: Ticket) -> None:
        """Persist the mutable fields of an existing ticket."""
        ...

    @abstractmethod
    def tickets_held_by(self, holder: str) -> list[Ticket]:
        """Return tickets currently held by holder, ordered by id ascending."""
        ...

    @abstractmethod
    def ticket_count(self) -> int:
        ...

    # Holder counts

    @abstractmethod
    def get_holder_count(self, event_id: EventId, holder: str) -> int:
        """Return the purchase count for (event, holder), 0 when absent."""
        ...

    @abstractmethod
    def add_holder_count(self, event_id: EventId, holder: str, quantity: int) -> None:
        ...

    # Proceeds

    @abstractmethod
    def get_proceeds(self, for_update: bool = False) -> Money:
        ...

    @abstractmethod
    def set_proceeds(self, amount: Money) -> None:
        ...
