"""In-process implementation of the TicketingStore.

Used by service unit tests and by hosts that keep the authoritative state in
a single process. One re-entrant lock serializes every atomic scope and guards
every read and write.
"""

import threading
from collections import defaultdict
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from ticketing.domain import Event, EventId, Money, Ticket, TicketId
from ticketing.stores.interfaces import TicketingStore


class InMemoryTicketingStore(TicketingStore):
    """Dict-backed store guarded by a single lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._depth = 0
        self._pending: list[Callable[[], None]] = []
        self._events: list[Event] = []
        self._tickets: list[Ticket] = []
        self._holder_counts: dict[tuple[int, str], int] = defaultdict(int)
        self._proceeds = Money(0)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        callbacks: list[Callable[[], None]] = []
        with self._lock:
            self._depth += 1
            try:
                yield
            except BaseException:
                if self._depth == 1:
                    self._pending.clear()
                raise
            finally:
                self._depth -= 1
            if self._depth == 0:
                callbacks, self._pending = self._pending, []
        # Callbacks run after the outermost scope releases the lock.
        for callback in callbacks:
            callback()

    def on_commit(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._depth == 0:
                run_now = True
            else:
                self._pending.append(callback)
                run_now = False
        if run_now:
            callback()

    def reserve_event_id(self) -> EventId:
        with self._lock:
            return EventId(len(self._events))

    def add_event(self, event: Event) -> None:
        with self._lock:
            if event.id.value != len(self._events):
                raise ValueError(f"Event id {event.id} is not the next sequential id")
            self._events.append(event)

    def get_event(self, event_id: EventId, for_update: bool = False) -> Event | None:
        with self._lock:
            if event_id.value >= len(self._events):
                return None
            return self._events[event_id.value]

    def save_event(self, event: Event) -> None:
        with self._lock:
            self._events[event.id.value] = event

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events)

    def event_count(self) -> int:
        with self._lock:
            return len(self._events)

    def reserve_ticket_ids(self, quantity: int) -> list[TicketId]:
        with self._lock:
            start = len(self._tickets)
        return [TicketId(start + offset) for offset in range(quantity)]

    def add_tickets(self, tickets: list[Ticket]) -> None:
        with self._lock:
            for ticket in tickets:
                if ticket.id.value != len(self._tickets):
                    raise ValueError(f"Ticket id {ticket.id} is not the next sequential id")
                self._tickets.append(ticket)

    def get_ticket(self, ticket_id: TicketId, for_update: bool = False) -> Ticket | None:
        with self._lock:
            if ticket_id.value >= len(self._tickets):
                return None
            return self._tickets[ticket_id.value]

    def save_ticket(self, ticket: Ticket) -> None:
        with self._lock:
            self._tickets[ticket.id.value] = ticket

    def tickets_held_by(self, holder: str) -> list[Ticket]:
        with self._lock:
            return [ticket for ticket in self._tickets if ticket.holder == holder]

    def ticket_count(self) -> int:
        with self._lock:
            return len(self._tickets)

    def get_holder_count(self, event_id: EventId, holder: str) -> int:
        with self._lock:
            return self._holder_counts.get((event_id.value, holder), 0)

    def add_holder_count(self, event_id: EventId, holder: str, quantity: int) -> None:
        with self._lock:
            self._holder_counts[(event_id.value, holder)] += quantity

    def get_proceeds(self, for_update: bool = False) -> Money:
        with self._lock:
            return self._proceeds

    def set_proceeds(self, amount: Money) -> None:
        with self._lock:
            self._proceeds = amount
