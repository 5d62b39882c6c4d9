"""Event catalog service - owns Event records and their invariants.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import datetime

from ticketing import signals
from ticketing.domain import Capacity, Event, EventId, Money
from ticketing.domain.errors import EventNotFoundError, InvalidInputError
from ticketing.services.authority import Authority, require_authority
from ticketing.stores.interfaces import TicketingStore

logger = logging.getLogger(__name__)


class EventCatalog:
    """Service for event catalog operations."""

    def __init__(self, store: TicketingStore, authority: Authority) -> None:
        self._store = store
        self._authority = authority

    def create_event(
        self,
        caller: str,
        name: str,
        price: int,
        max_tickets: int,
        event_time: datetime,
        now: datetime,
    ) -> EventId:
        """Create an active event with no tickets sold.

        Raises:
            UnauthorizedError: If caller is not the administrative authority.
            InvalidInputError: If name is blank, price or max_tickets is not
                positive, or event_time is not after now.
        """
        require_authority(self._authority, caller)
        if not name or not name.strip():
            raise InvalidInputError("Event name must not be empty")
        if price <= 0:
            raise InvalidInputError("Price must be positive")
        if max_tickets <= 0:
            raise InvalidInputError("Max tickets must be positive")
        if event_time <= now:
            raise InvalidInputError("Event must be in the future")

        with self._store.atomic():
            event_id = self._store.reserve_event_id()
            event = Event(
                id=event_id,
                name=name,
                price=Money(price),
                max_tickets=Capacity(max_tickets),
                tickets_sold=0,
                event_time=event_time,
                active=True,
            )
            self._store.add_event(event)
            self._store.on_commit(
                lambda: signals.dispatch(
                    signals.event_created,
                    sender=EventCatalog,
                    id=event_id.value,
                    name=name,
                    price=price,
                    max_tickets=max_tickets,
                )
            )

        logger.info("Created event %s %r (%d tickets at %d)", event_id, name, max_tickets, price)
        return event_id

    def toggle_active(self, caller: str, event_id: EventId) -> Event:
        """Flip the event's active flag and return the updated event.

        Raises:
            UnauthorizedError: If caller is not the administrative authority.
            EventNotFoundError: If the event does not exist.
        """
        require_authority(self._authority, caller)
        with self._store.atomic():
            event = self._store.get_event(event_id, for_update=True)
            if event is None:
                raise EventNotFoundError(event_id.value)
            event = event.toggled()
            self._store.save_event(event)
            self._store.on_commit(
                lambda: signals.dispatch(
                    signals.event_toggled,
                    sender=EventCatalog,
                    id=event_id.value,
                    active=event.active,
                )
            )

        logger.info("Event %s is now %s", event_id, "active" if event.active else "inactive")
        return event

    def get_event(self, event_id: EventId) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id.value)
        return event

    def list_events(self) -> list[Event]:
        return self._store.list_events()

    def event_count(self) -> int:
        return self._store.event_count()
