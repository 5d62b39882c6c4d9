"""Django ORM implementation of the TicketingStore.

Row locks taken with ``select_for_update`` inside ``transaction.atomic`` keep
purchases on the same event serialized, while purchases on other events only
contend on the ledger counter row.
"""

from collections.abc import Callable
from contextlib import AbstractContextManager

from django.db import transaction
from django.db.models import F

from ticketing import models
from ticketing.domain import Capacity, Event, EventId, Money, Ticket, TicketId
from ticketing.stores.interfaces import TicketingStore


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        price=Money(row.price),
        max_tickets=Capacity(row.max_tickets),
        tickets_sold=row.tickets_sold,
        event_time=row.event_time,
        active=row.active,
    )


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        event_id=EventId(row.event_id),
        holder=row.holder,
        used=row.used,
        purchased_at=row.purchased_at,
    )


class DjangoTicketingStore(TicketingStore):
    """Database-backed ticketing store using Django ORM."""

    def __init__(self, using: str | None = None) -> None:
        self._using = using

    def atomic(self) -> AbstractContextManager[None]:
        return transaction.atomic(using=self._using)

    def on_commit(self, callback: Callable[[], None]) -> None:
        transaction.on_commit(callback, using=self._using)

    def _account(self, for_update: bool = True) -> models.LedgerAccount:
        queryset = models.LedgerAccount.objects.using(self._using)
        if for_update:
            queryset = queryset.select_for_update()
        account = queryset.filter(pk=models.LedgerAccount.SINGLETON_ID).first()
        if account is None:
            account, _ = models.LedgerAccount.objects.using(self._using).get_or_create(
                pk=models.LedgerAccount.SINGLETON_ID
            )
        return account

    def reserve_event_id(self) -> EventId:
        account = self._account()
        event_id = EventId(account.next_event_id)
        account.next_event_id = F("next_event_id") + 1
        account.save(update_fields=["next_event_id"])
        return event_id

    def add_event(self, event: Event) -> None:
        models.Event.objects.using(self._using).create(
            id=event.id.value,
            name=event.name,
            price=event.price.amount,
            max_tickets=event.max_tickets.value,
            tickets_sold=event.tickets_sold,
            event_time=event.event_time,
            active=event.active,
        )

    def get_event(self, event_id: EventId, for_update: bool = False) -> Event | None:
        queryset = models.Event.objects.using(self._using)
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def save_event(self, event: Event) -> None:
        models.Event.objects.using(self._using).filter(pk=event.id.value).update(
            tickets_sold=event.tickets_sold,
            active=event.active,
        )

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.using(self._using).order_by("id")]

    def event_count(self) -> int:
        return models.Event.objects.using(self._using).count()

    def reserve_ticket_ids(self, quantity: int) -> list[TicketId]:
        account = self._account()
        start = account.next_ticket_id
        account.next_ticket_id = F("next_ticket_id") + quantity
        account.save(update_fields=["next_ticket_id"])
        return [TicketId(start + offset) for offset in range(quantity)]

    def add_tickets(self, tickets: list[Ticket]) -> None:
        models.Ticket.objects.using(self._using).bulk_create(
            [
                models.Ticket(
                    id=ticket.id.value,
                    event_id=ticket.event_id.value,
                    holder=ticket.holder,
                    used=ticket.used,
                    purchased_at=ticket.purchased_at,
                )
                for ticket in tickets
            ]
        )

    def get_ticket(self, ticket_id: TicketId, for_update: bool = False) -> Ticket | None:
        queryset = models.Ticket.objects.using(self._using)
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.filter(pk=ticket_id.value).first()
        return _to_ticket(row) if row is not None else None

    def save_ticket(self, ticket: Ticket) -> None:
        models.Ticket.objects.using(self._using).filter(pk=ticket.id.value).update(
            holder=ticket.holder,
            used=ticket.used,
        )

    def tickets_held_by(self, holder: str) -> list[Ticket]:
        rows = models.Ticket.objects.using(self._using).filter(holder=holder).order_by("id")
        return [_to_ticket(row) for row in rows]

    def ticket_count(self) -> int:
        return models.Ticket.objects.using(self._using).count()

    def get_holder_count(self, event_id: EventId, holder: str) -> int:
        row = (
            models.HolderCount.objects.using(self._using)
            .filter(event_id=event_id.value, holder=holder)
            .only("count")
            .first()
        )
        return row.count if row is not None else 0

    def add_holder_count(self, event_id: EventId, holder: str, quantity: int) -> None:
        queryset = models.HolderCount.objects.using(self._using)
        updated = queryset.filter(event_id=event_id.value, holder=holder).update(
            count=F("count") + quantity
        )
        if not updated:
            queryset.create(event_id=event_id.value, holder=holder, count=quantity)

    def get_proceeds(self, for_update: bool = False) -> Money:
        return Money(self._account(for_update=for_update).proceeds)

    def set_proceeds(self, amount: Money) -> None:
        models.LedgerAccount.objects.using(self._using).filter(
            pk=models.LedgerAccount.SINGLETON_ID
        ).update(proceeds=amount.amount)
