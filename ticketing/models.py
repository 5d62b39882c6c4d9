"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class LedgerAccount(models.Model):
    """Singleton row holding the sequential id counters and unswept proceeds."""

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID)
    next_event_id = models.PositiveBigIntegerField(default=0)
    next_ticket_id = models.PositiveBigIntegerField(default=0)
    proceeds = models.PositiveBigIntegerField(default=0)

    def __str__(self) -> str:
        return f"ledger (events={self.next_event_id}, tickets={self.next_ticket_id})"


class Event(models.Model):
    """Persistence model for events."""

    id = models.PositiveBigIntegerField(primary_key=True)
    name = models.CharField(max_length=255)
    price = models.PositiveBigIntegerField()
    max_tickets = models.PositiveIntegerField()
    tickets_sold = models.PositiveIntegerField(default=0)
    event_time = models.DateTimeField()
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(tickets_sold__lte=models.F("max_tickets")),
                name="event_tickets_sold_lte_max",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets."""

    id = models.PositiveBigIntegerField(primary_key=True)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="tickets")
    holder = models.CharField(max_length=255)
    used = models.BooleanField(default=False)
    purchased_at = models.DateTimeField()

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["holder"], name="ticket_holder_idx"),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.event.name}"


class HolderCount(models.Model):
    """Tickets bought per (event, holder), enforced against the per-user cap."""

    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="holder_counts")
    holder = models.CharField(max_length=255)
    count = models.PositiveIntegerField(default=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["event", "holder"], name="unique_event_holder"),
        ]

    def __str__(self) -> str:
        return f"{self.holder} - {self.event_id}: {self.count}"
