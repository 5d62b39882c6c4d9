"""Notifications emitted by the catalog and ledger.

Receivers get the sender class and keyword payloads listed per signal.
Delivery is fire-and-forget: services dispatch with ``send_robust`` after the
enclosing transaction commits.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# id, name, price, max_tickets
event_created = Signal()
# id, active
event_toggled = Signal()
# ticket_id, event_id, buyer, purchased_at
ticket_purchased = Signal()
# ticket_id, event_id
ticket_used = Signal()
# ticket_id, from_holder, to_holder
ticket_transferred = Signal()
# recipient, amount
funds_withdrawn = Signal()


def dispatch(signal: Signal, sender: type, **payload) -> None:
    """Send signal to all receivers, logging receivers that fail."""
    for handler, result in signal.send_robust(sender=sender, **payload):
        if isinstance(result, Exception):
            logger.error(
                "Notification receiver %r failed",
                handler,
                exc_info=(type(result), result, result.__traceback__),
            )


@receiver(
    [event_created, event_toggled, ticket_purchased, ticket_used, ticket_transferred, funds_withdrawn]
)
def log_notification(sender, signal, **kwargs):
    """Log every ticketing notification."""
    logger.debug("%s: %s", _SIGNAL_NAMES.get(signal, "notification"), kwargs)


_SIGNAL_NAMES = {
    event_created: "EventCreated",
    event_toggled: "EventToggled",
    ticket_purchased: "TicketPurchased",
    ticket_used: "TicketUsed",
    ticket_transferred: "TicketTransferred",
    funds_withdrawn: "FundsWithdrawn",
}
