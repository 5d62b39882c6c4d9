"""Ticket ledger service - purchases, transfers and redemptions.

Every mutating operation checks all of its preconditions before writing, inside
one atomic store scope, so a rejected call leaves the ledger unchanged.
Purchase preconditions are checked in a fixed order and the first failure is
the one reported.
"""

import logging
from datetime import datetime

from ticketing import signals
from ticketing.domain import (
    MAX_TICKETS_PER_PURCHASE,
    MAX_TICKETS_PER_USER,
    EventId,
    Money,
    Ticket,
    TicketId,
)
from ticketing.domain.errors import (
    AlreadyUsedError,
    EventAlreadyOccurredError,
    InactiveEventError,
    IncorrectPaymentError,
    InvalidInputError,
    NotOwnerError,
    OutsideRedemptionWindowError,
    PerUserLimitExceededError,
    QuantityExceedsPerTxLimitError,
    SoldOutError,
    TicketNotFoundError,
)
from ticketing.services.authority import Authority, require_authority
from ticketing.stores.interfaces import TicketingStore

logger = logging.getLogger(__name__)


class TicketLedger:
    """Service for ticket lifecycle operations."""

    def __init__(self, store: TicketingStore, authority: Authority) -> None:
        self._store = store
        self._authority = authority

    def purchase_tickets(
        self,
        event_id: EventId,
        buyer: str,
        quantity: int,
        paid_amount: int,
        now: datetime,
    ) -> list[TicketId]:
        """Mint quantity tickets for buyer and return their ids in mint order.

        Raises, in order of precedence:
            InactiveEventError: If the event is unknown or inactive.
            InvalidInputError: If quantity is not positive or buyer is empty.
            QuantityExceedsPerTxLimitError: If quantity is above the per-purchase cap.
            PerUserLimitExceededError: If buyer would exceed the per-event cap.
            SoldOutError: If the event lacks remaining inventory.
            IncorrectPaymentError: If paid_amount is not price * quantity.
            EventAlreadyOccurredError: If now is not before the event time.
        """
        with self._store.atomic():
            event = self._store.get_event(event_id, for_update=True)
            if event is None or not event.active:
                raise InactiveEventError()
            if quantity <= 0:
                raise InvalidInputError("Quantity must be positive")
            if not buyer:
                raise InvalidInputError("Buyer must not be empty")
            if quantity > MAX_TICKETS_PER_PURCHASE:
                raise QuantityExceedsPerTxLimitError(MAX_TICKETS_PER_PURCHASE)
            held = self._store.get_holder_count(event_id, buyer)
            if held + quantity > MAX_TICKETS_PER_USER:
                raise PerUserLimitExceededError(MAX_TICKETS_PER_USER)
            if quantity > event.remaining:
                raise SoldOutError()
            if paid_amount != (event.price * quantity).amount:
                raise IncorrectPaymentError()
            if event.has_occurred(now):
                raise EventAlreadyOccurredError()

            ticket_ids = self._store.reserve_ticket_ids(quantity)
            tickets = [
                Ticket(id=ticket_id, event_id=event_id, holder=buyer, used=False, purchased_at=now)
                for ticket_id in ticket_ids
            ]
            self._store.add_tickets(tickets)
            self._store.save_event(event.with_sold(quantity))
            self._store.add_holder_count(event_id, buyer, quantity)
            proceeds = self._store.get_proceeds(for_update=True)
            self._store.set_proceeds(proceeds + Money(paid_amount))

            for ticket in tickets:
                self._store.on_commit(
                    lambda ticket=ticket: signals.dispatch(
                        signals.ticket_purchased,
                        sender=TicketLedger,
                        ticket_id=ticket.id.value,
                        event_id=event_id.value,
                        buyer=buyer,
                        purchased_at=now,
                    )
                )

        logger.info(
            "Sold %d ticket(s) for event %s to %s: %s",
            quantity,
            event_id,
            buyer,
            [ticket_id.value for ticket_id in ticket_ids],
        )
        return ticket_ids

    def redeem_ticket(self, caller: str, ticket_id: TicketId, now: datetime) -> Ticket:
        """Mark a ticket used at the gate.

        Raises:
            UnauthorizedError: If caller is not the administrative authority.
            TicketNotFoundError: If the ticket does not exist.
            AlreadyUsedError: If the ticket was already redeemed.
            InactiveEventError: If the ticket's event is inactive.
            OutsideRedemptionWindowError: If now is outside the window around
                the event time.
        """
        require_authority(self._authority, caller)
        with self._store.atomic():
            ticket = self._store.get_ticket(ticket_id, for_update=True)
            if ticket is None:
                raise TicketNotFoundError(ticket_id.value)
            if ticket.used:
                raise AlreadyUsedError()
            event = self._store.get_event(ticket.event_id)
            if event is None or not event.active:
                raise InactiveEventError()
            if not event.in_redemption_window(now):
                raise OutsideRedemptionWindowError()

            ticket = ticket.redeemed()
            self._store.save_ticket(ticket)
            self._store.on_commit(
                lambda: signals.dispatch(
                    signals.ticket_used,
                    sender=TicketLedger,
                    ticket_id=ticket_id.value,
                    event_id=ticket.event_id.value,
                )
            )

        logger.info("Redeemed ticket %s for event %s", ticket_id, ticket.event_id)
        return ticket

    def transfer_ticket(self, ticket_id: TicketId, from_holder: str, to_holder: str) -> Ticket:
        """Move a ticket to a new holder.

        Holder counts are purchase-time figures and are left as they are.

        Raises:
            TicketNotFoundError: If the ticket does not exist.
            NotOwnerError: If from_holder does not hold the ticket.
            InvalidInputError: If to_holder is empty.
        """
        with self._store.atomic():
            ticket = self._store.get_ticket(ticket_id, for_update=True)
            if ticket is None:
                raise TicketNotFoundError(ticket_id.value)
            if ticket.holder != from_holder:
                raise NotOwnerError()
            if not to_holder:
                raise InvalidInputError("Recipient must not be empty")

            ticket = ticket.transferred_to(to_holder)
            self._store.save_ticket(ticket)
            self._store.on_commit(
                lambda: signals.dispatch(
                    signals.ticket_transferred,
                    sender=TicketLedger,
                    ticket_id=ticket_id.value,
                    from_holder=from_holder,
                    to_holder=to_holder,
                )
            )

        logger.info("Transferred ticket %s from %s to %s", ticket_id, from_holder, to_holder)
        return ticket

    def is_valid(self, ticket_id: TicketId, now: datetime) -> bool:
        """Return True if the ticket is unused, its event active and not yet started."""
        ticket = self._store.get_ticket(ticket_id)
        if ticket is None:
            return False
        event = self._store.get_event(ticket.event_id)
        if event is None:
            return False
        return not ticket.used and event.active and not event.has_occurred(now)

    def get_user_ticket_count(self, event_id: EventId, holder: str) -> int:
        return self._store.get_holder_count(event_id, holder)

    def get_ticket(self, ticket_id: TicketId) -> Ticket:
        ticket = self._store.get_ticket(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id.value)
        return ticket

    def tickets_of(self, holder: str) -> list[Ticket]:
        return self._store.tickets_held_by(holder)

    def ticket_count(self) -> int:
        return self._store.ticket_count()

    def proceeds(self) -> int:
        return self._store.get_proceeds().amount

    def withdraw(self, caller: str) -> int:
        """Sweep accumulated proceeds to the authority and return the amount.

        Raises:
            UnauthorizedError: If caller is not the administrative authority.
        """
        require_authority(self._authority, caller)
        with self._store.atomic():
            amount = self._store.get_proceeds(for_update=True)
            self._store.set_proceeds(Money(0))
            self._store.on_commit(
                lambda: signals.dispatch(
                    signals.funds_withdrawn,
                    sender=TicketLedger,
                    recipient=caller,
                    amount=amount.amount,
                )
            )

        logger.info("Withdrew %s to %s", amount, caller)
        return amount.amount
