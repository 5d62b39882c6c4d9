"""Tests for notifications emitted through Django signals.

Run with: pytest tests/test_notifications.py -v
"""

from datetime import timedelta

import pytest

from ticketing import signals
from ticketing.domain.errors import IncorrectPaymentError
from ticketing.services import EventCatalog, TicketLedger
from tests.conftest import ADMIN, EVENT_TIME, NOW


@pytest.fixture
def received():
    """Collect (signal name, payload) for every ticketing signal."""
    captured = []
    receivers = []
    for name in ("event_created", "event_toggled", "ticket_purchased", "ticket_used", "ticket_transferred", "funds_withdrawn"):
        signal = getattr(signals, name)

        def handler(sender, _signal_name=name, **kwargs):
            kwargs.pop("signal")
            captured.append((_signal_name, sender, kwargs))

        signal.connect(handler, weak=False)
        receivers.append((signal, handler))
    yield captured
    for signal, handler in receivers:
        signal.disconnect(handler)


class TestNotifications:
    """Signals fire after successful operations only."""

    def test_event_created(self, make_event, received):
        event_id = make_event(name="Concert", price=100, max_tickets=2)
        assert received == [
            ("event_created", EventCatalog, {"id": event_id.value, "name": "Concert", "price": 100, "max_tickets": 2})
        ]

    def test_one_notification_per_ticket(self, ledger, make_event, received):
        event_id = make_event()
        received.clear()
        ticket_ids = ledger.purchase_tickets(event_id, "alice", 3, 300, NOW)
        assert [(name, payload["ticket_id"]) for name, _, payload in received] == [
            ("ticket_purchased", ticket_id.value) for ticket_id in ticket_ids
        ]
        assert all(payload["buyer"] == "alice" for _, _, payload in received)

    def test_rejected_purchase_notifies_nothing(self, ledger, make_event, received):
        event_id = make_event()
        received.clear()
        with pytest.raises(IncorrectPaymentError):
            ledger.purchase_tickets(event_id, "alice", 1, 1, NOW)
        assert received == []

    def test_ticket_used_and_transferred(self, ledger, make_event, received):
        event_id = make_event()
        (ticket_id,) = ledger.purchase_tickets(event_id, "alice", 1, 100, NOW)
        received.clear()
        ledger.transfer_ticket(ticket_id, "alice", "bob")
        ledger.redeem_ticket(ADMIN, ticket_id, EVENT_TIME - timedelta(hours=1))
        assert received == [
            ("ticket_transferred", TicketLedger, {"ticket_id": 0, "from_holder": "alice", "to_holder": "bob"}),
            ("ticket_used", TicketLedger, {"ticket_id": 0, "event_id": event_id.value}),
        ]

    def test_failing_receiver_does_not_break_operation(self, catalog, make_event):
        def broken(sender, **kwargs):
            raise RuntimeError("receiver down")

        signals.event_created.connect(broken, weak=False)
        try:
            event_id = make_event()
        finally:
            signals.event_created.disconnect(broken)
        assert catalog.get_event(event_id).active is True

    def test_withdraw_notifies_amount(self, ledger, make_event, received):
        event_id = make_event()
        ledger.purchase_tickets(event_id, "alice", 1, 100, NOW)
        received.clear()
        ledger.withdraw(ADMIN)
        assert received == [("funds_withdrawn", TicketLedger, {"recipient": ADMIN, "amount": 100})]
