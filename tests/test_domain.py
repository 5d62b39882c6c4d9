"""Unit tests for domain primitives and models.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from ticketing.domain import Capacity, Event, EventId, Money, Ticket, TicketId
from ticketing.domain.errors import ErrorCode, EventNotFoundError, SoldOutError

EVENT_TIME = datetime(2030, 6, 1, 20, 0, tzinfo=timezone.utc)


def make_event(**overrides) -> Event:
    fields = dict(
        id=EventId(0),
        name="Concert",
        price=Money(100),
        max_tickets=Capacity(10),
        tickets_sold=0,
        event_time=EVENT_TIME,
        active=True,
    )
    fields.update(overrides)
    return Event(**fields)


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_zero(self):
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_multiplies_by_quantity(self):
        assert Money(150) * 3 == Money(450)

    def test_money_adds(self):
        assert Money(150) + Money(50) == Money(200)


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(5).value == 5

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestIds:
    """Tests for EventId and TicketId value objects."""

    def test_from_string_valid_integer(self):
        assert EventId.from_string("42") == EventId(42)
        assert TicketId.from_string("7") == TicketId(7)

    def test_from_string_invalid_integer(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-number")

    def test_negative_id_rejected(self):
        with pytest.raises(ValueError):
            TicketId(-1)

    def test_ids_are_ordered(self):
        assert TicketId(1) < TicketId(2)


class TestEvent:
    """Tests for Event domain model."""

    def test_remaining(self):
        assert make_event(tickets_sold=4).remaining == 6

    def test_has_occurred_at_event_time(self):
        event = make_event()
        assert not event.has_occurred(EVENT_TIME - timedelta(seconds=1))
        assert event.has_occurred(EVENT_TIME)

    @pytest.mark.parametrize(
        "offset, expected",
        [
            (timedelta(hours=-3), False),
            (timedelta(hours=-2), True),
            (timedelta(hours=-1), True),
            (timedelta(hours=6), True),
            (timedelta(hours=6, seconds=1), False),
            (timedelta(hours=7), False),
        ],
    )
    def test_redemption_window_bounds(self, offset, expected):
        assert make_event().in_redemption_window(EVENT_TIME + offset) is expected

    def test_toggled_returns_new_event(self):
        event = make_event()
        assert event.toggled().active is False
        assert event.active is True

    def test_with_sold_accumulates(self):
        assert make_event(tickets_sold=2).with_sold(3).tickets_sold == 5


class TestTicket:
    """Tests for Ticket domain model."""

    def test_redeemed_and_transferred_keep_event(self):
        ticket = Ticket(
            id=TicketId(0),
            event_id=EventId(3),
            holder="alice",
            used=False,
            purchased_at=EVENT_TIME - timedelta(days=1),
        )
        moved = ticket.transferred_to("bob").redeemed()
        assert moved.holder == "bob"
        assert moved.used is True
        assert moved.event_id == EventId(3)


class TestErrors:
    """Tests for domain errors."""

    def test_error_str_includes_code(self):
        assert str(SoldOutError()).startswith("SOLD_OUT: ")

    def test_not_found_keeps_id(self):
        error = EventNotFoundError(9)
        assert error.code is ErrorCode.NOT_FOUND
        assert error.event_id == 9
