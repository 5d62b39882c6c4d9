"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from ticketing.services import EventCatalog, OwnerAuthority, TicketLedger
from ticketing.stores import InMemoryTicketingStore

ADMIN = "admin"
NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
EVENT_TIME = NOW + timedelta(days=7)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_store():
    from ticketing.conf import get_store
    get_store.cache_clear()
    yield
    get_store.cache_clear()


@pytest.fixture
def store() -> InMemoryTicketingStore:
    return InMemoryTicketingStore()


@pytest.fixture
def authority() -> OwnerAuthority:
    return OwnerAuthority(ADMIN)


@pytest.fixture
def catalog(store, authority) -> EventCatalog:
    return EventCatalog(store, authority)


@pytest.fixture
def ledger(store, authority) -> TicketLedger:
    return TicketLedger(store, authority)


@pytest.fixture
def make_event(catalog):
    """Create an event with sensible defaults and return its id."""

    def _make_event(name="Concert", price=100, max_tickets=10, event_time=EVENT_TIME, now=NOW):
        return catalog.create_event(ADMIN, name, price, max_tickets, event_time, now)

    return _make_event
