"""App settings, read from ``settings.TICKETING`` with defaults."""

from functools import lru_cache
from typing import Any

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from ticketing.services import EventCatalog, OwnerAuthority, TicketLedger
from ticketing.stores.interfaces import TicketingStore

DEFAULTS: dict[str, Any] = {
    "AUTHORITY": "admin",
    "STORE": "ticketing.stores.django_store.DjangoTicketingStore",
}


def get_setting(name: str) -> Any:
    user_settings = getattr(settings, "TICKETING", {})
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]


@lru_cache(maxsize=1)
def get_store() -> TicketingStore:
    store_class = import_string(get_setting("STORE"))
    return store_class()


def get_authority() -> OwnerAuthority:
    return OwnerAuthority(get_setting("AUTHORITY"))


def get_event_catalog() -> EventCatalog:
    return EventCatalog(get_store(), get_authority())


def get_ticket_ledger() -> TicketLedger:
    return TicketLedger(get_store(), get_authority())


@receiver(setting_changed)
def reset_store(setting, **kwargs):
    if setting == "TICKETING":
        get_store.cache_clear()
