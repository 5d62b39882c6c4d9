"""Tests for the Django admin registrations.

Run with: pytest tests/test_admin.py -v
"""

from datetime import timedelta

import pytest
from django.contrib import admin
from django.contrib.auth.models import User
from django.test import RequestFactory
from django.utils import timezone

from ticketing import models

ADMINS = [models.Event, models.Ticket, models.HolderCount, models.LedgerAccount]


@pytest.fixture
def superuser_request(db):
    request = RequestFactory().get("/admin/")
    request.user = User.objects.create_superuser("root", "root@example.com", "password")
    return request


@pytest.fixture
def sold_ticket(db) -> models.Ticket:
    event = models.Event.objects.create(
        id=0,
        name="Concert",
        price=100,
        max_tickets=2,
        tickets_sold=1,
        event_time=timezone.now() + timedelta(days=1),
    )
    models.HolderCount.objects.create(event=event, holder="alice", count=1)
    return models.Ticket.objects.create(
        id=0, event=event, holder="alice", purchased_at=timezone.now()
    )


@pytest.mark.django_db
class TestAdminIsReadOnly:
    """Staff can inspect ledger state but never change it."""

    @pytest.mark.parametrize("model", ADMINS)
    def test_superuser_cannot_add_change_or_delete(self, superuser_request, sold_ticket, model):
        model_admin = admin.site._registry[model]
        obj = model.objects.first()
        assert model_admin.has_view_permission(superuser_request, obj) is True
        assert model_admin.has_add_permission(superuser_request) is False
        assert model_admin.has_change_permission(superuser_request, obj) is False
        assert model_admin.has_delete_permission(superuser_request, obj) is False

    def test_ticket_inline_is_read_only(self, superuser_request, sold_ticket):
        event_admin = admin.site._registry[models.Event]
        for inline in event_admin.get_inline_instances(superuser_request, sold_ticket.event):
            assert inline.has_add_permission(superuser_request, sold_ticket.event) is False
            assert inline.has_change_permission(superuser_request, sold_ticket.event) is False
            assert inline.has_delete_permission(superuser_request, sold_ticket.event) is False

    def test_ticket_change_post_is_forbidden(self, client, superuser_request, sold_ticket):
        client.force_login(superuser_request.user)
        url = f"/admin/ticketing/ticket/{sold_ticket.pk}/change/"
        response = client.post(url, {"holder": "mallory", "used": ""})
        assert response.status_code == 403
        sold_ticket.refresh_from_db()
        assert sold_ticket.holder == "alice"

    def test_event_delete_is_forbidden(self, client, superuser_request, sold_ticket):
        client.force_login(superuser_request.user)
        response = client.post(f"/admin/ticketing/event/{sold_ticket.event_id}/delete/", {"post": "yes"})
        assert response.status_code == 403
        assert models.Event.objects.filter(pk=sold_ticket.event_id).exists()
