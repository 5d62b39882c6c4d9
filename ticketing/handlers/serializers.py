"""Serializers for request validation and domain model responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    max_tickets = serializers.IntegerField(source="max_tickets.value")
    tickets_sold = serializers.IntegerField()
    event_time = serializers.DateTimeField()
    active = serializers.BooleanField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.IntegerField(source="id.value")
    event_id = serializers.IntegerField(source="event_id.value")
    holder = serializers.CharField()
    used = serializers.BooleanField()
    purchased_at = serializers.DateTimeField()


class CreateEventSerializer(serializers.Serializer):
    # Range checks are business rules and stay in EventCatalog.
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    price = serializers.IntegerField()
    max_tickets = serializers.IntegerField()
    event_time = serializers.DateTimeField()


class PurchaseSerializer(serializers.Serializer):
    quantity = serializers.IntegerField()
    paid_amount = serializers.IntegerField()


class TransferSerializer(serializers.Serializer):
    to_holder = serializers.CharField()
