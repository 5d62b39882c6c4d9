from django.contrib import admin

from ticketing.models import Event, HolderCount, LedgerAccount, Ticket


class ReadOnlyAdminMixin:
    """View-only admin; state changes go through EventCatalog and TicketLedger."""

    def has_add_permission(self, request, obj=None) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False


class TicketInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = Ticket
    extra = 0
    fields = ["id", "holder", "used", "purchased_at"]
    readonly_fields = fields


@admin.register(Event)
class EventAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["id", "name", "price", "tickets_sold", "max_tickets", "event_time", "active"]
    list_filter = ["active"]
    search_fields = ["name"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["id", "event", "holder", "used", "purchased_at"]
    list_filter = ["used", "event"]
    search_fields = ["holder"]


@admin.register(HolderCount)
class HolderCountAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["event", "holder", "count"]
    list_filter = ["event"]


@admin.register(LedgerAccount)
class LedgerAccountAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["id", "next_event_id", "next_ticket_id", "proceeds"]
