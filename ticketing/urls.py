from django.urls import path

from ticketing.handlers import (
    EventDetailView,
    EventListView,
    EventToggleView,
    HolderCountView,
    HolderTicketsView,
    PurchaseView,
    RedeemView,
    TicketDetailView,
    TicketValidityView,
    TransferView,
    WithdrawView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<int:event_id>/toggle", EventToggleView.as_view(), name="event-toggle"),
    path("events/<int:event_id>/purchase", PurchaseView.as_view(), name="event-purchase"),
    path(
        "events/<int:event_id>/holders/<str:holder>",
        HolderCountView.as_view(),
        name="holder-count",
    ),
    path("tickets/<int:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path("tickets/<int:ticket_id>/validity", TicketValidityView.as_view(), name="ticket-validity"),
    path("tickets/<int:ticket_id>/redeem", RedeemView.as_view(), name="ticket-redeem"),
    path("tickets/<int:ticket_id>/transfer", TransferView.as_view(), name="ticket-transfer"),
    path("holders/<str:holder>/tickets", HolderTicketsView.as_view(), name="holder-tickets"),
    path("withdraw", WithdrawView.as_view(), name="withdraw"),
]
