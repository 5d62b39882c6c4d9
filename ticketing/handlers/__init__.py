from ticketing.handlers.views import (
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

__all__ = [
    "EventDetailView",
    "EventListView",
    "EventToggleView",
    "HolderCountView",
    "HolderTicketsView",
    "PurchaseView",
    "RedeemView",
    "TicketDetailView",
    "TicketValidityView",
    "TransferView",
    "WithdrawView",
]
