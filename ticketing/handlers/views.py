"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

The calling identity is taken from the ``X-Identity`` header. It is the buyer
of a purchase and the sender of a transfer. The time used for every check is
read here and passed down.
"""

import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ticketing.conf import get_event_catalog, get_ticket_ledger
from ticketing.domain import EventId, TicketId
from ticketing.domain.errors import DomainError, ErrorCode
from ticketing.handlers.serializers import (
    CreateEventSerializer,
    EventSerializer,
    PurchaseSerializer,
    TicketSerializer,
    TransferSerializer,
)

logger = logging.getLogger(__name__)

IDENTITY_HEADER = "X-Identity"

ERROR_STATUS = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INACTIVE_EVENT: status.HTTP_409_CONFLICT,
    ErrorCode.SOLD_OUT: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_ALREADY_OCCURRED: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_USED: status.HTTP_409_CONFLICT,
    ErrorCode.OUTSIDE_REDEMPTION_WINDOW: status.HTTP_409_CONFLICT,
    ErrorCode.QUANTITY_EXCEEDS_PER_TX_LIMIT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.PER_USER_LIMIT_EXCEEDED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INCORRECT_PAYMENT: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


class TicketingView(APIView):
    """Base view mapping domain errors to ``{"code", "message"}`` responses."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            logger.info("Rejected %s %s: %s", self.request.method, self.request.path, exc.code.value)
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
            )
        return super().handle_exception(exc)

    def caller(self, request: Request) -> str:
        return request.headers.get(IDENTITY_HEADER, "")


class EventListView(TicketingView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_event_catalog().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = CreateEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        catalog = get_event_catalog()
        event_id = catalog.create_event(
            self.caller(request),
            now=timezone.now(),
            **serializer.validated_data,
        )
        return Response(
            EventSerializer(catalog.get_event(event_id)).data,
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(TicketingView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        event = get_event_catalog().get_event(EventId(event_id))
        return Response(EventSerializer(event).data)


class EventToggleView(TicketingView):
    """Handler for POST /api/events/{event_id}/toggle"""

    def post(self, request: Request, event_id: int) -> Response:
        event = get_event_catalog().toggle_active(self.caller(request), EventId(event_id))
        return Response(EventSerializer(event).data)


class PurchaseView(TicketingView):
    """Handler for POST /api/events/{event_id}/purchase"""

    def post(self, request: Request, event_id: int) -> Response:
        serializer = PurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ticket_ids = get_ticket_ledger().purchase_tickets(
            EventId(event_id),
            buyer=self.caller(request),
            now=timezone.now(),
            **serializer.validated_data,
        )
        return Response(
            {"ticket_ids": [ticket_id.value for ticket_id in ticket_ids]},
            status=status.HTTP_201_CREATED,
        )


class HolderCountView(TicketingView):
    """Handler for GET /api/events/{event_id}/holders/{holder}"""

    def get(self, request: Request, event_id: int, holder: str) -> Response:
        count = get_ticket_ledger().get_user_ticket_count(EventId(event_id), holder)
        return Response({"event_id": event_id, "holder": holder, "count": count})


class TicketDetailView(TicketingView):
    """Handler for GET /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: int) -> Response:
        ticket = get_ticket_ledger().get_ticket(TicketId(ticket_id))
        return Response(TicketSerializer(ticket).data)


class TicketValidityView(TicketingView):
    """Handler for GET /api/tickets/{ticket_id}/validity"""

    def get(self, request: Request, ticket_id: int) -> Response:
        valid = get_ticket_ledger().is_valid(TicketId(ticket_id), timezone.now())
        return Response({"ticket_id": ticket_id, "valid": valid})


class RedeemView(TicketingView):
    """Handler for POST /api/tickets/{ticket_id}/redeem"""

    def post(self, request: Request, ticket_id: int) -> Response:
        ticket = get_ticket_ledger().redeem_ticket(
            self.caller(request), TicketId(ticket_id), timezone.now()
        )
        return Response(TicketSerializer(ticket).data)


class TransferView(TicketingView):
    """Handler for POST /api/tickets/{ticket_id}/transfer"""

    def post(self, request: Request, ticket_id: int) -> Response:
        serializer = TransferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ticket = get_ticket_ledger().transfer_ticket(
            TicketId(ticket_id),
            from_holder=self.caller(request),
            to_holder=serializer.validated_data["to_holder"],
        )
        return Response(TicketSerializer(ticket).data)


class HolderTicketsView(TicketingView):
    """Handler for GET /api/holders/{holder}/tickets"""

    def get(self, request: Request, holder: str) -> Response:
        tickets = get_ticket_ledger().tickets_of(holder)
        return Response(TicketSerializer(tickets, many=True).data)


class WithdrawView(TicketingView):
    """Handler for POST /api/withdraw"""

    def post(self, request: Request) -> Response:
        amount = get_ticket_ledger().withdraw(self.caller(request))
        return Response({"amount": amount})
