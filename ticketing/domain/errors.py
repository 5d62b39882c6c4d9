"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    INACTIVE_EVENT = "INACTIVE_EVENT"
    SOLD_OUT = "SOLD_OUT"
    QUANTITY_EXCEEDS_PER_TX_LIMIT = "QUANTITY_EXCEEDS_PER_TX_LIMIT"
    PER_USER_LIMIT_EXCEEDED = "PER_USER_LIMIT_EXCEEDED"
    INCORRECT_PAYMENT = "INCORRECT_PAYMENT"
    EVENT_ALREADY_OCCURRED = "EVENT_ALREADY_OCCURRED"
    ALREADY_USED = "ALREADY_USED"
    OUTSIDE_REDEMPTION_WINDOW = "OUTSIDE_REDEMPTION_WINDOW"
    NOT_OWNER = "NOT_OWNER"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when operation arguments are malformed."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class UnauthorizedError(DomainError):
    """Raised when the caller lacks the administrative authority."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAUTHORIZED,
            message="Caller is not authorized for this operation",
        )


class NotFoundError(DomainError):
    """Raised when an event or ticket does not exist."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(message="Event not found")
        object.__setattr__(self, "event_id", event_id)


class TicketNotFoundError(NotFoundError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(message="Ticket not found")
        object.__setattr__(self, "ticket_id", ticket_id)


class InactiveEventError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INACTIVE_EVENT, message="Event is not active")


class SoldOutError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SOLD_OUT, message="Not enough tickets available")


class QuantityExceedsPerTxLimitError(DomainError):
    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.QUANTITY_EXCEEDS_PER_TX_LIMIT,
            message=f"At most {limit} tickets can be bought at once",
        )


class PerUserLimitExceededError(DomainError):
    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.PER_USER_LIMIT_EXCEEDED,
            message=f"At most {limit} tickets per user for this event",
        )


class IncorrectPaymentError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INCORRECT_PAYMENT,
            message="Paid amount does not match the ticket price",
        )


class EventAlreadyOccurredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_OCCURRED,
            message="Event has already occurred",
        )


class AlreadyUsedError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.ALREADY_USED, message="Ticket already used")


class OutsideRedemptionWindowError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.OUTSIDE_REDEMPTION_WINDOW,
            message="Ticket cannot be redeemed at this time",
        )


class NotOwnerError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_OWNER,
            message="Ticket is not held by the sender",
        )
