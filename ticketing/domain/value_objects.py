"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, order=True)
class EventId:
    """Sequential identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("EventId cannot be negative")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class TicketId:
    """Sequential identifier for a Ticket."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("TicketId cannot be negative")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Amount in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __mul__(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
