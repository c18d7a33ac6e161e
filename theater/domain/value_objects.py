"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from theater.domain.errors import InvalidAudienceError

CENTS_PER_DOLLAR = 100


@dataclass(frozen=True)
class Audience:
    """Non-negative number of attendees at a performance."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAudienceError(self.value)
        if self.value < 0:
            raise InvalidAudienceError(self.value)


@dataclass(frozen=True)
class Money:
    """Amount of US dollars held in cents."""

    cents: int

    @classmethod
    def zero(cls) -> Self:
        return cls(cents=0)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    @property
    def dollars(self) -> Decimal:
        return Decimal(self.cents) / CENTS_PER_DOLLAR

    def usd(self) -> str:
        """Format as en-US currency, e.g. ``$1,230.00``."""
        sign = "-" if self.cents < 0 else ""
        return f"{sign}${abs(self.dollars):,.2f}"

    def __str__(self) -> str:
        return self.usd()
