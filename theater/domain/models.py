"""Domain models for invoices, plays and statements.

These are pure domain objects with no Django dependencies. The ``from_dict``
constructors accept the JSON shapes invoices and play catalogs arrive in.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

from theater.domain.errors import InvalidInvoiceError, UnknownPlayTypeError
from theater.domain.value_objects import Audience, Money


class PlayType(Enum):
    """Kinds of play the pricing table knows about."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(value) from None


def _require(raw: Any, key: str, what: str) -> Any:
    if not isinstance(raw, Mapping):
        raise InvalidInvoiceError(f"{what} must be an object")
    if key not in raw:
        raise InvalidInvoiceError(f"{what} is missing '{key}'")
    return raw[key]


@dataclass(frozen=True)
class Play:
    """Catalog entry for a play."""

    name: str
    type: PlayType

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Self:
        name = _require(raw, "name", "play")
        play_type = _require(raw, "type", "play")
        return cls(name=name, type=PlayType.from_string(play_type))


@dataclass(frozen=True)
class Performance:
    """One staging of a play on an invoice."""

    play_id: str
    audience: Audience

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Self:
        if isinstance(raw, Mapping) and "play_id" in raw:
            play_id = raw["play_id"]
        else:
            play_id = _require(raw, "playID", "performance")
        if not isinstance(play_id, str):
            raise InvalidInvoiceError("performance play ID must be a string")
        audience = _require(raw, "audience", "performance")
        return cls(play_id=play_id, audience=Audience(audience))


@dataclass(frozen=True)
class Invoice:
    """A customer's bill. Performance order is the printed line order."""

    customer: str
    performances: tuple[Performance, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Self:
        customer = _require(raw, "customer", "invoice")
        performances = _require(raw, "performances", "invoice")
        if not isinstance(performances, list | tuple):
            raise InvalidInvoiceError("invoice 'performances' must be a list")
        return cls(
            customer=customer,
            performances=tuple(Performance.from_dict(p) for p in performances),
        )


@dataclass(frozen=True)
class StatementLine:
    """Priced line for a single performance."""

    play_name: str
    amount: Money
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class Statement:
    """Computed statement for an invoice."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: Money
    volume_credits: int
