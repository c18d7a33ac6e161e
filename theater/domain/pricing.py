"""Pricing constants, grouped by the rule that uses them.

All money values are in cents.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Self


def _check_constants(rule: Any) -> None:
    for field in fields(rule):
        value = getattr(rule, field.name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"{type(rule).__name__}.{field.name} must be an integer, got {value!r}"
            )
        if value < 0:
            raise ValueError(
                f"{type(rule).__name__}.{field.name} cannot be negative, got {value}"
            )


@dataclass(frozen=True)
class TragedyRule:
    """Flat fee plus a charge for each attendee over the threshold."""

    base_amount: int = 40000
    audience_threshold: int = 30
    per_person_over_threshold: int = 1000

    def __post_init__(self) -> None:
        _check_constants(self)


@dataclass(frozen=True)
class ComedyRule:
    """Flat fee, a surcharge over the threshold and a per-attendee charge."""

    base_amount: int = 30000
    audience_threshold: int = 20
    over_threshold_amount: int = 10000
    per_person_over_threshold: int = 500
    per_person: int = 300

    def __post_init__(self) -> None:
        _check_constants(self)


@dataclass(frozen=True)
class CreditRule:
    """Volume credits awarded per performance."""

    audience_threshold: int = 30
    comedy_attendees_per_extra_credit: int = 5

    def __post_init__(self) -> None:
        _check_constants(self)
        if self.comedy_attendees_per_extra_credit == 0:
            raise ValueError("CreditRule.comedy_attendees_per_extra_credit must be positive")


@dataclass(frozen=True)
class PricingTable:
    """Complete set of pricing and credit rules used to price a statement."""

    tragedy: TragedyRule = TragedyRule()
    comedy: ComedyRule = ComedyRule()
    credits: CreditRule = CreditRule()

    @classmethod
    def default(cls) -> Self:
        return cls()

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Mapping[str, Any]]) -> Self:
        """Build a table from nested overrides such as
        ``{"tragedy": {"base_amount": 45000}}``.

        Raises:
            ValueError: If a rule or constant name is not recognised, or a
                constant is not a non-negative integer.
        """
        table = cls()
        for rule_name, values in overrides.items():
            if rule_name not in {f.name for f in fields(cls)}:
                raise ValueError(f"Unknown pricing rule: {rule_name}")
            rule = getattr(table, rule_name)
            known = {f.name for f in fields(rule)}
            unknown = set(values) - known
            if unknown:
                raise ValueError(
                    f"Unknown {rule_name} constants: {', '.join(sorted(unknown))}"
                )
            table = replace(table, **{rule_name: replace(rule, **values)})
        return table
