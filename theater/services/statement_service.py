"""Statement service - pricing and aggregation for invoices.

Services:
- Depend only on domain models and store interfaces
- Validate domain invariants
- Return domain models or raise domain errors

A statement is all-or-nothing: any error aborts the whole invoice.
"""

import logging
from collections.abc import Mapping

from theater.domain import (
    Invoice,
    Money,
    Performance,
    Play,
    PlayType,
    PricingTable,
    Statement,
    StatementLine,
)
from theater.domain.errors import DomainError, UnknownPlayError, UnknownPlayTypeError
from theater.services.rendering import render_text
from theater.stores.interfaces import PlayCatalog
from theater.stores.memory_store import InMemoryPlayCatalog

logger = logging.getLogger(__name__)


class StatementService:
    """Computes and renders billing statements."""

    def __init__(self, pricing: PricingTable | None = None) -> None:
        self._pricing = pricing or PricingTable.default()

    def amount_for(self, performance: Performance, play: Play) -> Money:
        """Return the billed amount for one performance.

        Raises:
            UnknownPlayTypeError: If the play's type has no pricing rule.
        """
        audience = performance.audience.value
        match play.type:
            case PlayType.TRAGEDY:
                rule = self._pricing.tragedy
                amount = rule.base_amount
                if audience > rule.audience_threshold:
                    amount += rule.per_person_over_threshold * (
                        audience - rule.audience_threshold
                    )
            case PlayType.COMEDY:
                rule = self._pricing.comedy
                amount = rule.base_amount
                if audience > rule.audience_threshold:
                    amount += rule.over_threshold_amount + rule.per_person_over_threshold * (
                        audience - rule.audience_threshold
                    )
                amount += rule.per_person * audience
            case _:
                raise UnknownPlayTypeError(getattr(play.type, "value", play.type))
        return Money(cents=amount)

    def volume_credits_for(self, performance: Performance, play: Play) -> int:
        audience = performance.audience.value
        rule = self._pricing.credits
        credits = max(audience - rule.audience_threshold, 0)
        # extra credit for every five comedy attendees
        if play.type is PlayType.COMEDY:
            credits += audience // rule.comedy_attendees_per_extra_credit
        return credits

    def build_statement(
        self, invoice: Invoice, catalog: PlayCatalog | Mapping[str, Play]
    ) -> Statement:
        """Price every performance on the invoice.

        Raises:
            UnknownPlayError: If a performance references a play not in the catalog.
            UnknownPlayTypeError: If a play's type has no pricing rule.
        """
        plays = _as_catalog(catalog)
        lines = []
        try:
            for performance in invoice.performances:
                play = plays.get_play(performance.play_id)
                if play is None:
                    raise UnknownPlayError(performance.play_id)
                lines.append(
                    StatementLine(
                        play_name=play.name,
                        amount=self.amount_for(performance, play),
                        audience=performance.audience.value,
                        volume_credits=self.volume_credits_for(performance, play),
                    )
                )
        except DomainError as exc:
            logger.warning("Statement for %s rejected: %s", invoice.customer, exc)
            raise

        total_amount = sum((line.amount for line in lines), Money.zero())
        volume_credits = sum(line.volume_credits for line in lines)
        logger.debug(
            "Statement for %s: %d lines, total %s, %d credits",
            invoice.customer,
            len(lines),
            total_amount,
            volume_credits,
        )
        return Statement(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=total_amount,
            volume_credits=volume_credits,
        )

    def generate_statement(
        self, invoice: Invoice, catalog: PlayCatalog | Mapping[str, Play]
    ) -> str:
        """Return the text statement for an invoice."""
        return render_text(self.build_statement(invoice, catalog))


def _as_catalog(catalog: PlayCatalog | Mapping[str, Play]) -> PlayCatalog:
    if isinstance(catalog, PlayCatalog):
        return catalog
    return InMemoryPlayCatalog(catalog)


def generate_statement(
    invoice: Invoice,
    catalog: PlayCatalog | Mapping[str, Play],
    pricing: PricingTable | None = None,
) -> str:
    return StatementService(pricing).generate_statement(invoice, catalog)
