"""Pricing configuration read from Django settings."""

from django.conf import settings

from theater.domain import PricingTable


def get_pricing_table() -> PricingTable:
    """Return the pricing table with ``settings.THEATER_PRICING`` applied."""
    overrides = getattr(settings, "THEATER_PRICING", None) or {}
    return PricingTable.from_overrides(overrides)
