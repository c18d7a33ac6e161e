from theater.domain.models import (
    Invoice,
    Performance,
    Play,
    PlayType,
    Statement,
    StatementLine,
)
from theater.domain.pricing import ComedyRule, CreditRule, PricingTable, TragedyRule
from theater.domain.value_objects import Audience, Money

__all__ = [
    "Invoice",
    "Performance",
    "Play",
    "PlayType",
    "Statement",
    "StatementLine",
    "PricingTable",
    "TragedyRule",
    "ComedyRule",
    "CreditRule",
    "Audience",
    "Money",
]
