"""Text rendering for computed statements."""

import os

from theater.domain import Money, Statement


def usd(cents: int) -> str:
    """Format an amount in cents as US dollars, e.g. 123000 -> ``$1,230.00``."""
    return Money(cents=cents).usd()


def render_text(statement: Statement, line_separator: str = os.linesep) -> str:
    lines = [f"Statement for {statement.customer}"]
    for line in statement.lines:
        lines.append(f"  {line.play_name}: {line.amount.usd()} ({line.audience} seats)")
    lines.append(f"Amount owed is {statement.total_amount.usd()}")
    lines.append(f"You earned {statement.volume_credits} credits")
    return "".join(f"{text}{line_separator}" for text in lines)
