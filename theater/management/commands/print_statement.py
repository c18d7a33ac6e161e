"""
Management command to print text statements from JSON files.

The invoice file holds one invoice object or a list of them; the plays file
holds the catalog keyed by play ID. One statement is printed per invoice.
"""
import json
import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from theater.conf import get_pricing_table
from theater.domain import Invoice
from theater.domain.errors import DomainError
from theater.services.statement_service import StatementService
from theater.stores.memory_store import InMemoryPlayCatalog

logger = logging.getLogger(__name__)


def _load_json(path: str):
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CommandError(f"File not found: {path}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CommandError(f"Invalid JSON in {path}: {exc}")
    except OSError as exc:
        raise CommandError(f"Cannot read {path}: {exc.strerror or exc}")


class Command(BaseCommand):
    help = "Print billing statements for invoices priced against a play catalog"

    def add_arguments(self, parser):
        parser.add_argument(
            "--invoice",
            required=True,
            help="Path to a JSON invoice (or list of invoices)",
        )
        parser.add_argument(
            "--plays",
            required=True,
            help="Path to the JSON play catalog",
        )

    def handle(self, *args, **options):
        raw_invoices = _load_json(options["invoice"])
        raw_plays = _load_json(options["plays"])
        if isinstance(raw_invoices, dict):
            raw_invoices = [raw_invoices]
        if not isinstance(raw_invoices, list):
            raise CommandError("Invoice file must hold an invoice object or a list of them")

        try:
            service = StatementService(get_pricing_table())
        except ValueError as exc:
            raise CommandError(f"Invalid THEATER_PRICING: {exc}")
        try:
            catalog = InMemoryPlayCatalog.from_dict(raw_plays)
            invoices = [Invoice.from_dict(raw) for raw in raw_invoices]
            statements = [service.generate_statement(inv, catalog) for inv in invoices]
        except DomainError as exc:
            raise CommandError(str(exc))

        logger.info("Printed %d statement(s)", len(statements))
        for text in statements:
            self.stdout.write(text, ending="")
