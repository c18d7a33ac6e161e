"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from theater.conf import get_pricing_table
from theater.domain import Invoice
from theater.domain.errors import DomainError
from theater.handlers.serializers import StatementRequestSerializer, StatementSerializer
from theater.services.rendering import render_text
from theater.services.statement_service import StatementService
from theater.stores.memory_store import InMemoryPlayCatalog


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


class StatementView(APIView):
    """Handler for POST /api/statements"""

    def post(self, request: Request) -> Response:
        serializer = StatementRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = StatementService(get_pricing_table())
        try:
            invoice = Invoice.from_dict(serializer.validated_data["invoice"])
            catalog = InMemoryPlayCatalog.from_dict(serializer.validated_data["plays"])
            statement = service.build_statement(invoice, catalog)
        except DomainError as exc:
            return domain_error_response(exc)

        payload = StatementSerializer(statement).data
        payload["text"] = render_text(statement)
        return Response(payload)
