"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import DomainError
from tickets.handlers.serializers import (
    PurchaseErrorSerializer,
    PurchaseOutcomeSerializer,
    PurchaseRequestSerializer,
)
from tickets.services import TicketPurchaseService


def get_purchase_service() -> TicketPurchaseService:
    """Build the service with the collaborators named in settings."""
    seat_reservation = import_string(settings.TICKETS_SEAT_RESERVATION_SERVICE)()
    payment = import_string(settings.TICKETS_PAYMENT_SERVICE)()
    return TicketPurchaseService(seat_reservation=seat_reservation, payment=payment)


class PurchaseView(APIView):
    """Handler for POST /api/accounts/{account_id}/purchases"""

    def post(self, request: Request, account_id: str) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = get_purchase_service()
        try:
            outcome = service.purchase(account_id, serializer.validated_data.get("tickets"))
        except DomainError as exc:
            return Response(
                PurchaseErrorSerializer(exc).data,
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(
            PurchaseOutcomeSerializer(outcome).data,
            status=status.HTTP_201_CREATED,
        )
