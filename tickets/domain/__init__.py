from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from tickets.domain.models import ClassificationLedger, PriceSummary, PurchaseOutcome
from tickets.domain.value_objects import (
    UNIT_PRICES,
    AccountId,
    RejectedLine,
    TicketCategory,
    TicketRequest,
)

__all__ = [
    "ClassificationLedger",
    "PriceSummary",
    "PurchaseOutcome",
    "AccountId",
    "RejectedLine",
    "TicketCategory",
    "TicketRequest",
    "UNIT_PRICES",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
]
