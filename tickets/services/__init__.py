from tickets.services.classifier import classify
from tickets.services.pricing import aggregate
from tickets.services.purchase_service import TicketPurchaseService
from tickets.services.rules import apply_business_rules

__all__ = [
    "TicketPurchaseService",
    "classify",
    "apply_business_rules",
    "aggregate",
]
