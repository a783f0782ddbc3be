"""Ticket purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Iterable, Mapping

from tickets.domain import AccountId, InvalidPurchaseError, PurchaseOutcome
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.services.classifier import classify
from tickets.services.pricing import aggregate
from tickets.services.rules import apply_business_rules

logger = logging.getLogger(__name__)


def describe_invalid_tickets(invalid_tickets: Mapping[str, object]) -> str:
    """Render the invalid entries, one ``LABEL - count`` line each."""
    if not invalid_tickets:
        return ""
    lines = ["The following are invalid tickets: "]
    lines.extend(f"{label} - {count}" for label, count in invalid_tickets.items())
    return "\n".join(lines) + "\n"


class TicketPurchaseService:
    """Service for ticket purchase operations.

    The service keeps no per-purchase state; each call builds its own ledger.
    """

    def __init__(
        self,
        seat_reservation: SeatReservationService,
        payment: TicketPaymentService,
    ) -> None:
        self._seat_reservation = seat_reservation
        self._payment = payment

    def purchase_tickets(self, account_id: object = None, *ticket_requests: object) -> PurchaseOutcome:
        """Purchase tickets given as variadic raw request lines.

        Raises:
            InvalidPurchaseError: See ``purchase``.
        """
        return self.purchase(account_id, ticket_requests)

    def purchase(
        self, account_id: object, ticket_requests: Iterable[object] | None
    ) -> PurchaseOutcome:
        """Validate, price, reserve and pay for a batch of ticket requests.

        Raises:
            InvalidPurchaseError: If the account id is invalid, the request
                list is missing, no valid tickets remain after the business
                rules, or either collaborator fails.
        """
        try:
            account = AccountId.parse(account_id)
        except ValueError:
            logger.warning("Purchase rejected: invalid account", extra={"account_id": repr(account_id)})
            raise InvalidPurchaseError("Invalid Account") from None

        if ticket_requests is None:
            logger.warning("Purchase rejected: no ticket requests", extra={"account_id": account.value})
            raise InvalidPurchaseError("Invalid Ticket requests")

        ledger = apply_business_rules(classify(ticket_requests))

        if not ledger.has_valid_tickets():
            logger.warning(
                "Purchase rejected: no valid tickets",
                extra={"account_id": account.value, "invalid_tickets": ledger.invalid},
            )
            raise InvalidPurchaseError(
                "There are no valid tickets.\n" + describe_invalid_tickets(ledger.invalid),
                data=ledger.invalid,
            )

        summary = aggregate(ledger.valid)

        # Reservation goes first so a customer is never charged without seats.
        try:
            self._seat_reservation.reserve_seat(account.value, summary.seats)
        except Exception as exc:
            logger.warning(
                "Seat reservation failed",
                extra={"account_id": account.value, "seats": summary.seats},
            )
            raise InvalidPurchaseError(
                f"Account with id: {account} is unable to reserve seat"
            ) from exc

        try:
            self._payment.make_payment(account.value, summary.amount)
        except Exception as exc:
            # No compensation: the reservation above stays committed.
            logger.warning(
                "Payment failed after seats were reserved",
                extra={
                    "account_id": account.value,
                    "seats": summary.seats,
                    "amount": summary.amount,
                },
            )
            raise InvalidPurchaseError(
                f"Account with id: {account} is unable to make payment"
            ) from exc

        logger.info(
            "Purchase completed",
            extra={
                "account_id": account.value,
                "seats": summary.seats,
                "amount": summary.amount,
            },
        )
        return PurchaseOutcome(
            amount=summary.amount,
            seats=summary.seats,
            valid_tickets=ledger.valid,
            invalid_tickets=ledger.invalid,
        )
