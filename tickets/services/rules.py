"""Cross-category purchase rules, applied after classification."""

import logging

from tickets.domain import ClassificationLedger, TicketCategory

logger = logging.getLogger(__name__)


def require_adult(ledger: ClassificationLedger) -> None:
    """Children and infants cannot buy without an adult; move everything to invalid."""
    if ledger.valid_count(TicketCategory.ADULT) > 0:
        return

    drained = list(ledger.valid.items())
    ledger.valid.clear()
    for category, count in drained:
        ledger.add_invalid(category.value, count)
    if drained:
        logger.info("No adult tickets, rejecting all valid tickets")


def cap_infants(ledger: ClassificationLedger) -> None:
    """At most one infant per adult; the surplus becomes invalid."""
    adults = ledger.valid_count(TicketCategory.ADULT)
    infants = ledger.valid_count(TicketCategory.INFANT)
    if infants <= adults:
        return

    surplus = infants - adults
    ledger.valid[TicketCategory.INFANT] = adults
    ledger.add_invalid(TicketCategory.INFANT.value, surplus)
    logger.info("Infants exceed adults", extra={"surplus": surplus})


def apply_business_rules(ledger: ClassificationLedger) -> ClassificationLedger:
    """Apply the adult-presence rule, then the infant-capacity rule."""
    require_adult(ledger)
    cap_infants(ledger)
    return ledger
