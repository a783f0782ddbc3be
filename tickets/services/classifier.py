"""Sorts raw request lines into valid and invalid ticket counts."""

import logging
import math
from collections.abc import Iterable, Mapping

from tickets.domain import ClassificationLedger, RejectedLine, TicketRequest

logger = logging.getLogger(__name__)

LABEL_KEY = "type"
COUNT_KEY = "noOfTickets"


def _is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _unpack(line: object) -> tuple[object, object]:
    """Return (label, count) for a raw line; unusable shapes yield (None, None)."""
    if isinstance(line, TicketRequest):
        return line.category.value, line.count
    if isinstance(line, Mapping):
        return line.get(LABEL_KEY), line.get(COUNT_KEY)
    if isinstance(line, tuple) and len(line) == 2:
        return line
    return None, None


def classify(ticket_requests: Iterable[object]) -> ClassificationLedger:
    """Build a fresh ledger from raw request lines.

    Lines with a missing label or count are skipped. Lines that fail
    validation are recorded as invalid under their raw label and raw count.
    Valid counts for the same category are summed.
    """
    ledger = ClassificationLedger()
    for line in ticket_requests:
        label, count = _unpack(line)
        if not label or not count or _is_nan(count):
            logger.debug("Skipping request line without type or count", extra={"line": repr(line)})
            continue

        parsed = TicketRequest.parse(label, count)
        if isinstance(parsed, RejectedLine):
            logger.info(
                "Rejected request line",
                extra={"label": parsed.label, "reason": parsed.reason},
            )
            ledger.add_invalid(parsed.label, parsed.count)
            continue

        ledger.add_valid(parsed.category, parsed.count)
    return ledger
