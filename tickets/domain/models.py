"""Domain models for a single purchase call.

Nothing here outlives the call that built it; there is no persistence layer.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Number
from types import MappingProxyType

from tickets.domain.value_objects import TicketCategory, coerce_number


def merge_invalid_count(existing: object, raw_count: object) -> object:
    """Combine an invalid count with one already recorded for the same label.

    Numbers are summed. A non-numeric raw count is kept verbatim and replaces
    whatever was recorded before.
    """
    number = coerce_number(raw_count)
    if number is None:
        return raw_count
    if existing is None or not isinstance(existing, Number):
        return number
    return existing + number


@dataclass
class ClassificationLedger:
    """Valid and invalid ticket counts accumulated during one purchase call."""

    valid: dict[TicketCategory, int] = field(default_factory=dict)
    invalid: dict[str, object] = field(default_factory=dict)

    def add_valid(self, category: TicketCategory, count: int) -> None:
        self.valid[category] = self.valid.get(category, 0) + count

    def add_invalid(self, label: str, count: object) -> None:
        self.invalid[label] = merge_invalid_count(self.invalid.get(label), count)

    def valid_count(self, category: TicketCategory) -> int:
        return self.valid.get(category, 0)

    def has_valid_tickets(self) -> bool:
        return bool(self.valid)


@dataclass(frozen=True)
class PriceSummary:
    """Seats to reserve and amount to charge for the valid tickets."""

    seats: int
    amount: int


@dataclass(frozen=True)
class PurchaseOutcome:
    """Result of a completed purchase."""

    amount: int
    seats: int
    valid_tickets: Mapping[TicketCategory, int]
    invalid_tickets: Mapping[str, object]

    def __post_init__(self) -> None:
        object.__setattr__(self, "valid_tickets", MappingProxyType(dict(self.valid_tickets)))
        object.__setattr__(
            self, "invalid_tickets", MappingProxyType(dict(self.invalid_tickets))
        )
