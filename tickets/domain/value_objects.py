"""Domain primitives that enforce validity at creation time."""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self


class TicketCategory(str, Enum):
    """Admission ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def unit_price(self) -> int:
        return UNIT_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        """Infants sit on an adult's lap and take no seat."""
        return self is not TicketCategory.INFANT

    @classmethod
    def from_label(cls, label: object) -> Self | None:
        """Return the category for an exact label, or None if unknown."""
        if not isinstance(label, str):
            return None
        try:
            return cls(label)
        except ValueError:
            return None


UNIT_PRICES: dict[TicketCategory, int] = {
    TicketCategory.ADULT: 30,
    TicketCategory.CHILD: 10,
    TicketCategory.INFANT: 0,
}


def coerce_number(value: object) -> int | float | None:
    """Coerce number-like input, returning None when it is not a number.

    Strings and decimals are read as doubles, so out-of-range values come out
    infinite and are rejected. Integral results come back as ``int``.
    Booleans are not numbers here.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    if isinstance(value, (float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account; always a positive integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account id must be an integer")
        if self.value < 1:
            raise ValueError("Account id must be positive")

    @classmethod
    def parse(cls, value: object) -> Self:
        """Build an AccountId from number-like input.

        Raises:
            ValueError: If the value is not a positive integer-valued number.
        """
        number = coerce_number(value)
        if not isinstance(number, int):
            raise ValueError("Account id must be an integer-valued number")
        return cls(value=number)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RejectedLine:
    """A raw request line that could not become a TicketRequest."""

    label: str
    count: object
    reason: str


@dataclass(frozen=True)
class TicketRequest:
    """A validated request for a number of tickets of one category."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise ValueError("Unknown ticket category")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError("Ticket count must be an integer")
        if self.count < 1:
            raise ValueError("Ticket count must be positive")

    @classmethod
    def parse(cls, label: object, count: object) -> "TicketRequest | RejectedLine":
        """Validate a raw (label, count) pair without raising.

        Returns a TicketRequest on success, otherwise a RejectedLine keyed by
        the raw label and carrying the raw count.
        """
        key = label if isinstance(label, str) else str(label)
        category = TicketCategory.from_label(label)
        if category is None:
            return RejectedLine(label=key, count=count, reason="unknown ticket type")

        number = coerce_number(count)
        if number is None:
            return RejectedLine(label=key, count=count, reason="count is not a number")
        if not isinstance(number, int) or number < 1:
            return RejectedLine(
                label=key, count=count, reason="count is not a positive integer"
            )
        return cls(category=category, count=number)
