"""Domain error codes for the tickets module."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PURCHASE = "INVALID_PURCHASE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised whenever a purchase is rejected.

    Every rejection path shares this type; callers tell the cases apart by
    ``message`` and, for the "no valid tickets" case, by ``data``, which holds
    the invalid label -> count mapping.
    """

    def __init__(self, message: str, data: Mapping[str, object] | None = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PURCHASE,
            message=message,
        )
        self.data = dict(data) if data is not None else None
