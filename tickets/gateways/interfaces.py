"""Collaborator interfaces.

Collaborators must be swappable. They return nothing and signal failure by
raising.
"""

from abc import ABC, abstractmethod


class SeatReservationService(ABC):
    """Interface for the external seat reservation system."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for an account."""
        ...


class TicketPaymentService(ABC):
    """Interface for the external payment processor."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge an account."""
        ...
