from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.gateways.local import LocalSeatReservationService, LocalTicketPaymentService

__all__ = [
    "SeatReservationService",
    "TicketPaymentService",
    "LocalSeatReservationService",
    "LocalTicketPaymentService",
]
