"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import TicketPurchaseService


class RecordingSeatReservation(SeatReservationService):
    """Seat reservation fake that records calls and can be told to fail."""

    def __init__(self, calls: list, fail: bool = False) -> None:
        self.calls = calls
        self.fail = fail

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))
        if self.fail:
            raise RuntimeError("seat reservation system unavailable")


class RecordingPayment(TicketPaymentService):
    """Payment fake that records calls and can be told to fail."""

    def __init__(self, calls: list, fail: bool = False) -> None:
        self.calls = calls
        self.fail = fail

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))
        if self.fail:
            raise RuntimeError("card declined")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def seat_reservation(calls: list) -> RecordingSeatReservation:
    return RecordingSeatReservation(calls)


@pytest.fixture
def payment(calls: list) -> RecordingPayment:
    return RecordingPayment(calls)


@pytest.fixture
def service(
    seat_reservation: RecordingSeatReservation, payment: RecordingPayment
) -> TicketPurchaseService:
    return TicketPurchaseService(seat_reservation=seat_reservation, payment=payment)


@pytest.fixture
def valid_ticket_requests() -> list[dict]:
    return [
        {"type": "ADULT", "noOfTickets": 10},
        {"type": "CHILD", "noOfTickets": 20},
        {"type": "INFANT", "noOfTickets": 20},
    ]


@pytest.fixture
def invalid_ticket_requests() -> list[dict]:
    return [
        {"type": "MAN", "noOfTickets": 10},
        {"type": "CHILD", "noOfTickets": 20},
        {"type": "INFANT", "noOfTickets": 20},
    ]
