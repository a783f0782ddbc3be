"""Seat and amount aggregation for valid tickets."""

from collections.abc import Mapping

from tickets.domain import PriceSummary, TicketCategory


def aggregate(valid_tickets: Mapping[TicketCategory, int]) -> PriceSummary:
    """Return seats to reserve and amount to charge.

    Seat-less categories are skipped before pricing, so they never count
    towards seats or amount whatever their unit price.
    """
    seats = 0
    amount = 0
    for category, count in valid_tickets.items():
        if not category.occupies_seat:
            continue
        seats += count
        amount += count * category.unit_price
    return PriceSummary(seats=seats, amount=amount)
