"""Unit tests for request classification, business rules and pricing.

Run with: pytest tests/test_classification.py -v
"""

from tickets.domain import ClassificationLedger, TicketCategory, TicketRequest
from tickets.services import aggregate, apply_business_rules, classify

ADULT = TicketCategory.ADULT
CHILD = TicketCategory.CHILD
INFANT = TicketCategory.INFANT


class TestClassify:
    """Tests for classify."""

    def test_valid_lines_are_summed_per_category(self):
        """Several lines of one category add up."""
        ledger = classify(
            [
                {"type": "ADULT", "noOfTickets": 2},
                {"type": "ADULT", "noOfTickets": "3"},
                {"type": "CHILD", "noOfTickets": 1},
            ]
        )
        assert ledger.valid == {ADULT: 5, CHILD: 1}
        assert ledger.invalid == {}

    def test_lines_without_type_or_count_are_skipped(self):
        """Missing, zero or empty fields drop the line silently."""
        ledger = classify(
            [
                {"type": "ADULT"},
                {"noOfTickets": 4},
                {"type": "", "noOfTickets": 4},
                {"type": "CHILD", "noOfTickets": 0},
                "ticket type",
                None,
            ]
        )
        assert ledger.valid == {}
        assert ledger.invalid == {}

    def test_nan_count_is_skipped(self):
        """A NaN count counts as missing, like zero."""
        ledger = classify([{"type": "ADULT", "noOfTickets": float("nan")}])
        assert ledger.valid == {}
        assert ledger.invalid == {}

    def test_invalid_lines_keep_raw_label_and_count(self):
        """Unknown labels and bad counts go to invalid under their raw values."""
        ledger = classify(
            [
                {"type": "MAN", "noOfTickets": 10},
                {"type": "CHILD", "noOfTickets": -2},
                {"type": "INFANT", "noOfTickets": "many"},
            ]
        )
        assert ledger.valid == {}
        assert ledger.invalid == {"MAN": 10, "CHILD": -2, "INFANT": "many"}

    def test_accepts_pairs_and_ticket_requests(self):
        """(label, count) pairs and TicketRequest objects are also lines."""
        ledger = classify([("ADULT", 1), TicketRequest(CHILD, 2)])
        assert ledger.valid == {ADULT: 1, CHILD: 2}

    def test_returns_a_fresh_ledger_each_time(self):
        """Nothing accumulates between calls."""
        lines = [{"type": "ADULT", "noOfTickets": 1}]
        assert classify(lines) is not classify(lines)
        assert classify(lines).valid == {ADULT: 1}


class TestBusinessRules:
    """Tests for apply_business_rules."""

    def test_no_adults_moves_everything_to_invalid(self):
        """Without adults, children and infants are rejected."""
        ledger = ClassificationLedger(valid={CHILD: 20, INFANT: 20}, invalid={"MAN": 10})
        apply_business_rules(ledger)
        assert ledger.valid == {}
        assert ledger.invalid == {"MAN": 10, "CHILD": 20, "INFANT": 20}

    def test_no_adults_merges_with_existing_invalid_counts(self):
        """Drained counts add to invalid counts already recorded for the label."""
        ledger = ClassificationLedger(valid={CHILD: 3}, invalid={"CHILD": 2})
        apply_business_rules(ledger)
        assert ledger.invalid == {"CHILD": 5}

    def test_surplus_infants_become_invalid(self):
        """Infants beyond one per adult are rejected."""
        ledger = ClassificationLedger(valid={ADULT: 10, CHILD: 20, INFANT: 20})
        apply_business_rules(ledger)
        assert ledger.valid == {ADULT: 10, CHILD: 20, INFANT: 10}
        assert ledger.invalid == {"INFANT": 10}

    def test_infants_up_to_adults_are_kept(self):
        """One infant per adult is fine."""
        ledger = ClassificationLedger(valid={ADULT: 2, INFANT: 2})
        apply_business_rules(ledger)
        assert ledger.valid == {ADULT: 2, INFANT: 2}
        assert ledger.invalid == {}

    def test_children_need_no_ratio(self):
        """Any number of children may come with one adult."""
        ledger = ClassificationLedger(valid={ADULT: 1, CHILD: 15})
        apply_business_rules(ledger)
        assert ledger.valid == {ADULT: 1, CHILD: 15}


class TestAggregate:
    """Tests for aggregate."""

    def test_seats_and_amount(self):
        """Amount is 30 per adult and 10 per child; infants take no seat."""
        summary = aggregate({ADULT: 10, CHILD: 20, INFANT: 10})
        assert summary.seats == 30
        assert summary.amount == 500

    def test_infants_only_cost_nothing(self):
        """Infants contribute neither seats nor amount."""
        summary = aggregate({INFANT: 4})
        assert (summary.seats, summary.amount) == (0, 0)

    def test_does_not_mutate_input(self):
        """The valid mapping is left as is."""
        valid = {ADULT: 1, INFANT: 1}
        aggregate(valid)
        assert valid == {ADULT: 1, INFANT: 1}
