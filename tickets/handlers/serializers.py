"""Serializers for purchase requests and outcomes."""

from rest_framework import serializers


class PurchaseRequestSerializer(serializers.Serializer):
    """Body of a purchase request.

    Line contents are left untouched; validating them is the service's job.
    """

    tickets = serializers.ListField(
        child=serializers.JSONField(), required=False, allow_null=True
    )


class PurchaseOutcomeSerializer(serializers.Serializer):
    """Serializer for the PurchaseOutcome domain model."""

    amount = serializers.IntegerField()
    seats = serializers.IntegerField()
    validTickets = serializers.SerializerMethodField()
    invalidTickets = serializers.SerializerMethodField()

    def get_validTickets(self, outcome) -> dict[str, int]:
        return {category.value: count for category, count in outcome.valid_tickets.items()}

    def get_invalidTickets(self, outcome) -> dict:
        return dict(outcome.invalid_tickets)


class PurchaseErrorSerializer(serializers.Serializer):
    """Serializer for InvalidPurchaseError."""

    code = serializers.SerializerMethodField()
    message = serializers.CharField()
    data = serializers.DictField(allow_null=True)

    def get_code(self, error) -> str:
        return error.code.value
