"""Serializers for statement requests and responses."""

from rest_framework import serializers


class PerformanceSerializer(serializers.Serializer):
    """Input shape of one performance on an invoice."""

    playID = serializers.CharField(trim_whitespace=False)
    audience = serializers.IntegerField()


class InvoiceSerializer(serializers.Serializer):
    customer = serializers.CharField(trim_whitespace=False)
    performances = PerformanceSerializer(many=True)


class PlaySerializer(serializers.Serializer):
    name = serializers.CharField(trim_whitespace=False)
    type = serializers.CharField(trim_whitespace=False)


class StatementRequestSerializer(serializers.Serializer):
    """Request body for POST /api/statements."""

    invoice = InvoiceSerializer()
    plays = serializers.DictField(child=PlaySerializer())


class StatementLineSerializer(serializers.Serializer):
    """Serializer for StatementLine domain model."""

    play = serializers.CharField(source="play_name")
    amount = serializers.SerializerMethodField()
    amount_cents = serializers.IntegerField(source="amount.cents")
    audience = serializers.IntegerField()
    volume_credits = serializers.IntegerField()

    def get_amount(self, line) -> str:
        return line.amount.usd()


class StatementSerializer(serializers.Serializer):
    """Serializer for Statement domain model."""

    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.SerializerMethodField()
    total_amount_cents = serializers.IntegerField(source="total_amount.cents")
    volume_credits = serializers.IntegerField()

    def get_total_amount(self, statement) -> str:
        return statement.total_amount.usd()
