"""
Serializers for the payments app.

Charges are created only from Stripe events, so the API exposes them
read-only.
"""
from __future__ import annotations

from rest_framework import serializers

from .models import Charge


class ChargeSerializer(serializers.ModelSerializer):
    """Serializer for Charge objects (read-only)."""

    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Charge
        fields = [
            "id",
            "user_id",
            "stripe_id",
            "amount",
            "card_last4",
            "card_type",
            "card_exp_month",
            "card_exp_year",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
