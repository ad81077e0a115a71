"""
Database models for the payments app.

A ``Charge`` is the local record of a successful Stripe charge.  Rows are
keyed by the owning user and the Stripe charge id; a unique constraint on
that pair keeps replayed or concurrently delivered webhook events from
producing duplicates.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class Charge(models.Model):
    """A successful payment reported by Stripe."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="charges",
    )
    stripe_id = models.CharField(max_length=255, help_text="Stripe charge identifier (ch_...)")
    amount = models.PositiveIntegerField(default=0, help_text="Amount in the smallest currency unit")
    card_last4 = models.CharField(max_length=4, blank=True)
    card_type = models.CharField(max_length=32, blank=True)
    card_exp_month = models.PositiveSmallIntegerField(null=True, blank=True)
    card_exp_year = models.PositiveSmallIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "stripe_id"], name="unique_charge_per_user"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.stripe_id} ({self.amount / 100:.2f})"
