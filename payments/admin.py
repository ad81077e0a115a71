"""
Django admin registration for the payments app.

Provides a list display and filters for Charge to help administrators
trace Stripe charges back to users.
"""
from django.contrib import admin

from .models import Charge


@admin.register(Charge)
class ChargeAdmin(admin.ModelAdmin):
    list_display = (
        "stripe_id",
        "user",
        "amount",
        "card_type",
        "card_last4",
        "created_at",
    )
    list_filter = ("card_type",)
    search_fields = ("user__username", "stripe_id")
    ordering = ("-created_at",)
