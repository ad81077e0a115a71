"""
URL configuration for the payments app.

Registers the read-only charge endpoints, the client configuration
endpoint and the Stripe webhook.  Included under ``/api/payments/``.
"""
from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import ChargeViewSet, StripeConfigView, StripeWebhookView

router = DefaultRouter()
router.register(r"charges", ChargeViewSet, basename="charge")

urlpatterns = [
    *router.urls,
    path("config/", StripeConfigView.as_view(), name="stripe-config"),
    path("webhook/stripe/", StripeWebhookView.as_view(), name="stripe-webhook"),
]
