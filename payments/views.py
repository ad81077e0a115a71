"""
Views for the payments app.

This module exposes the Stripe webhook receiver, a read-only listing of
recorded charges and the client-side Stripe configuration.  The webhook
requires no authentication and relies on signature verification when
``STRIPE_WEBHOOK_SECRET`` is set.
"""
from __future__ import annotations

import json
import logging

import stripe
from django.apps import apps
from django.conf import settings
from django.http import HttpResponse, JsonResponse
from rest_framework import permissions, views, viewsets
from rest_framework.response import Response

from users.models import is_admin
from .handlers import MalformedEvent, UnknownCustomer
from .models import Charge
from .serializers import ChargeSerializer

logger = logging.getLogger(__name__)


class ChargeViewSet(viewsets.ReadOnlyModelViewSet):
    """Charges of the signed-in user; admins see every charge."""

    serializer_class = ChargeSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        qs = Charge.objects.select_related("user")
        if is_admin(self.request.user):
            return qs
        return qs.filter(user=self.request.user)


class StripeConfigView(views.APIView):
    """Publishable key for client-side Stripe.js.  The secret key never leaves the server."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response({"publishable_key": settings.STRIPE["publishable_key"]})


class StripeWebhookView(views.APIView):
    """Handle incoming Stripe webhook events."""

    permission_classes = []  # no authentication
    authentication_classes = []

    def post(self, request):
        payload = request.body
        webhook_secret = settings.STRIPE_WEBHOOK_SECRET
        if webhook_secret:
            sig_header = request.META.get("HTTP_STRIPE_SIGNATURE", "")
            try:
                stripe_event = stripe.Webhook.construct_event(
                    payload=payload, sig_header=sig_header, secret=webhook_secret
                )
            except ValueError:
                return JsonResponse({"ok": False, "reason": "invalid_json"}, status=400)
            except stripe.SignatureVerificationError:
                logger.warning("Rejected Stripe webhook with a bad signature")
                return HttpResponse(status=400)
            event = _plain_event(stripe_event)
        else:
            logger.warning("STRIPE_WEBHOOK_SECRET is not set; accepting unverified webhook")
            try:
                event = json.loads(payload.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError):
                return JsonResponse({"ok": False, "reason": "invalid_json"}, status=400)
            if not isinstance(event, dict):
                return JsonResponse({"ok": False, "reason": "invalid_json"}, status=400)

        router = apps.get_app_config("payments").router
        try:
            router.dispatch(event)
        except UnknownCustomer as e:
            logger.error("Stripe event %s left unrecorded: %s", event.get("id"), e)
            return JsonResponse({"ok": False, "reason": "unknown_customer"}, status=422)
        except MalformedEvent as e:
            logger.warning("Malformed Stripe event %s: %s", event.get("id"), e)
            return JsonResponse({"ok": False, "reason": "malformed_event"}, status=400)
        return JsonResponse({"ok": True})


def _plain_event(stripe_event):
    """Nested dicts of a verified ``stripe.Event``, the shape the router and handlers take."""
    to_dict = getattr(stripe_event, "to_dict_recursive", None) or stripe_event.to_dict
    return to_dict()
