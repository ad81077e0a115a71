"""
Payments app configuration.

``ready()`` is the composition root for billing: it hands the secret key
to the stripe library and builds the event router with its single
``charge.succeeded`` subscription.  The router is frozen afterwards and
reached through ``apps.get_app_config("payments").router``.
"""
import stripe
from django.apps import AppConfig
from django.conf import settings


def build_router():
    from .events import EventRouter
    from .handlers import RecordCharges

    router = EventRouter()
    router.subscribe("charge.succeeded", RecordCharges())
    return router.freeze()


class PaymentsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments"

    router = None

    def ready(self) -> None:
        stripe.api_key = settings.STRIPE["secret_key"] or None
        self.router = build_router()
