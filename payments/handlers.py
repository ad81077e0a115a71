"""
Stripe event handlers for the payments app.

``RecordCharges`` handles ``charge.succeeded``: it finds the local user
owning the Stripe customer and upserts a ``Charge`` for the Stripe charge
id.  Delivering the same event again rewrites the same row, so Stripe's
retries never create duplicates.

A customer with no matching user is reported with ``UnknownCustomer``
instead of being dropped; the webhook view logs it and answers with an
error status so the event stays visible in the Stripe dashboard.
"""
from __future__ import annotations

import logging
from collections import abc
from dataclasses import dataclass
from typing import Any, Mapping

from django.contrib.auth import get_user_model

from users.models import find_by_stripe_id
from .models import Charge

logger = logging.getLogger(__name__)

User = get_user_model()


class ChargeRecordingError(Exception):
    """Base class for failures while recording a charge."""


class MalformedEvent(ChargeRecordingError):
    """The event payload lacks a field needed to record the charge."""


class UnknownCustomer(ChargeRecordingError):
    """No local user carries the Stripe customer id named by the event."""

    def __init__(self, customer_id: str, charge_id: str):
        self.customer_id = customer_id
        self.charge_id = charge_id
        super().__init__(f"No user with Stripe customer id {customer_id!r} (charge {charge_id!r})")


@dataclass(frozen=True)
class ChargeSucceeded:
    charge_id: str
    customer: str
    amount: int
    card_last4: str = ""
    card_type: str = ""
    card_exp_month: int | None = None
    card_exp_year: int | None = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "ChargeSucceeded":
        event_id = event.get("id")
        try:
            charge = event["data"]["object"]
            charge_id = charge["id"]
            customer = charge["customer"]
            amount = int(charge["amount"])
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedEvent(f"charge.succeeded event {event_id!r} is missing {e}") from e
        if not charge_id or not customer:
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has no charge or customer id")
        if amount < 0:
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has a negative amount")

        # Legacy Charges carry the card as ``source``; newer ones under
        # ``payment_method_details.card``.
        details = charge.get("payment_method_details") or {}
        if not isinstance(details, abc.Mapping):
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has invalid payment_method_details")
        card = charge.get("source") or details.get("card") or {}
        if not isinstance(card, abc.Mapping):
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has an unexpanded or invalid card")

        try:
            exp_month = _optional_int(card.get("exp_month"))
            exp_year = _optional_int(card.get("exp_year"))
        except (TypeError, ValueError) as e:
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has an invalid card expiry") from e
        if exp_month is not None and not 1 <= exp_month <= 12:
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has an invalid card expiry")
        if exp_year is not None and not 0 <= exp_year <= 9999:
            raise MalformedEvent(f"charge.succeeded event {event_id!r} has an invalid card expiry")

        return cls(
            charge_id=str(charge_id),
            customer=str(customer),
            amount=amount,
            card_last4=str(card.get("last4") or "")[:4],
            card_type=str(card.get("brand") or "")[:32],
            card_exp_month=exp_month,
            card_exp_year=exp_year,
        )


def _optional_int(value):
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    return int(value)


class RecordCharges:
    """Callable subscribed to ``charge.succeeded``."""

    def __call__(self, event: Mapping[str, Any]) -> Charge:
        payload = ChargeSucceeded.from_event(event)

        try:
            user = find_by_stripe_id(payload.customer)
        except User.DoesNotExist:
            logger.error(
                "Cannot record charge %s: no user for Stripe customer %s",
                payload.charge_id, payload.customer,
            )
            raise UnknownCustomer(payload.customer, payload.charge_id)

        # update_or_create locks the row and falls back to a re-read when a
        # concurrent insert trips the (user, stripe_id) unique constraint.
        charge, created = Charge.objects.update_or_create(
            user=user,
            stripe_id=payload.charge_id,
            defaults={
                "amount": payload.amount,
                "card_last4": payload.card_last4,
                "card_type": payload.card_type,
                "card_exp_month": payload.card_exp_month,
                "card_exp_year": payload.card_exp_year,
            },
        )
        logger.info(
            "%s charge %s for user %s (amount=%s)",
            "Recorded" if created else "Updated", charge.stripe_id, user.pk, charge.amount,
        )
        return charge
