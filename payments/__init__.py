"""
Payments app package for the wiki backend.

This package records successful Stripe charges against local users.
Stripe webhook events arrive at ``payments.views.StripeWebhookView``, are
routed by the ``EventRouter`` built in ``PaymentsConfig.ready()`` and
stored by ``RecordCharges`` as ``Charge`` rows, one per user and Stripe
charge id.
"""
