"""
Settings used by the pytest suite.

Runs against an in-memory SQLite database with throttling disabled and
dummy Stripe keys so tests never touch external services.
"""
from .base import *  # noqa

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "DEFAULT_THROTTLE_CLASSES": [],
}

STRIPE = {
    "publishable_key": "pk_test_wiki",
    "secret_key": "sk_test_wiki",
}
STRIPE_WEBHOOK_SECRET = ""
