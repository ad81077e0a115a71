"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the fields
the wiki and billing code needs: an admin flag and the user's Stripe
customer id.  A `OneToOneField` links each profile to its user.  The
`UserProfile` is created automatically via signals when a new user
instance is saved.
"""
from django.contrib.auth.models import User
from django.db import models


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    is_admin = models.BooleanField(default=False, help_text="Admins bypass wiki ownership checks")
    stripe_id = models.CharField(
        max_length=255,
        unique=True,
        null=True,
        blank=True,
        help_text="Stripe customer identifier (cus_...)",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def make_admin(self) -> None:
        self.is_admin = True
        self.save(update_fields=["is_admin", "updated_at"])

    def __str__(self) -> str:
        return f"Profile<{self.user.username}>"


def is_admin(user) -> bool:
    """
    True when ``user`` may bypass ownership checks.

    Staff and superusers count as admins, as does anyone whose profile
    carries the admin flag.  Anonymous users never do.
    """
    if user is None or not user.is_authenticated:
        return False
    if user.is_staff or user.is_superuser:
        return True
    profile = getattr(user, "profile", None)
    return bool(profile and profile.is_admin)


def find_by_stripe_id(customer_id: str) -> User:
    """Return the user whose profile carries ``customer_id``; raises ``User.DoesNotExist``."""
    return User.objects.select_related("profile").get(profile__stripe_id=customer_id)
