"""
Models for the wikis app.

A ``Wiki`` is a titled piece of content owned by exactly one user.  A
private wiki is hidden from anonymous visitors and from users other than
its owner; admins see everything.  The ``visible_to`` queryset method
encodes that rule for listings.
"""
from django.conf import settings
from django.db import models
from django.db.models import Q

from users.models import is_admin


class WikiQuerySet(models.QuerySet):
    def visible_to(self, user):
        """Wikis ``user`` may read: public ones, plus own private ones; admins get all."""
        if is_admin(user):
            return self.all()
        if user is None or not user.is_authenticated:
            return self.filter(private=False)
        return self.filter(Q(private=False) | Q(user=user))


class Wiki(models.Model):
    """A wiki page owned by a single user."""

    title = models.CharField(max_length=255)
    body = models.TextField()
    private = models.BooleanField(default=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="wikis",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = WikiQuerySet.as_manager()

    class Meta:
        indexes = [
            models.Index(fields=["private", "user"], name="wiki_private_user_idx"),
        ]
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.title
