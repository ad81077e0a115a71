"""
Serializers for the users app.

Exposes the signed-in user together with the profile flags the wiki
client needs to decide which actions to offer.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import is_admin

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    is_admin = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("id", "username", "email", "is_admin")
        read_only_fields = fields

    def get_is_admin(self, obj) -> bool:
        return is_admin(obj)
