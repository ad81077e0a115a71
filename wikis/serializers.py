"""
Serializers for the wikis app.

Only ``title``, ``body`` and ``private`` are writable; the owner is taken
from the authenticated request user, so an owner id sent by the client
is ignored along with any other unknown field.
"""
from rest_framework import serializers

from .models import Wiki


class WikiSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Wiki
        fields = [
            "id",
            "title",
            "body",
            "private",
            "user_id",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "user_id", "created_at", "updated_at"]
