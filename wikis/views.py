"""
Views for the wikis app.

``WikiViewSet`` exposes the wiki resource: list, show, new, create, edit,
update and destroy.  Each action is wrapped by ``guard``, which consults
``wikis.policies.authorize`` before the handler runs.  Anonymous visitors
are redirected to the sign-in entry point (``settings.LOGIN_URL``); signed
in users lacking rights get a 403 with an alert.  Listing and reading
public wikis needs no account.

Responses carry a one-shot ``notice`` (success) or ``alert`` (failure)
message alongside the payload.
"""
import functools
import logging

from django.conf import settings
from django.db import DatabaseError, transaction
from django.urls import reverse
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .models import Wiki
from .policies import READ_ACTIONS, WRITE_ACTIONS, Decision, authorize
from .serializers import WikiSerializer

logger = logging.getLogger(__name__)

SIGN_IN_TO_VIEW = "You must be signed in to view private wiki."
SIGN_IN_REQUIRED = "You must be signed in to do that."
PRIVATE_WIKI = "You are not allowed to view this private wiki."
NOT_AUTHORIZED = "You are not authorized to do that."


def denial_response(decision, action_name):
    if decision is Decision.SIGN_IN:
        message = SIGN_IN_TO_VIEW if action_name in READ_ACTIONS else SIGN_IN_REQUIRED
        return Response(
            {"alert": message},
            status=status.HTTP_302_FOUND,
            headers={"Location": settings.LOGIN_URL},
        )
    message = PRIVATE_WIKI if action_name in READ_ACTIONS else NOT_AUTHORIZED
    return Response({"alert": message}, status=status.HTTP_403_FORBIDDEN)


def guard(action_name):
    """
    Run ``authorize`` for ``action_name`` before the wrapped handler.

    For actions on an existing wiki the object is loaded first (404 when
    missing) and stored on ``self.wiki`` for the handler to use.
    """
    def decorator(handler):
        @functools.wraps(handler)
        def wrapped(self, request, *args, **kwargs):
            wiki = None
            if action_name in READ_ACTIONS or action_name in WRITE_ACTIONS:
                wiki = self.get_object()
            decision = authorize(action_name, request.user, wiki)
            if decision is not Decision.ALLOW:
                logger.info(
                    "Wiki %s denied (%s) for user %s on wiki %s",
                    action_name, decision.value, request.user.pk, getattr(wiki, "pk", None),
                )
                return denial_response(decision, action_name)
            self.wiki = wiki
            return handler(self, request, *args, **kwargs)
        return wrapped
    return decorator


class WikiViewSet(viewsets.ModelViewSet):
    serializer_class = WikiSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        qs = Wiki.objects.select_related("user")
        if self.action == "list":
            return qs.visible_to(self.request.user)
        return qs

    @staticmethod
    def show_url(wiki):
        return reverse("wiki-detail", args=[wiki.pk])

    @guard("list")
    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    @guard("show")
    def retrieve(self, request, *args, **kwargs):
        return Response(self.get_serializer(self.wiki).data)

    @action(detail=False, methods=["get"], url_path="new")
    @guard("new")
    def new(self, request):
        """Blank wiki used to populate a creation form.  Nothing is saved."""
        return Response(self.get_serializer(Wiki()).data)

    @action(detail=True, methods=["get"], url_path="edit")
    @guard("edit")
    def edit(self, request, pk=None):
        return Response(self.get_serializer(self.wiki).data)

    @guard("create")
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"alert": "Error creating wiki. Please try again.", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        wiki = serializer.save(user=request.user)
        logger.info("Wiki %s created by user %s", wiki.pk, request.user.pk)
        return Response(
            {"notice": "Wiki was saved successfully.", "wiki": self.get_serializer(wiki).data},
            status=status.HTTP_201_CREATED,
            headers={"Location": self.show_url(wiki)},
        )

    @guard("update")
    def update(self, request, *args, **kwargs):
        return self._save_changes(request, partial=False)

    @guard("partial_update")
    def partial_update(self, request, *args, **kwargs):
        return self._save_changes(request, partial=True)

    def _save_changes(self, request, partial):
        # Owner is never reassigned on update.
        serializer = self.get_serializer(self.wiki, data=request.data, partial=partial)
        if not serializer.is_valid():
            return Response(
                {"alert": "Error saving wiki. Please try again.", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        wiki = serializer.save()
        logger.info("Wiki %s updated by user %s", wiki.pk, request.user.pk)
        return Response(
            {"notice": "Wiki was updated successfully.", "wiki": self.get_serializer(wiki).data},
            headers={"Location": self.show_url(wiki)},
        )

    @guard("destroy")
    def destroy(self, request, *args, **kwargs):
        wiki = self.wiki
        wiki_id = wiki.pk
        try:
            with transaction.atomic():
                wiki.delete()
        except DatabaseError as e:
            logger.error("Failed to delete wiki %s: %s", wiki_id, e)
            return Response(
                {"alert": "There was an error deleting the wiki.", "wiki": self.get_serializer(wiki).data},
                status=status.HTTP_409_CONFLICT,
            )
        logger.info("Wiki %s deleted by user %s", wiki_id, request.user.pk)
        return Response(
            {"notice": f'"{wiki.title}" was deleted successfully.'},
            headers={"Location": reverse("wiki-list")},
        )
