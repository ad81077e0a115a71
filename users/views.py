"""
Sign-in endpoints for the users app.

Session login/logout and a `me` endpoint.  ``settings.LOGIN_URL`` points at
the login view, so wiki actions that require a signed-in user redirect
here.  JWT obtain/refresh views are wired directly in ``users/urls.py``.
"""
import logging

from django.contrib.auth import get_user_model, login as django_login, logout as django_logout
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import UserSerializer

logger = logging.getLogger(__name__)

UserModel = get_user_model()


class SessionLoginView(APIView):
    """
    Session-based login. Expects JSON: {"email": "...", "password": "..."}
    On success, creates a Django session (cookie-based).
    """
    permission_classes = []  # allow unauthenticated
    authentication_classes = []

    @method_decorator(ensure_csrf_cookie)
    def get(self, request):
        return Response({"detail": "Sign in with a POST of email and password."}, status=status.HTTP_200_OK)

    @method_decorator(ensure_csrf_cookie)
    def post(self, request):
        data = request.data or {}
        email = (data.get("email") or "").strip().lower()
        password = data.get("password") or ""
        if not email or not password:
            return Response({"error": "email and password are required"}, status=status.HTTP_400_BAD_REQUEST)
        try:
            user = UserModel.objects.get(email__iexact=email)
        except UserModel.DoesNotExist:
            return Response({"error": "Invalid credentials"}, status=status.HTTP_400_BAD_REQUEST)
        if not user.is_active or not user.check_password(password):
            return Response({"error": "Invalid credentials"}, status=status.HTTP_400_BAD_REQUEST)

        django_login(request, user)
        request.session.cycle_key()
        logger.info("User %s signed in", user.pk)
        return Response({"detail": "logged_in", "user": UserSerializer(user).data}, status=status.HTTP_200_OK)


class SessionLogoutView(APIView):
    """Session-based logout. Destroys the user's session cookie."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        django_logout(request)
        return Response({"detail": "logged_out"}, status=status.HTTP_200_OK)


class SessionMeView(APIView):
    """Return the current user (401 if not logged in)."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data, status=status.HTTP_200_OK)
