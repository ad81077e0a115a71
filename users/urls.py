"""
Authentication endpoints for the users app.

Session login/logout, the current-user endpoint and JWT obtain/refresh
views.  Included under the ``/api/auth/`` prefix.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views import SessionLoginView, SessionLogoutView, SessionMeView

urlpatterns = [
    path("login/", SessionLoginView.as_view(), name="login"),
    path("logout/", SessionLogoutView.as_view(), name="logout"),
    path("me/", SessionMeView.as_view(), name="me"),

    path("token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
