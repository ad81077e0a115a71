"""
Common test fixtures for the API tests.

Provides users in the roles the wiki rules distinguish (owner, another
standard user, admin), wikis owned by the owner, and Django test clients
signed in as each user.
"""
import pytest
from django.test import Client


def _make_user(username, **extra):
    from django.contrib.auth import get_user_model

    return get_user_model().objects.create_user(
        username=username, password="pass12345", email=f"{username}@example.com", **extra
    )


@pytest.fixture
def user(db):
    """Create the user owning the wiki fixtures."""
    return _make_user("owner")


@pytest.fixture
def other_user(db):
    """Create a standard user who owns nothing."""
    return _make_user("other")


@pytest.fixture
def wiki_admin(db):
    """Create a user carrying the profile admin flag (not Django staff)."""
    u = _make_user("boss")
    u.profile.make_admin()
    return u


@pytest.fixture
def public_wiki(user):
    from wikis.models import Wiki

    return Wiki.objects.create(title="Public page", body="Everyone can read this.", user=user)


@pytest.fixture
def private_wiki(user):
    from wikis.models import Wiki

    return Wiki.objects.create(title="Private page", body="Only for me.", private=True, user=user)


def _signed_in(u):
    c = Client()
    c.force_login(u)
    return c


@pytest.fixture
def owner_client(user):
    return _signed_in(user)


@pytest.fixture
def other_client(other_user):
    return _signed_in(other_user)


@pytest.fixture
def wiki_admin_client(wiki_admin):
    return _signed_in(wiki_admin)
