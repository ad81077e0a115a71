"""
Tests for the wiki authorization rules and the visibility queryset.

The policy functions are pure, so most cases only need model instances;
``visible_to`` is checked against the same rules through the database.
"""
import pytest
from django.contrib.auth.models import AnonymousUser

from wikis.models import Wiki
from wikis.policies import Decision, authorize, can_modify, can_view


@pytest.mark.django_db
def test_can_view(user, other_user, wiki_admin, public_wiki, private_wiki):
    anon = AnonymousUser()
    assert can_view(anon, public_wiki)
    assert not can_view(anon, private_wiki)
    assert not can_view(other_user, private_wiki)
    assert can_view(user, private_wiki)
    assert can_view(wiki_admin, private_wiki)


@pytest.mark.django_db
def test_can_modify(user, other_user, wiki_admin, public_wiki):
    assert can_modify(user, public_wiki)
    assert can_modify(wiki_admin, public_wiki)
    assert not can_modify(other_user, public_wiki)
    assert not can_modify(AnonymousUser(), public_wiki)


@pytest.mark.django_db
@pytest.mark.parametrize(
    "action, actor, fixture, expected",
    [
        ("list", "anon", None, Decision.ALLOW),
        ("show", "anon", "public_wiki", Decision.ALLOW),
        ("show", "anon", "private_wiki", Decision.SIGN_IN),
        ("show", "other_user", "private_wiki", Decision.DENY),
        ("show", "user", "private_wiki", Decision.ALLOW),
        ("show", "wiki_admin", "private_wiki", Decision.ALLOW),
        ("new", "anon", None, Decision.SIGN_IN),
        ("create", "other_user", None, Decision.ALLOW),
        ("edit", "anon", "public_wiki", Decision.SIGN_IN),
        ("update", "other_user", "public_wiki", Decision.DENY),
        ("partial_update", "user", "public_wiki", Decision.ALLOW),
        ("destroy", "wiki_admin", "private_wiki", Decision.ALLOW),
        ("destroy", "other_user", "private_wiki", Decision.DENY),
    ],
)
def test_authorize_decision_table(request, action, actor, fixture, expected):
    user = AnonymousUser() if actor == "anon" else request.getfixturevalue(actor)
    wiki = request.getfixturevalue(fixture) if fixture else None
    assert authorize(action, user, wiki) is expected


def test_authorize_rejects_unknown_action():
    with pytest.raises(ValueError):
        authorize("publish", AnonymousUser())


@pytest.mark.django_db
def test_visible_to_agrees_with_can_view(user, other_user, wiki_admin, public_wiki, private_wiki):
    Wiki.objects.create(title="Other's secret", body="...", private=True, user=other_user)
    for actor in (AnonymousUser(), user, other_user, wiki_admin):
        visible = set(Wiki.objects.visible_to(actor))
        expected = {w for w in Wiki.objects.all() if can_view(actor, w)}
        assert visible == expected


@pytest.mark.django_db
def test_owner_is_required(db):
    from django.db import IntegrityError

    with pytest.raises(IntegrityError):
        Wiki.objects.create(title="Orphan", body="No owner")
