"""
Authorization rules for wikis.

Every function here is a pure decision over the acting user and the wiki
in question; nothing reads the request or global state.  Views turn a
``Decision`` into a response (see ``wikis.views.guard``).
"""
from __future__ import annotations

import enum

from users.models import is_admin


class Decision(enum.Enum):
    ALLOW = "allow"
    SIGN_IN = "sign_in"  # redirect to the sign-in entry point
    DENY = "deny"


# Actions that operate on an existing wiki.
READ_ACTIONS = {"show"}
WRITE_ACTIONS = {"edit", "update", "partial_update", "destroy"}
# Actions that require a signed-in user but no particular wiki.
AUTHOR_ACTIONS = {"new", "create"}


def is_owner(user, wiki) -> bool:
    return bool(user is not None and user.is_authenticated and wiki.user_id == user.pk)


def can_view(user, wiki) -> bool:
    """Public wikis are readable by anyone; private ones by their owner and admins."""
    if not wiki.private:
        return True
    return is_owner(user, wiki) or is_admin(user)


def can_modify(user, wiki) -> bool:
    return is_owner(user, wiki) or is_admin(user)


def authorize(action: str, user, wiki=None) -> Decision:
    if action not in {"list"} | READ_ACTIONS | WRITE_ACTIONS | AUTHOR_ACTIONS:
        raise ValueError(f"Unknown wiki action: {action!r}")
    signed_in = user is not None and user.is_authenticated

    if action == "list":
        return Decision.ALLOW

    if action in READ_ACTIONS:
        if can_view(user, wiki):
            return Decision.ALLOW
        return Decision.DENY if signed_in else Decision.SIGN_IN

    if not signed_in:
        return Decision.SIGN_IN

    if action in AUTHOR_ACTIONS:
        return Decision.ALLOW
    return Decision.ALLOW if can_modify(user, wiki) else Decision.DENY
