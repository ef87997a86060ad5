"""Token authentication and role-based authorization.

Whether tokens are verified is decided once at startup. Each mode is a
fixed set of dependencies, and routers are built against one of them.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable

from aurevo.models.user import User
from .oauth import (
    validate_jwt_token,
    get_current_user,
    require_creator,
    get_guest_user,
    auth_disabled,
    is_auth_configured,
)

UserDependency = Callable[..., Awaitable[User]]


@dataclass(frozen=True)
class AuthChain:
    """Dependencies for each level of access.

    identity: who is calling (GET /me).
    writer: an authenticated caller allowed to change their own data.
    creator: an authenticated caller with the Creator role.
    """

    enabled: bool
    identity: UserDependency
    writer: UserDependency
    creator: UserDependency


OAUTH_CHAIN = AuthChain(
    enabled=True,
    identity=get_current_user,
    writer=get_current_user,
    creator=require_creator,
)

GUEST_CHAIN = AuthChain(
    enabled=False,
    identity=get_guest_user,
    writer=auth_disabled,
    creator=auth_disabled,
)


def select_auth_chain(enabled: bool) -> AuthChain:
    return OAUTH_CHAIN if enabled else GUEST_CHAIN


__all__ = [
    "AuthChain",
    "OAUTH_CHAIN",
    "GUEST_CHAIN",
    "select_auth_chain",
    "validate_jwt_token",
    "get_current_user",
    "require_creator",
    "get_guest_user",
    "auth_disabled",
    "is_auth_configured",
]
