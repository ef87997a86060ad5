"""User model for locally-assigned roles."""

from __future__ import annotations
from typing import Any, Literal, get_args

from pydantic import BaseModel


Role = Literal["Creator", "Consumer"]
ROLES: tuple[str, ...] = get_args(Role)
DEFAULT_ROLE: Role = "Consumer"


class User(BaseModel):
    """A user known to this process.

    Users are created on first authenticated contact. The sub links to the
    'sub' claim of the verified ID token; the role is ours, not the identity
    provider's.
    """

    sub: str
    name: str
    email: str
    role: Role = DEFAULT_ROLE

    @property
    def is_creator(self) -> bool:
        """Check if user may publish videos."""
        return self.role == "Creator"


class UserProfile(BaseModel):
    name: str
    email: str
    role: Role


class ProfileResponse(BaseModel):
    """Response model for the who-am-I endpoint."""

    user: UserProfile

    @classmethod
    def from_user(cls, user: User) -> ProfileResponse:
        return cls(user=UserProfile(name=user.name, email=user.email, role=user.role))


class SetRoleRequest(BaseModel):
    """Request body for switching roles. Validated by the handler."""

    role: Any = None

    @classmethod
    def from_body(cls, body: Any) -> SetRoleRequest:
        """Parse a raw JSON body. Anything but an object carries no role."""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    @property
    def requested_role(self) -> str:
        """The trimmed role, or "" when it is not a string."""
        return self.role.strip() if isinstance(self.role, str) else ""


class RoleResponse(BaseModel):
    ok: bool = True
    role: Role


GUEST_USER = User(sub="guest", name="Guest", email="", role="Consumer")
