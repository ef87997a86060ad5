"""In-memory directory of users and their roles."""

import logging
import threading
from typing import Any, Mapping, Optional

from aurevo.models.user import User, Role, ROLES, DEFAULT_ROLE

logger = logging.getLogger(__name__)


class UserDirectory:
    """Maps a token subject to a locally-assigned profile and role.

    Entries are created lazily and never removed. Everything is lost on
    restart.
    """

    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, sub: object) -> bool:
        return sub in self._users

    def get(self, sub: str) -> Optional[User]:
        """Get a user by their token subject."""
        return self._users.get(sub)

    def ensure(self, claims: Mapping[str, Any]) -> Optional[User]:
        """Get the user for a set of verified claims, creating them if needed.

        New users get the default 'Consumer' role. Profile fields are only
        read from the claims the first time a subject is seen.

        Args:
            claims: Decoded ID token claims.

        Returns:
            The User, or None if the claims carry no subject.
        """
        sub = claims.get("sub")
        if not sub:
            return None

        with self._lock:
            existing = self._users.get(sub)
            if existing is not None:
                return existing

            user = User(
                sub=sub,
                name=claims.get("name") or "User",
                email=claims.get("preferred_username") or claims.get("email") or "",
                role=DEFAULT_ROLE,
            )
            self._users[sub] = user
        logger.info(f"Created user sub={sub} name={user.name!r}")
        return user

    def set_role(self, sub: str, role: Role) -> User:
        """Overwrite a user's role, keeping their name and email.

        Raises:
            ValueError: If the role is not 'Creator' or 'Consumer'.
            KeyError: If the subject has never been seen.
        """
        if role not in ROLES:
            raise ValueError(f"Invalid role: {role!r}")
        with self._lock:
            current = self._users[sub]
            updated = current.model_copy(update={"role": role})
            self._users[sub] = updated
        logger.info(f"Set role for sub={sub} to {role}")
        return updated
