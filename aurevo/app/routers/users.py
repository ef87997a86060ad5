"""Current-user routes: profile lookup and role switching."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from aurevo.models.user import (
    User,
    ROLES,
    ProfileResponse,
    SetRoleRequest,
    RoleResponse,
)
from aurevo.store import UserDirectory
from aurevo.app.auth import AuthChain
from aurevo.app.dependencies import get_user_directory

logger = logging.getLogger(__name__)


def create_router(chain: AuthChain) -> APIRouter:
    """Build the /me routes against the given auth chain."""
    router = APIRouter(prefix="/me", tags=["users"])

    @router.get("", response_model=ProfileResponse)
    def read_me(user: User = Depends(chain.identity)) -> ProfileResponse:
        """Who am I? Guests get the fixed guest profile."""
        return ProfileResponse.from_user(user)

    @router.post("/role", response_model=RoleResponse)
    def set_my_role(
        body: Any = Body(None),
        users: UserDirectory = Depends(get_user_directory),
        user: User = Depends(chain.writer),
    ) -> RoleResponse:
        """Switch between 'Creator' and 'Consumer'."""
        requested = SetRoleRequest.from_body(body).requested_role
        if requested not in ROLES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="invalid role",
            )
        updated = users.set_role(user.sub, requested)  # type: ignore[arg-type]
        logger.info(f"User {user.sub} switched role to {updated.role}")
        return RoleResponse(role=updated.role)

    return router
