from .video import Video, CreateVideoRequest, CreateVideoResponse
from .health import HealthResponse, ApiHealthResponse, AuthStatusResponse
from .user import (
    User,
    Role,
    ROLES,
    DEFAULT_ROLE,
    GUEST_USER,
    UserProfile,
    ProfileResponse,
    SetRoleRequest,
    RoleResponse,
)


__all__ = [
    "Video",
    "CreateVideoRequest",
    "CreateVideoResponse",
    "HealthResponse",
    "ApiHealthResponse",
    "AuthStatusResponse",
    "User",
    "Role",
    "ROLES",
    "DEFAULT_ROLE",
    "GUEST_USER",
    "UserProfile",
    "ProfileResponse",
    "SetRoleRequest",
    "RoleResponse",
]
