from .videos import create_router as create_video_router
from .users import create_router as create_user_router
from .health import create_router as create_health_router

__all__ = [
    "create_video_router",
    "create_user_router",
    "create_health_router",
]
