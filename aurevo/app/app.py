# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401
from .env_loader import get_allowed_origins

import os
import time
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from aurevo.store import VideoStore, UserDirectory
from .auth import select_auth_chain, is_auth_configured
from .routers import create_video_router, create_user_router, create_health_router
from .static import create_router as create_static_router

"""FastAPI application setup for aurevo.

Exposes routes for listing and publishing videos and for the caller's
profile and role, then falls back to the static front end. This module
configures CORS, logging, and whether ID tokens are verified.
"""

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("aurevo.access")


# Configure basic logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# Configure the logging for the API itself if the user specifies it.
if "LOG_LEVEL" in os.environ:
    match os.environ["LOG_LEVEL"].upper():
        case "DEBUG":
            log_level = logging.DEBUG
        case "INFO":
            log_level = logging.INFO
        case "WARNING":
            log_level = logging.WARNING
        case "ERROR":
            log_level = logging.ERROR
        case "CRITICAL":
            log_level = logging.CRITICAL
        case _:
            raise ValueError(f"Invalid log level: {os.environ['LOG_LEVEL']}")
    logging.getLogger("aurevo").setLevel(log_level)


def create_app(
    auth_enabled: Optional[bool] = None,
    videos: Optional[VideoStore] = None,
    users: Optional[UserDirectory] = None,
) -> FastAPI:
    """Build the application.

    Args:
        auth_enabled: Whether to verify ID tokens. When None, tokens are
            verified only if CLIENT_ID and TENANT_ID are both set.
        videos: Video store to serve. A freshly seeded one by default.
        users: User directory to serve. An empty one by default.
    """
    if auth_enabled is None:
        auth_enabled = is_auth_configured()
        if not auth_enabled:
            logger.warning(
                "CLIENT_ID and TENANT_ID are not both set; token validation is "
                "disabled and write endpoints will refuse requests."
            )
    chain = select_auth_chain(auth_enabled)

    app = FastAPI(title="aurevo")
    app.state.videos = videos if videos is not None else VideoStore()
    app.state.users = users if users is not None else UserDirectory()
    app.state.auth_enabled = auth_enabled

    app.include_router(create_health_router(chain))
    app.include_router(create_video_router(chain))
    app.include_router(create_user_router(chain))
    # Must come last: it matches every GET path.
    app.include_router(create_static_router())

    allowed_origins = get_allowed_origins()
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=allowed_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} - {elapsed_ms:.1f} ms"
        )
        return response

    return app


app = create_app()
