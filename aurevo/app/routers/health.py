"""Health and auth-status routes. All public."""

from datetime import datetime, timezone

from fastapi import APIRouter

from aurevo.models.health import HealthResponse, ApiHealthResponse, AuthStatusResponse
from aurevo.app.auth import AuthChain

APP_NAME = "aurevo"


def create_router(chain: AuthChain) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/healthz", response_model=HealthResponse)
    def healthz() -> HealthResponse:
        return HealthResponse()

    @router.get("/api/health", response_model=ApiHealthResponse)
    def api_health() -> ApiHealthResponse:
        return ApiHealthResponse(
            status="ok", time=datetime.now(timezone.utc), app=APP_NAME
        )

    @router.get("/auth/status", response_model=AuthStatusResponse)
    def auth_status() -> AuthStatusResponse:
        """Tell the front end whether sign-in is available."""
        return AuthStatusResponse(hasAuth=chain.enabled)

    return router
