from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool = True


class ApiHealthResponse(BaseModel):
    """Response model for /api/health."""

    status: str
    time: datetime
    app: str


class AuthStatusResponse(BaseModel):
    """Whether the front end can offer sign-in."""

    hasAuth: bool
