"""Verification of Microsoft identity platform ID tokens and role checks."""

import os
import time
import logging
from collections import deque
from typing import Optional, Dict, Any

import jwt
from jwt import PyJWKClient, PyJWKClientError
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from aurevo.models.user import User, GUEST_USER
from aurevo.store import UserDirectory
from .dependencies import get_user_directory

logger = logging.getLogger(__name__)
oauth_scheme = HTTPBearer(auto_error=False)

LOGIN_BASE_URL = "https://login.microsoftonline.com"
JWT_ALGORITHMS = ["RS256"]

# JWKS client cache
_jwks_client: Optional[PyJWKClient] = None
_jwks_cache_time: float = 0
_jwks_url: Optional[str] = None
JWKS_CACHE_DURATION = 3600  # 1 hour
JWKS_REQUESTS_PER_MINUTE = 10


class RateLimitedJWKClient(PyJWKClient):
    """PyJWKClient that refuses to hit the key endpoint too often.

    Unknown key ids make PyJWKClient refetch the key set, so a stream of
    forged tokens would otherwise turn into a stream of remote requests.
    """

    def __init__(
        self,
        uri: str,
        requests_per_minute: int = JWKS_REQUESTS_PER_MINUTE,
        **kwargs: Any,
    ):
        super().__init__(uri, **kwargs)
        self.requests_per_minute = requests_per_minute
        self._fetch_times: deque[float] = deque()

    def fetch_data(self) -> Any:
        now = time.monotonic()
        while self._fetch_times and now - self._fetch_times[0] >= 60:
            self._fetch_times.popleft()
        if len(self._fetch_times) >= self.requests_per_minute:
            raise PyJWKClientError(
                f"JWKS rate limit exceeded ({self.requests_per_minute} requests per minute)"
            )
        self._fetch_times.append(now)
        return super().fetch_data()


def get_client_id() -> str:
    """Get the application (client) ID, which is the expected audience."""
    return os.getenv("CLIENT_ID", "").strip()


def get_tenant_id() -> str:
    """Get the directory (tenant) ID that issues tokens."""
    return os.getenv("TENANT_ID", "").strip()


def is_auth_configured() -> bool:
    """Token verification is only possible with both CLIENT_ID and TENANT_ID."""
    return bool(get_client_id()) and bool(get_tenant_id())


def get_issuer() -> str:
    return f"{LOGIN_BASE_URL}/{get_tenant_id()}/v2.0"


def get_jwks_url() -> str:
    return f"{LOGIN_BASE_URL}/{get_tenant_id()}/discovery/v2.0/keys"


def get_jwks_client() -> PyJWKClient:
    """Get or refresh JWKS client for JWT validation."""
    global _jwks_client, _jwks_cache_time, _jwks_url

    current_time = time.time()
    jwks_url = get_jwks_url()
    if (
        _jwks_client is None
        or _jwks_url != jwks_url
        or (current_time - _jwks_cache_time) > JWKS_CACHE_DURATION
    ):
        _jwks_client = RateLimitedJWKClient(
            jwks_url, cache_keys=True, lifespan=JWKS_CACHE_DURATION
        )
        _jwks_cache_time = current_time
        _jwks_url = jwks_url
        logger.info(f"Refreshed JWKS client from {jwks_url}")

    return _jwks_client


def validate_jwt_token(token: str) -> Optional[Dict[str, Any]]:
    """Validate an ID token using the tenant's published keys.

    Returns decoded claims if valid, None if invalid.
    """
    try:
        jwks_client = get_jwks_client()
        signing_key = jwks_client.get_signing_key_from_jwt(token)

        decoded = jwt.decode(
            token,
            signing_key.key,
            algorithms=JWT_ALGORITHMS,
            issuer=get_issuer(),
            audience=get_client_id(),
            options={"require": ["exp", "iss", "sub", "aud"]},
        )
        return decoded
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        return None
    except PyJWKClientError as e:
        logger.warning(f"Could not get signing key: {e}")
        return None
    except jwt.PyJWTError as e:
        logger.warning(f"Invalid JWT token: {e}")
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(oauth_scheme),
    users: UserDirectory = Depends(get_user_directory),
) -> User:
    """FastAPI dependency to get the current authenticated user.

    Validates the bearer token and gets or creates the user record.

    Raises:
        HTTPException 401 if the token is missing or invalid.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = validate_jwt_token(credentials.credentials)
    if not claims:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = users.ensure(claims)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing subject",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def require_creator(
    user: User = Depends(get_current_user),
    users: UserDirectory = Depends(get_user_directory),
) -> User:
    """FastAPI dependency requiring the Creator role.

    The role is read back from the directory so a switch made earlier in
    the session is honoured.

    Raises:
        HTTPException 403 if the user is not a Creator.
    """
    stored = users.get(user.sub) or user
    if not stored.is_creator:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Creators only",
        )
    return stored


async def get_guest_user() -> User:
    """Identity used when token verification is not configured."""
    return GUEST_USER


async def auth_disabled() -> User:
    """Stand-in for write endpoints when token verification is not configured."""
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Authentication is not configured",
    )
