from typing import Any, Iterator, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from aurevo.app.app import create_app
from aurevo.store import VideoStore, UserDirectory


CONSUMER_CLAIMS = {
    "sub": "consumer-sub",
    "name": "Casey Consumer",
    "preferred_username": "casey@example.com",
}
CREATOR_CLAIMS = {
    "sub": "creator-sub",
    "name": "Riley Creator",
    "preferred_username": "riley@example.com",
}
NO_SUB_CLAIMS = {"name": "Nobody"}

TOKENS: dict[str, dict[str, Any]] = {
    "consumer_token": CONSUMER_CLAIMS,
    "creator_token": CREATOR_CLAIMS,
    "no_sub_token": NO_SUB_CLAIMS,
}


def _fake_validate(token: str) -> Optional[dict[str, Any]]:
    """Accept only the known test tokens."""
    claims = TOKENS.get(token)
    return dict(claims) if claims is not None else None


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def videos() -> VideoStore:
    return VideoStore()


@pytest.fixture
def users() -> UserDirectory:
    return UserDirectory()


@pytest.fixture
def auth_app(videos: VideoStore, users: UserDirectory, monkeypatch) -> FastAPI:
    """App with token verification on, accepting the fake tokens above.

    Mocks at the location where validate_jwt_token is looked up.
    """
    monkeypatch.setattr("aurevo.app.oauth.validate_jwt_token", _fake_validate)
    return create_app(auth_enabled=True, videos=videos, users=users)


@pytest.fixture
def client(auth_app: FastAPI) -> Iterator[TestClient]:
    """Auth-enabled client that sends no token."""
    with TestClient(auth_app) as client:
        yield client


@pytest.fixture
def consumer_client(auth_app: FastAPI) -> Iterator[TestClient]:
    """Auth-enabled client for a user with the default 'Consumer' role."""
    with TestClient(auth_app, headers=_bearer("consumer_token")) as client:
        yield client


@pytest.fixture
def creator_client(auth_app: FastAPI, users: UserDirectory) -> Iterator[TestClient]:
    """Auth-enabled client for a user who has switched to 'Creator'."""
    users.ensure(CREATOR_CLAIMS)
    users.set_role(CREATOR_CLAIMS["sub"], "Creator")
    with TestClient(auth_app, headers=_bearer("creator_token")) as client:
        yield client


@pytest.fixture
def guest_client(videos: VideoStore, users: UserDirectory) -> Iterator[TestClient]:
    """Client for an app started without CLIENT_ID/TENANT_ID."""
    app = create_app(auth_enabled=False, videos=videos, users=users)
    with TestClient(app) as client:
        yield client
