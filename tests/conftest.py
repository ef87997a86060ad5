import pytest
from aurevo.app import env_loader  # noqa: F401

from tests._factories import VideoFactory, ClaimsFactory


@pytest.fixture(autouse=True)
def reset_jwks_client():
    """Keep the process-wide JWKS client from leaking between tests."""
    import aurevo.app.oauth as oauth_module

    oauth_module._jwks_client = None
    oauth_module._jwks_cache_time = 0
    oauth_module._jwks_url = None
    yield
    oauth_module._jwks_client = None
    oauth_module._jwks_cache_time = 0
    oauth_module._jwks_url = None


@pytest.fixture(scope="session")
def video_factory() -> VideoFactory:
    return VideoFactory()


@pytest.fixture(scope="session")
def claims_factory() -> ClaimsFactory:
    return ClaimsFactory()
