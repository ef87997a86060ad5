from typing import Any, Mapping


class ClaimsFactory:
    """Builds decoded ID token claims as the identity provider would send them."""

    def __init__(self, claims: Mapping[str, Any] | None = None):
        if claims is None:
            claims = {
                "sub": "test-sub",
                "name": "Test User",
                "preferred_username": "test@example.com",
                "iss": "https://login.microsoftonline.com/test-tenant/v2.0",
                "aud": "test-client",
            }
        self.claims = dict(claims)

    def make(self, update: Mapping[str, Any] | None = None) -> dict[str, Any]:
        claims = dict(self.claims)
        if update:
            claims.update(update)
        return claims
