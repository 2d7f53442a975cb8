from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from conference.main import app
from conference.services.credentials import CredentialIssuer
from conference.services.rooms import RoomRegistry, get_registry

TEST_API_KEY = "APItestkey123"
TEST_API_SECRET = "test-secret-0123456789abcdefghijklmnopqrstuv"


@pytest.fixture
def issuer() -> CredentialIssuer:
    return CredentialIssuer(TEST_API_KEY, TEST_API_SECRET)


@pytest.fixture
def registry(issuer: CredentialIssuer) -> RoomRegistry:
    return RoomRegistry(issuer)


@pytest.fixture
def client_factory():
    """Build an HTTP client bound to the app with ``registry`` injected."""

    def _build(registry: RoomRegistry) -> AsyncClient:
        app.dependency_overrides[get_registry] = lambda: registry
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        return AsyncClient(transport=transport, base_url="http://testserver")

    yield _build
    app.dependency_overrides.clear()
