"""
API-level fixtures: an app wired to the in-memory SQLite database.

Requests go through httpx's ASGI transport, so the app and the database
share the test's event loop. App exceptions are turned into 500 responses
instead of being re-raised into the test.
"""

from datetime import timedelta
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from seedvault.presentation.api.app import API_V1_PREFIX, create_app
from seedvault.presentation.api.config import get_api_settings
from seedvault.presentation.api.dependencies import get_db_session
from seedvault_auth import JWTService
from seedvault_config.settings import Settings
from tests.shared.fixtures.factories import TestUserFactory

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # noqa: S105


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings: fast bcrypt, debug docs on, one hour tokens."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
        jwt_access_token_expire_hours=1,
    )


@pytest.fixture
def jwt_service(api_settings) -> JWTService:
    """JWTService sharing the app's signing key."""
    return JWTService(
        secret_key=api_settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=api_settings.jwt_access_token_expire_hours,
    )


@pytest.fixture
def api_app(api_settings, sqlite_session_maker):
    """FastAPI app whose sessions come from the test database."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with sqlite_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    return app


@pytest_asyncio.fixture
async def client(api_app):
    """Async HTTP client bound to the test app."""
    transport = ASGITransport(app=api_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def register_user(client: AsyncClient, email: str) -> dict:
    """Sign up and log in; returns ids, token and auth headers."""
    credentials = TestUserFactory.credentials(email)

    response = await client.post(f"{API_V1_PREFIX}/auth/signup", json=credentials)
    assert response.status_code == 201, f"Signup failed: {response.text}"

    response = await client.post(f"{API_V1_PREFIX}/auth/login", json=credentials)
    assert response.status_code == 200, f"Login failed: {response.text}"

    data = response.json()
    return {
        "user_id": UUID(data["user"]["id"]),
        "email": data["user"]["email"],
        "access_token": data["access_token"],
        "headers": {"Authorization": f"Bearer {data['access_token']}"},
    }


@pytest_asyncio.fixture
async def alice(client) -> dict:
    """A registered and logged-in user."""
    return await register_user(client, TestUserFactory.ALICE_EMAIL)


@pytest_asyncio.fixture
async def bob(client) -> dict:
    """A second registered user for isolation tests."""
    return await register_user(client, TestUserFactory.BOB_EMAIL)


@pytest.fixture
def expired_headers(jwt_service, alice) -> dict:
    """Auth headers carrying an already expired token for alice."""
    token = jwt_service.create_access_token(
        alice["user_id"],
        alice["email"],
        expires_delta=timedelta(seconds=-10),
    )
    return {"Authorization": f"Bearer {token}"}
