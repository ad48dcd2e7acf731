"""API tests for /auth/signup and /auth/login."""

from datetime import datetime

from seedvault_auth import PasswordHashingService
from seedvault_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TestUserFactory

EMAIL = "signup@example.com"


class TestSignup:
    async def test_signup_returns_user_without_token(self, client, api_v1_prefix):
        response = await client.post(
            f"{api_v1_prefix}/auth/signup",
            json=TestUserFactory.credentials(EMAIL),
        )

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id", "email", "created_at"}
        assert data["email"] == EMAIL
        datetime.fromisoformat(data["created_at"])

    async def test_signup_normalizes_email(self, client, api_v1_prefix):
        response = await client.post(
            f"{api_v1_prefix}/auth/signup",
            json=TestUserFactory.credentials("MiXeD@Example.com"),
        )

        assert response.status_code == 201
        assert response.json()["email"] == "mixed@example.com"

    async def test_duplicate_email_any_casing(self, client, api_v1_prefix):
        url = f"{api_v1_prefix}/auth/signup"
        await client.post(url, json=TestUserFactory.credentials(EMAIL))

        response = await client.post(
            url,
            json=TestUserFactory.credentials(EMAIL.upper()),
        )

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Email address is already registered",
            "code": "EMAIL_EXISTS",
        }

    async def test_short_password(self, client, api_v1_prefix):
        response = await client.post(
            f"{api_v1_prefix}/auth/signup",
            json={"email": EMAIL, "password": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    async def test_invalid_email_is_schema_error(self, client, api_v1_prefix):
        response = await client.post(
            f"{api_v1_prefix}/auth/signup",
            json={"email": "not-an-email", "password": TestUserFactory.PASSWORD},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert "email" in body["detail"]

    async def test_validation_errors_do_not_echo_password(
        self,
        client,
        api_v1_prefix,
    ):
        response = await client.post(
            f"{api_v1_prefix}/auth/signup",
            json={"email": "bad", "password": "SuperSecretValue1"},
        )

        assert response.status_code == 422
        assert "SuperSecretValue1" not in response.text


class TestLogin:
    async def test_login_returns_token(self, client, api_v1_prefix, jwt_service):
        credentials = TestUserFactory.credentials(EMAIL)
        await client.post(f"{api_v1_prefix}/auth/signup", json=credentials)

        response = await client.post(f"{api_v1_prefix}/auth/login", json=credentials)

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 3600
        assert data["user"]["email"] == EMAIL
        payload = jwt_service.verify_token(data["access_token"])
        assert str(payload.user_id) == data["user"]["id"]

    async def test_login_email_is_case_insensitive(self, client, api_v1_prefix):
        await client.post(
            f"{api_v1_prefix}/auth/signup",
            json=TestUserFactory.credentials(EMAIL),
        )

        response = await client.post(
            f"{api_v1_prefix}/auth/login",
            json=TestUserFactory.credentials(EMAIL.upper()),
        )

        assert response.status_code == 200

    async def test_wrong_password_and_unknown_email_look_alike(
        self,
        client,
        api_v1_prefix,
    ):
        await client.post(
            f"{api_v1_prefix}/auth/signup",
            json=TestUserFactory.credentials(EMAIL),
        )

        wrong_password = await client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": EMAIL, "password": "WrongPassword9"},
        )
        unknown_email = await client.post(
            f"{api_v1_prefix}/auth/login",
            json=TestUserFactory.credentials("ghost@example.com"),
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["code"] == "INVALID_CREDENTIALS"

    async def test_malformed_email_is_invalid_credentials(
        self,
        client,
        api_v1_prefix,
    ):
        response = await client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "not-an-email", "password": "whatever1"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    async def test_login_upgrades_outdated_digest(
        self,
        client,
        api_v1_prefix,
        sqlite_session_maker,
    ):
        old_hash = PasswordHashingService(rounds=5).hash(TestUserFactory.PASSWORD)
        async with sqlite_session_maker() as session:
            await UserRepositorySQLAlchemy(session).create(EMAIL, old_hash)
            await session.commit()

        response = await client.post(
            f"{api_v1_prefix}/auth/login",
            json=TestUserFactory.credentials(EMAIL),
        )

        assert response.status_code == 200
        async with sqlite_session_maker() as session:
            stored = await UserRepositorySQLAlchemy(session).find_by_email(EMAIL)
        assert stored.password_hash != old_hash
        assert stored.password_hash.startswith("$2b$04$")
