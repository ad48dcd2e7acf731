"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from seedvault_auth.exceptions import InvalidTokenError, TokenExpiredError
from seedvault_auth.schemas import TokenStatus
from seedvault_auth.services import JWTService

SECRET = "test-secret-key-12345"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key="test-secret-key")
        assert service.access_token_expire_seconds == 3600

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_init_with_custom_expiry(self):
        service = JWTService(secret_key="test-secret", access_token_expire_hours=2)
        assert service.access_token_expire_seconds == 7200


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_token_carries_canonical_claims(self):
        token = self.service.create_access_token(self.user_id, self.email)

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert set(claims) == {"sub", "email", "iat", "exp"}
        assert claims["sub"] == str(self.user_id)
        assert claims["exp"] - claims["iat"] == 3600

    def test_verify_valid_access_token(self):
        token = self.service.create_access_token(self.user_id, self.email)

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == self.email
        assert payload.exp > payload.iat

    def test_verify_expired_token_raises_expired(self):
        token = self.service.create_access_token(
            self.user_id,
            self.email,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(TokenExpiredError, match="expired"):
            self.service.verify_token(token)

    def test_expired_error_is_an_invalid_token_error(self):
        assert issubclass(TokenExpiredError, InvalidTokenError)

    def test_verify_garbage_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_tampered_token_raises(self):
        token = self.service.create_access_token(self.user_id, self.email)
        tampered = token[:-5] + "xxxxx"

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_verify_wrong_secret_raises(self):
        other_service = JWTService(secret_key="different-secret")
        token = other_service.create_access_token(self.user_id, self.email)

        with pytest.raises(InvalidTokenError) as exc_info:
            self.service.verify_token(token)
        assert not isinstance(exc_info.value, TokenExpiredError)

    def test_token_signed_with_none_algorithm_rejected(self):
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "sub": str(self.user_id),
                "email": self.email,
                "iat": now,
                "exp": now + timedelta(hours=1),
            },
            key=None,
            algorithm="none",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)


class TestClaimShape:
    """Tokens signed with the right key but the wrong shape are rejected."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        now = datetime.now(tz=timezone.utc)
        self.claims = {
            "sub": str(uuid4()),
            "email": "test@example.com",
            "iat": now,
            "exp": now + timedelta(hours=1),
        }

    def _encode(self, claims):
        return jwt.encode(claims, SECRET, algorithm="HS256")

    @pytest.mark.parametrize("missing", ["sub", "email", "iat", "exp"])
    def test_missing_claim_rejected(self, missing):
        del self.claims[missing]

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(self._encode(self.claims))

    def test_non_uuid_subject_rejected(self):
        self.claims["sub"] = "not-a-uuid"

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(self._encode(self.claims))

    def test_non_string_email_rejected(self):
        self.claims["email"] = 42

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(self._encode(self.claims))


class TestCheckToken:
    """Tests for the non-raising verification variant."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()

    def test_valid_token(self):
        token = self.service.create_access_token(self.user_id, "a@example.com")

        result = self.service.check_token(token)

        assert result.status is TokenStatus.VALID
        assert result.is_valid
        assert result.payload is not None
        assert result.payload.user_id == self.user_id

    def test_expired_token(self):
        token = self.service.create_access_token(
            self.user_id,
            "a@example.com",
            expires_delta=timedelta(seconds=-5),
        )

        result = self.service.check_token(token)

        assert result.status is TokenStatus.EXPIRED
        assert result.is_expired
        assert result.payload is None

    def test_forged_token(self):
        token = JWTService(secret_key="other").create_access_token(
            self.user_id,
            "a@example.com",
        )

        result = self.service.check_token(token)

        assert result.status is TokenStatus.INVALID
        assert result.reason

    @pytest.mark.parametrize("value", [None, 123, b"bytes", "", "a.b.c"])
    def test_never_raises(self, value):
        result = self.service.check_token(value)

        assert result.status is TokenStatus.INVALID
