"""HS256 access tokens for the vault API."""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from seedvault_auth.exceptions import InvalidTokenError, TokenExpiredError
from seedvault_auth.schemas import TokenPayload, TokenVerification

REQUIRED_CLAIMS = ("sub", "email", "iat", "exp")


class JWTService:
    """Issue and check bearer tokens.

    Only short-lived access tokens are issued. There is no refresh flow and
    no server-side revocation, so the expiry bounds a stolen token.
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_expire_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign a token for ``user_id`` valid for ``expires_delta``.

        Defaults to the configured lifetime. A negative delta yields a token
        that is already expired.
        """
        if expires_delta is None:
            expires_delta = self._access_expire
        now = datetime.now(tz=timezone.utc)
        expire = now + expires_delta

        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Raises
        ------
        TokenExpiredError
            If the token's ``exp`` has passed
        InvalidTokenError
            If the token is forged, malformed, or lacks the expected claims
        """
        if not isinstance(token, str) or not token:
            msg = "Token must be a non-empty string"
            raise InvalidTokenError(msg)

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e

        return self._to_payload(payload)

    def check_token(self, token: Any) -> TokenVerification:
        """Verify a token without raising.

        Returns a ``TokenVerification`` whose status is VALID, EXPIRED or
        INVALID. Any input, including non-strings, yields a result.
        """
        try:
            payload = self.verify_token(token)
        except TokenExpiredError as e:
            return TokenVerification.expired(e.message)
        except InvalidTokenError as e:
            return TokenVerification.invalid(e.message)
        return TokenVerification.valid(payload)

    @staticmethod
    def _to_payload(claims: dict[str, Any]) -> TokenPayload:
        email = claims["email"]
        if not isinstance(email, str) or not email:
            msg = "Malformed token payload: email claim must be a string"
            raise InvalidTokenError(msg)

        try:
            user_id = UUID(str(claims["sub"]))
            iat = datetime.fromtimestamp(claims["iat"], tz=timezone.utc)
            exp = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            msg = f"Malformed token payload: {e}"
            raise InvalidTokenError(msg) from e

        return TokenPayload(user_id=user_id, email=email, iat=iat, exp=exp)
