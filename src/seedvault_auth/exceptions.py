"""Errors raised by the token and hashing services.

The identity services and API routers turn these into HTTP answers; none
of the messages name which credential was wrong.
"""


class AuthError(Exception):
    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Forged, malformed or incomplete token."""

    default_message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    """Correctly signed, but past its ``exp``."""

    default_message = "Token has expired"


class WeakPasswordError(AuthError):
    default_message = "Password does not meet requirements"


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password; deliberately the same error."""

    default_message = "Invalid email or password"
