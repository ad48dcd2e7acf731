"""Vault error codes and the exception hierarchy behind them.

The presentation layer maps ``ErrorCode`` values to HTTP statuses in one
place, so every exception here only has to pick its code.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients as ``code``."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ID = "INVALID_ID"
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_SECRET_PHRASE = "INVALID_SECRET_PHRASE"
    INVALID_WALLET_NAME = "INVALID_WALLET_NAME"
    INVALID_WALLET_TYPE = "INVALID_WALLET_TYPE"
    INVALID_ASSOCIATED_EMAIL = "INVALID_ASSOCIATED_EMAIL"
    INVALID_ASSOCIATED_PASSWORD = "INVALID_ASSOCIATED_PASSWORD"

    # 401 / 403
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    FORBIDDEN = "FORBIDDEN"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    SECRET_NOT_FOUND = "SECRET_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    EMAIL_EXISTS = "EMAIL_EXISTS"

    # 500
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class of every vault error.

    Attributes
    ----------
    message
        Text that may be shown to the client.
    code
        Stable ``ErrorCode``; subclasses set ``default_code``.
    details
        Extra context for server logs only.
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT


class PersistenceError(DomainException):
    """The database failed; clients only ever see a generic message."""

    default_code = ErrorCode.PERSISTENCE_ERROR

    def __init__(
        self,
        message: str = "A storage error occurred",
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
