"""Identity errors.

These stay independent of the vault's ``DomainException`` hierarchy; the
API routers translate them into HTTP answers.
"""


class IdentityError(Exception):
    """Base class for account related failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidEmailError(IdentityError, ValueError):
    """The address is empty, too long or not shaped like an email."""


class EmailAlreadyExistsError(IdentityError):
    """Another account already uses this (normalized) address."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class UserNotFoundError(IdentityError):
    """No account with this id; the token may have outlived the account."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")
