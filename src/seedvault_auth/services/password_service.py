"""bcrypt password hashing with a minimum length policy."""

import bcrypt

from seedvault_auth.exceptions import WeakPasswordError

# bcrypt silently truncates longer input
BCRYPT_MAX_BYTES = 72


class PasswordHashingService:
    """Hash and verify login passwords.

    Every digest carries its own random salt, so hashing the same password
    twice gives two different strings that both verify.

    Parameters
    ----------
    rounds
        bcrypt cost factor (log2 of the iteration count).
    min_length
        Shortest accepted password, in characters.
    """

    def __init__(self, rounds: int = 12, min_length: int = 8):
        self._rounds = rounds
        self._min_length = min_length

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def min_length(self) -> int:
        return self._min_length

    def hash(self, password: str) -> str:
        """Return the salted digest, or raise WeakPasswordError."""
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not isinstance(password, str) or not isinstance(password_hash, str):
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            # Not a bcrypt digest
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            raise WeakPasswordError("Password cannot be empty")

        if len(password) < self._min_length:
            msg = f"Password must be at least {self._min_length} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            msg = f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """True when ``password_hash`` was made with another cost factor.

        Digests look like ``$2b$<rounds>$...``; anything unparsable counts as
        needing a rehash.
        """
        try:
            return int(password_hash.split("$")[2]) != self._rounds
        except (AttributeError, IndexError, ValueError):
            return True
