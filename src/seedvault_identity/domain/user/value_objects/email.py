"""Login email address.

Addresses are compared after trimming and lowercasing, so ``Alice@X.com``
and ``alice@x.com`` are the same account.
"""

import re
from dataclasses import dataclass

from seedvault_identity.domain.user.exceptions import InvalidEmailError

# local@domain.tld, nothing fancier
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MAX_EMAIL_LENGTH = 255


def is_valid_email(value: str) -> bool:
    """Shape check only; the caller normalizes first if it wants to."""
    if not isinstance(value, str) or len(value) > MAX_EMAIL_LENGTH:
        return False
    return EMAIL_PATTERN.match(value) is not None


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        raw = self.value
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidEmailError("Email cannot be empty")

        normalized = raw.strip().lower()
        if not is_valid_email(normalized):
            raise InvalidEmailError(f"Invalid email format: {raw}")

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
