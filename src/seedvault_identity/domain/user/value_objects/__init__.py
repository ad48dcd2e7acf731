from seedvault_identity.domain.user.value_objects.email import (
    EMAIL_PATTERN,
    Email,
    is_valid_email,
)

__all__ = ["EMAIL_PATTERN", "Email", "is_valid_email"]
