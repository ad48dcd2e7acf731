"""Parsing of client-supplied secret identifiers."""

from uuid import UUID

from seedvault.domain.secrets.exceptions import InvalidSecretIdError


def parse_secret_id(raw: str | UUID) -> UUID:
    """Turn a path parameter into a UUID or raise InvalidSecretIdError."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except (ValueError, AttributeError, TypeError) as e:
        raise InvalidSecretIdError(str(raw)) from e
