"""Reveal secret query - returns the full record to its owner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from seedvault.domain.secrets import (
    SecretNotFoundError,
    SecretRepository,
    parse_secret_id,
)

if TYPE_CHECKING:
    from seedvault.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealedSecret:
    """Plaintext view of a secret. Never carries the owner id."""

    id: UUID
    wallet_name: str
    wallet_type: str
    secret_phrase: str
    associated_email: Optional[str]
    associated_email_password: Optional[str]
    created_at: datetime

    def __repr__(self) -> str:
        return (
            f"RevealedSecret(id={self.id}, wallet_name={self.wallet_name!r}, "
            f"wallet_type={self.wallet_type!r})"
        )


class RevealSecretQuery:
    """Query to fetch one secret, scoped to the current user."""

    def __init__(self, secret_repository: SecretRepository):
        self._secret_repo = secret_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RevealSecretQuery:
        return cls(secret_repository=factory.secret_repository())

    async def execute(self, secret_id: str | UUID) -> RevealedSecret:
        parsed_id = parse_secret_id(secret_id)

        secret = await self._secret_repo.find_by_id(parsed_id)
        if secret is None:
            logger.warning("Secret %s not found in caller's scope", parsed_id)
            raise SecretNotFoundError(parsed_id)

        password = secret.associated_email_password
        return RevealedSecret(
            id=secret.id,
            wallet_name=secret.wallet_name.value,
            wallet_type=secret.wallet_type.value,
            secret_phrase=secret.secret_phrase.reveal(),
            associated_email=secret.associated_email,
            associated_email_password=password.get_value() if password else None,
            created_at=secret.created_at,
        )
