"""Store a new recovery phrase for the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from seedvault.domain.secrets import Secret, SecretRepository

if TYPE_CHECKING:
    from seedvault.application.factories import RepositoryFactory
    from seedvault.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CreateSecretCommand:
    """Validate and persist a secret owned by the current user."""

    def __init__(self, secret_repository: SecretRepository, current_user: CurrentUser):
        self._repo = secret_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateSecretCommand:
        return cls(
            secret_repository=factory.secret_repository(),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        wallet_name: str,
        wallet_type: str,
        secret_phrase: str,
        associated_email: Optional[str] = None,
        associated_email_password: Optional[str] = None,
    ) -> UUID:
        secret = Secret.create(
            owner_id=self._current_user.user_id,
            wallet_name=wallet_name,
            wallet_type=wallet_type,
            secret_phrase=secret_phrase,
            associated_email=associated_email,
            associated_email_password=associated_email_password,
        )
        await self._repo.save(secret)

        logger.info(
            "Stored secret %s for user %s (%s words)",
            secret.id,
            self._current_user.user_id,
            secret.secret_phrase.word_count,
        )
        return secret.id
