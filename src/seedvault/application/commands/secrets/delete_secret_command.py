"""Delete one of the current user's secrets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from seedvault.domain.secrets import (
    SecretNotFoundError,
    SecretRepository,
    parse_secret_id,
)

if TYPE_CHECKING:
    from seedvault.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteSecretCommand:
    """Hard-delete a secret. Foreign ids behave exactly like missing ones."""

    def __init__(self, secret_repository: SecretRepository):
        self._repo = secret_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteSecretCommand:
        return cls(secret_repository=factory.secret_repository())

    async def execute(self, secret_id: str | UUID) -> None:
        parsed_id = parse_secret_id(secret_id)

        deleted = await self._repo.delete(parsed_id)
        if not deleted:
            raise SecretNotFoundError(parsed_id)

        logger.info("Deleted secret %s", parsed_id)
