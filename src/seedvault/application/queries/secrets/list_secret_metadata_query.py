"""List secret metadata query - what the dashboard shows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from seedvault.domain.secrets import SecretMetadata, SecretRepository

if TYPE_CHECKING:
    from seedvault.application.factories import RepositoryFactory


@dataclass
class SecretMetadataListResult:
    """Result of listing secrets."""

    secrets: list[SecretMetadata]
    total_count: int


class ListSecretMetadataQuery:
    """Query to list the current user's secrets without sensitive fields."""

    def __init__(self, secret_repository: SecretRepository):
        self._secret_repo = secret_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListSecretMetadataQuery:
        return cls(secret_repository=factory.secret_repository())

    async def execute(self) -> SecretMetadataListResult:
        secrets = await self._secret_repo.list_metadata()
        return SecretMetadataListResult(secrets=secrets, total_count=len(secrets))
