"""Unit tests for the secret queries."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from seedvault.application.queries import (
    ListSecretMetadataQuery,
    RevealSecretQuery,
)
from seedvault.domain.secrets import (
    InvalidSecretIdError,
    Secret,
    SecretMetadata,
    SecretNotFoundError,
)
from tests.shared.fixtures.factories import TestSecretFactory, phrase


class TestListSecretMetadataQuery:
    def setup_method(self):
        self.repo = AsyncMock()
        self.query = ListSecretMetadataQuery(self.repo)

    async def test_returns_metadata_and_total(self):
        now = datetime.now(tz=timezone.utc)
        items = [
            SecretMetadata(uuid4(), "Newer", "Metamask", now),
            SecretMetadata(uuid4(), "Older", "Exodus", now - timedelta(days=1)),
        ]
        self.repo.list_metadata.return_value = items

        result = await self.query.execute()

        assert result.secrets == items
        assert result.total_count == 2

    async def test_empty_vault(self):
        self.repo.list_metadata.return_value = []

        result = await self.query.execute()

        assert result.secrets == []
        assert result.total_count == 0


class TestRevealSecretQuery:
    def setup_method(self):
        self.repo = AsyncMock()
        self.query = RevealSecretQuery(self.repo)

    async def test_reveals_plaintext_fields(self):
        secret = Secret.create(
            owner_id=uuid4(),
            **TestSecretFactory.create_kwargs(
                associated_email="wallet@example.com",
                associated_email_password="pw-123",
            ),
        )
        self.repo.find_by_id.return_value = secret

        revealed = await self.query.execute(str(secret.id))

        self.repo.find_by_id.assert_awaited_once_with(secret.id)
        assert revealed.id == secret.id
        assert revealed.secret_phrase == phrase(12)
        assert revealed.associated_email == "wallet@example.com"
        assert revealed.associated_email_password == "pw-123"
        assert not hasattr(revealed, "owner_id")

    async def test_repr_does_not_leak_phrase(self):
        secret = Secret.create(owner_id=uuid4(), **TestSecretFactory.create_kwargs())
        self.repo.find_by_id.return_value = secret

        revealed = await self.query.execute(secret.id)

        assert "abandon" not in repr(revealed)

    async def test_missing_secret_raises_not_found(self):
        self.repo.find_by_id.return_value = None

        with pytest.raises(SecretNotFoundError):
            await self.query.execute(str(uuid4()))

    async def test_malformed_id(self):
        with pytest.raises(InvalidSecretIdError):
            await self.query.execute("12345")

        self.repo.find_by_id.assert_not_awaited()
