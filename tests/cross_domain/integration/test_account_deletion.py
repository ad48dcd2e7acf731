"""
Account deletion is all-or-nothing.

If removing the user fails after the secrets were removed, the whole
transaction rolls back and nothing is lost.
"""

import pytest
from sqlalchemy import func, select

from seedvault.application.commands import CreateSecretCommand, DeleteAccountCommand
from seedvault.infrastructure.persistence.sqlalchemy.models import SecretModel
from seedvault.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from seedvault_identity import UserContext
from seedvault_identity.infrastructure.persistence.sqlalchemy import (
    UserModel,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import TEST_USER_EMAIL, TEST_USER_ID
from tests.shared.fixtures.factories import TestSecretFactory


async def _failing_delete(self, user_id):
    msg = "simulated failure while deleting user"
    raise RuntimeError(msg)


async def _store(factory, wallet_name: str) -> None:
    command = CreateSecretCommand.from_factory(factory)
    await command.execute(**TestSecretFactory.create_kwargs(wallet_name=wallet_name))


@pytest.fixture
def factory(sqlite_session) -> SQLAlchemyRepositoryFactory:
    context = UserContext.from_values(TEST_USER_ID, TEST_USER_EMAIL)
    return SQLAlchemyRepositoryFactory(sqlite_session, context)


class TestDeleteAccountRollback:
    async def test_api_failure_keeps_secrets(
        self,
        client,
        api_v1_prefix,
        alice,
        monkeypatch,
    ):
        for name in ("One", "Two"):
            await client.post(
                f"{api_v1_prefix}/secrets",
                headers=alice["headers"],
                json=TestSecretFactory.create_payload(wallet_name=name),
            )
        monkeypatch.setattr(UserRepositorySQLAlchemy, "delete", _failing_delete)

        response = await client.delete(
            f"{api_v1_prefix}/users/me",
            headers=alice["headers"],
        )

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"

        monkeypatch.undo()
        listed = await client.get(f"{api_v1_prefix}/secrets", headers=alice["headers"])
        assert listed.status_code == 200
        assert listed.json()["total"] == 2

    async def test_command_failure_rolls_back(
        self,
        factory,
        sqlite_session,
        monkeypatch,
    ):
        for name in ("One", "Two", "Three"):
            await _store(factory, name)
        await sqlite_session.commit()
        monkeypatch.setattr(UserRepositorySQLAlchemy, "delete", _failing_delete)

        with pytest.raises(RuntimeError):
            await DeleteAccountCommand.from_factory(factory).execute()
        await sqlite_session.rollback()

        secrets = await sqlite_session.scalar(
            select(func.count()).select_from(SecretModel),
        )
        users = await sqlite_session.scalar(
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.id == TEST_USER_ID),
        )
        assert secrets == 3
        assert users == 1


class TestDeleteAccountSuccess:
    async def test_removes_user_and_secrets(self, factory, sqlite_session):
        await _store(factory, "Only")
        await sqlite_session.commit()

        deleted = await DeleteAccountCommand.from_factory(factory).execute()
        await sqlite_session.commit()

        assert deleted == 1
        assert await factory.user_repository().find_by_id(TEST_USER_ID) is None
        assert await factory.secret_repository().count() == 0
