"""SQLAlchemy implementation of SecretRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from seedvault.domain.secrets import (
    Secret,
    SecretMetadata,
    SecretPhrase,
    SecretRepository,
    WalletName,
    WalletType,
)
from seedvault.domain.shared.exceptions import PersistenceError
from seedvault.domain.shared.time import ensure_tz_aware
from seedvault.domain.shared.value_objects import SecureString
from seedvault.infrastructure.persistence.sqlalchemy.models import SecretModel

if TYPE_CHECKING:
    from seedvault.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class SecretRepositorySQLAlchemy(SecretRepository):
    """Secret storage scoped to one user.

    Every statement filters on ``owner_id``; database errors leave this
    class as PersistenceError.
    """

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._user_id = current_user.user_id

    async def save(self, secret: Secret) -> None:
        if secret.owner_id != self._user_id:
            msg = (
                f"Refusing to store secret {secret.id} for user "
                f"{secret.owner_id} in the scope of {self._user_id}"
            )
            raise ValueError(msg)

        self._session.add(self._entity_to_model(secret))
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.exception("Failed to store secret %s", secret.id)
            raise PersistenceError(details={"secret_id": str(secret.id)}) from e

    async def list_metadata(self) -> list[SecretMetadata]:
        stmt = (
            select(
                SecretModel.id,
                SecretModel.wallet_name,
                SecretModel.wallet_type,
                SecretModel.created_at,
            )
            .where(SecretModel.owner_id == self._user_id)
            .order_by(SecretModel.created_at.desc(), SecretModel.id)
        )
        rows = (await self._execute(stmt)).all()

        return [
            SecretMetadata(
                id=row.id,
                wallet_name=row.wallet_name,
                wallet_type=row.wallet_type,
                created_at=ensure_tz_aware(row.created_at),
            )
            for row in rows
        ]

    async def find_by_id(self, secret_id: UUID) -> Optional[Secret]:
        stmt = select(SecretModel).where(
            SecretModel.owner_id == self._user_id,
            SecretModel.id == secret_id,
        )
        model = (await self._execute(stmt)).scalar_one_or_none()

        if model is None:
            return None

        return self._model_to_entity(model)

    async def delete(self, secret_id: UUID) -> bool:
        stmt = delete(SecretModel).where(
            SecretModel.owner_id == self._user_id,
            SecretModel.id == secret_id,
        )
        result = await self._execute(stmt)
        return result.rowcount > 0

    async def delete_all(self) -> int:
        stmt = delete(SecretModel).where(SecretModel.owner_id == self._user_id)
        result = await self._execute(stmt)
        logger.debug("Deleted %d secret(s) for user %s", result.rowcount, self._user_id)
        return result.rowcount

    async def count(self) -> int:
        stmt = (
            select(func.count())
            .select_from(SecretModel)
            .where(SecretModel.owner_id == self._user_id)
        )
        return (await self._execute(stmt)).scalar_one()

    # Private helpers

    async def _execute(self, stmt):
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Secret store query failed for user %s", self._user_id)
            raise PersistenceError(details={"user_id": str(self._user_id)}) from e

    @staticmethod
    def _model_to_entity(model: SecretModel) -> Secret:
        return Secret(
            id=model.id,
            owner_id=model.owner_id,
            wallet_name=WalletName(model.wallet_name),
            wallet_type=WalletType.from_storage(model.wallet_type),
            secret_phrase=SecretPhrase(SecureString(model.secret_phrase)),
            associated_email=model.associated_email,
            associated_email_password=SecureString.optional(
                model.associated_email_password,
            ),
            created_at=ensure_tz_aware(model.created_at),
        )

    @staticmethod
    def _entity_to_model(entity: Secret) -> SecretModel:
        password = entity.associated_email_password
        return SecretModel(
            id=entity.id,
            owner_id=entity.owner_id,
            wallet_name=entity.wallet_name.value,
            wallet_type=entity.wallet_type.value,
            secret_phrase=entity.secret_phrase.reveal(),
            associated_email=entity.associated_email,
            associated_email_password=password.get_value() if password else None,
            created_at=entity.created_at,
        )
