"""``users`` table access.

Methods only flush; the router that owns the session decides whether to
commit. Email uniqueness is checked up front for a clean error and again
by the unique index, which is what actually holds under concurrent
signups. Any other database failure surfaces as PersistenceError.
"""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from seedvault.domain.shared.exceptions import PersistenceError
from seedvault.domain.shared.time import ensure_tz_aware, utc_now
from seedvault_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from seedvault_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _normalized(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


def _is_unique_violation(error: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed", postgres: "duplicate key value"
    text = str(error.orig if error.orig is not None else error).lower()
    return "unique" in text or "duplicate key" in text


class UserRepositorySQLAlchemy(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._get(user_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        result = await self._execute(
            select(UserModel).where(UserModel.email == _normalized(email)),
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        result = await self._execute(
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.email == _normalized(email)),
        )
        return result.scalar_one() > 0

    async def create(self, email: Union[str, Email], password_hash: str) -> User:
        user = User.create(email, password_hash)
        if await self.exists_by_email(user.email_obj):
            raise EmailAlreadyExistsError(user.email)

        self._session.add(
            UserModel(
                id=user.id,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
                updated_at=user.updated_at,
            ),
        )
        await self._flush(claiming=user.email)

        logger.info("Created user %s (%s)", user.id, user.email)
        return user

    async def update_email(self, user_id: UUID, new_email: Union[str, Email]) -> User:
        email = _normalized(new_email)
        model = await self._get_existing(user_id)

        if model.email != email:
            if await self.exists_by_email(email):
                raise EmailAlreadyExistsError(email)
            model.email = email
            model.updated_at = utc_now()
            await self._flush(claiming=email)
            logger.info("User %s changed email", user_id)

        return self._to_domain(model)

    async def update_password_hash(self, user_id: UUID, password_hash: str) -> User:
        model = await self._get_existing(user_id)
        model.password_hash = password_hash
        model.updated_at = utc_now()
        await self._flush()
        return self._to_domain(model)

    async def delete(self, user_id: UUID) -> bool:
        model = await self._get(user_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._flush()
        logger.info("Deleted user %s", user_id)
        return True

    async def count(self) -> int:
        result = await self._execute(select(func.count()).select_from(UserModel))
        return result.scalar_one()

    # Private helpers

    async def _get(self, user_id: UUID) -> UserModel | None:
        try:
            return await self._session.get(UserModel, user_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to load user %s", user_id)
            raise PersistenceError(details={"user_id": str(user_id)}) from e

    async def _get_existing(self, user_id: UUID) -> UserModel:
        model = await self._get(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))
        return model

    async def _execute(self, stmt):
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("User query failed")
            raise PersistenceError from e

    async def _flush(self, claiming: str | None = None) -> None:
        """Flush pending changes.

        With ``claiming`` set, a unique index violation means another account
        won that email and is reported as EmailAlreadyExistsError.
        """
        try:
            await self._session.flush()
        except IntegrityError as e:
            if claiming is not None and _is_unique_violation(e):
                raise EmailAlreadyExistsError(claiming) from e
            logger.exception("User write rejected by the database")
            raise PersistenceError from e
        except SQLAlchemyError as e:
            logger.exception("User write failed")
            raise PersistenceError from e

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
