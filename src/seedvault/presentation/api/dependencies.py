"""FastAPI dependencies: database sessions, services and the caller's identity.

Every protected route depends, directly or through ``RepoFactory``, on
``get_current_user``. Repositories handed to routers are already scoped to
that user, so a request body can never choose whose data is touched.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Registers both tables on Base.metadata
import seedvault.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import seedvault_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from seedvault.domain.shared.exceptions import ErrorCode
from seedvault.infrastructure.persistence.sqlalchemy.models.base import Base
from seedvault.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from seedvault.presentation.api.config import get_api_settings
from seedvault.presentation.api.exception_handlers import APIError
from seedvault_auth import JWTService, PasswordHashingService, TokenStatus
from seedvault_config.settings import Settings, get_settings
from seedvault_identity import (
    AuthenticationService,
    ProfileService,
    User,
    UserContext,
)
from seedvault_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


# -----------------------------------------------------------------------------
# Engine and sessions
# -----------------------------------------------------------------------------


@lru_cache()
def get_database_url() -> str:
    """Configured database URL; creates the parent folder of a SQLite file."""
    url = get_settings().sqlalchemy_url

    if url.startswith("sqlite") and ":memory:" not in url:
        Path(url.split("///")[-1]).parent.mkdir(parents=True, exist_ok=True)

    return url


def _is_memory_sqlite(url: str) -> bool:
    return ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:")


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``url``.

    SQLite connections get ``PRAGMA foreign_keys=ON`` so the cascade from
    users to secrets works there too. In-memory SQLite keeps one shared
    connection, otherwise each session would see its own empty database.
    """
    if not url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, pool_pre_ping=True)

    engine = create_async_engine(
        url,
        echo=echo,
        connect_args={"check_same_thread": False},
        **({"poolclass": StaticPool} if _is_memory_sqlite(url) else {}),
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine; disposed by the app lifespan on shutdown."""
    return build_engine(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request. Uncommitted work is rolled back on close."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create missing tables. Existing tables and rows are left alone."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


# -----------------------------------------------------------------------------
# Token, password and account services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(
        rounds=settings.bcrypt_rounds,
        min_length=settings.password_min_length,
    )


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Caller identity
# -----------------------------------------------------------------------------


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    Resolve the bearer token to a stored user.

    - no bearer token: 401 UNAUTHORIZED
    - expired token: 401 TOKEN_EXPIRED
    - forged or malformed token: 403 INVALID_TOKEN
    - token for a deleted user: 401 USER_NOT_FOUND

    The user is always re-read from the database, so a token stops working
    as soon as its account is gone.
    """
    if credentials is None:
        raise APIError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            code=ErrorCode.UNAUTHORIZED,
            headers=_BEARER_CHALLENGE,
        )

    verification = jwt_service.check_token(credentials.credentials)

    if verification.status is TokenStatus.EXPIRED:
        logger.info("Expired token presented")
        raise APIError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired. Please log in again.",
            code=ErrorCode.TOKEN_EXPIRED,
            headers=_BEARER_CHALLENGE,
        )

    if verification.status is not TokenStatus.VALID or verification.payload is None:
        logger.warning("Invalid token: %s", verification.reason)
        raise APIError(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
            code=ErrorCode.INVALID_TOKEN,
        )

    user_id = verification.payload.user_id
    user = await UserRepositorySQLAlchemy(session).find_by_id(user_id)

    if user is None:
        logger.warning("Token for missing user %s", user_id)
        raise APIError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            headers=_BEARER_CHALLENGE,
        )

    return user


async def get_user_context(
    user: User = Depends(get_current_user),
) -> UserContext:
    return UserContext.create(user)


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
) -> SQLAlchemyRepositoryFactory:
    """Repositories bound to the caller; commands use ``from_factory`` on it."""
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_profile_service(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
) -> ProfileService:
    return ProfileService(UserRepositorySQLAlchemy(session), user_context)


ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
