"""FastAPI application for the SeedVault HTTP API.

Versioned endpoints live under ``/api/v1``; ``/health`` stays unversioned.
Run with ``uvicorn seedvault.presentation.api.app:app`` or ``seedvault serve``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seedvault import __version__
from seedvault.presentation.api.dependencies import create_tables, get_engine
from seedvault.presentation.api.exception_handlers import setup_exception_handlers
from seedvault.presentation.api.routers import (
    auth_router,
    secrets_router,
    users_router,
)
from seedvault_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_APP_LOGGERS = ("seedvault", "seedvault_identity", "seedvault_auth")
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Send vault logs to stdout at LOG_LEVEL; libraries only from WARNING."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Sign up with email and password, then log in for a bearer token. "
            "Send it as `Authorization: Bearer <token>` on every other call."
        ),
    },
    {
        "name": "Users",
        "description": (
            "The caller's own account: read it, change its email, or delete it "
            "together with every stored seed phrase."
        ),
    },
    {
        "name": "Secrets",
        "description": (
            "Seed phrases of 12, 15, 18, 21 or 24 words. Listing shows metadata "
            "only; `/reveal` returns the phrase. Another user's secret is "
            "reported as not found."
        ),
    },
    {"name": "Health", "description": "Liveness probe."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    engine = get_engine()
    logger.info("Starting SeedVault API v%s", API_VERSION)

    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Database is unreachable, refusing to start")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("SeedVault API stopped, connection pool disposed")


def create_v1_router() -> APIRouter:
    v1 = APIRouter()
    v1.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1.include_router(users_router, prefix="/users", tags=["Users"])
    v1.include_router(secrets_router, prefix="/secrets", tags=["Secrets"])
    return v1


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Parameters
    ----------
    settings
        Settings to use instead of the environment, mainly for tests. The
        interactive docs are only served when ``api_debug`` is on.
    """
    _configure_logging()
    settings = settings or get_settings()
    docs_enabled = settings.api_debug

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Owner-scoped storage for wallet recovery phrases.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    # No origins configured means cross-origin requests are refused
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return app


app = create_app()
