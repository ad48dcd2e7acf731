"""SeedVault settings.

Every setting maps to an upper-case environment variable of the same name
(``JWT_SECRET_KEY``, ``DATABASE_URL``, ``BCRYPT_ROUNDS``...). Real
environment variables always win over the env file. ``get_settings`` picks
the env file each time its cache is empty, using the first one that exists
of:

1. the path in ``SEEDVAULT_ENV_FILE`` (relative paths resolve against the
   project root)
2. ``config/.env.dev``
3. ``config/.env``
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "SEEDVAULT_ENV_FILE"

_ROOT_MARKERS = ("config", ".git", "pyproject.toml")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _project_root() / "config"


def _candidate_env_files() -> Iterator[Path]:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        yield path if path.is_absolute() else _project_root() / path

    yield get_config_dir() / ".env.dev"
    yield get_config_dir() / ".env"


def _env_file() -> Path | None:
    return next((p for p in _candidate_env_files() if p.is_file()), None)


class Settings(BaseSettings):
    """Runtime configuration of the vault service.

    Only ``jwt_secret_key`` has no default; loading fails without it.
    Constructed directly it reads the environment only; ``get_settings``
    adds the env file.
    """

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "SeedVault"

    # Token signing
    jwt_secret_key: SecretStr
    jwt_access_token_expire_hours: int = Field(default=1, ge=1, le=24 * 7)

    # Password policy (bcrypt only reads the first 72 bytes)
    password_min_length: int = Field(default=8, ge=1, le=72)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Storage; DATABASE_URL replaces the postgres_* parts entirely
    database_url: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "seedvault"

    # HTTP server
    api_host: str = "0.0.0.0"  # noqa: S104
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""

    log_level: str = "INFO"

    @field_validator("jwt_secret_key")
    @classmethod
    def _non_blank_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            msg = "JWT_SECRET_KEY must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL for the vault database."""
        if self.database_url:
            return self.database_url

        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def access_token_expire_seconds(self) -> int:
        return self.jwt_access_token_expire_hours * 3600


@lru_cache()
def get_settings() -> Settings:
    return Settings(_env_file=_env_file())  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
