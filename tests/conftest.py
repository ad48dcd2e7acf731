"""Root pytest configuration.

Most tests run on in-memory SQLite. Tests marked ``integration`` start a
PostgreSQL container and are skipped unless ``--run-integration`` is given
or ``RUN_INTEGRATION=1`` is set.

Layout:
    seedvault_auth/       token and hashing services
    seedvault_config/     settings loading
    seedvault_identity/   users, signup, login, profile
    seedvault/            secrets domain, commands, API, CLI
    cross_domain/         isolation, account deletion, full journeys
    shared/fixtures/      engines, seeded users, API client
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from seedvault_config import clear_settings_cache

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"

for env_file in (CONFIG_DIR / ".env.dev", CONFIG_DIR / ".env"):
    if env_file.exists():
        load_dotenv(env_file)
        break

# Settings() must load without any .env file; cheap bcrypt keeps tests fast
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key-for-pytest-only")
os.environ.setdefault("BCRYPT_ROUNDS", "4")


def _integration_enabled(config) -> bool:
    if config.getoption("--run-integration"):
        return True
    return os.environ.get("RUN_INTEGRATION", "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration (needs Docker)",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: needs a PostgreSQL container, skipped by default",
    )


def pytest_collection_modifyitems(config, items):
    if _integration_enabled(config):
        return

    skip = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session", autouse=True)
def fresh_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()
