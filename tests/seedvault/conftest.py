"""
Pytest configuration for seedvault (vault domain) tests.

Re-exports the shared database and API fixtures so unit, integration and
API tests below this directory can use them.
"""

from tests.shared.fixtures.api import (  # noqa: F401
    alice,
    api_app,
    api_settings,
    api_v1_prefix,
    bob,
    client,
    expired_headers,
    jwt_service,
)
from tests.shared.fixtures.database import (  # noqa: F401
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)
