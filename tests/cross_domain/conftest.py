"""
Pytest configuration for cross-domain tests.

These tests span multiple bounded contexts (seedvault + seedvault_identity)
and exercise them through the HTTP API.
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
    pg_engine,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)
