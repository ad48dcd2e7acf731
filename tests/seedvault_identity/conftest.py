"""
Pytest configuration for seedvault_identity domain tests.

This conftest provides fixtures specific to the identity domain
(users, authentication, profile).
"""

import pytest

from seedvault_identity.domain.user import User
from tests.shared.fixtures.database import (  # noqa: F401
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

FAKE_HASH = "$2b$04$abcdefghijklmnopqrstuuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ012"


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return User.create("test@example.com", FAKE_HASH)
