"""Pytest configuration.

Environment variables are set before any review_identity import so that
Settings (loaded once per process) picks up the test configuration:
in-memory SQLite, a fixed signing key, cheap bcrypt and no SMTP (the
container then wires the in-memory stub mail sender).
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("SMTP_USERNAME", "")
os.environ.setdefault("SMTP_PASSWORD", "")
os.environ.setdefault("VERIFICATION_URL_BASE", "http://reviews.test")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from review_identity.infrastructure.persistence.database import Database  # noqa: E402
from review_identity.infrastructure.security import BcryptPasswordService  # noqa: E402


@pytest_asyncio.fixture
async def test_database():
    """Fresh in-memory SQLite database with all tables, per test."""
    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Session on the per-test database."""
    async with test_database.get_session() as session:
        yield session


@pytest.fixture
def mock_logger():
    """LoggerProtocol double; assert on calls with assert_any_call."""
    return Mock()


@pytest.fixture(scope="session")
def password_service():
    """Real bcrypt at the lowest accepted cost."""
    return BcryptPasswordService(cost_factor=10)
