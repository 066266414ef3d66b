"""Shared pytest fixtures.

- Settings are built explicitly (no .env, no environment leakage)
- Redis is replaced by fakeredis; nothing talks to a real server
- bcrypt runs at the minimum cost factor so tests stay fast
"""

from collections.abc import AsyncIterator
from unittest.mock import Mock

import pytest
import pytest_asyncio
from fakeredis.aioredis import FakeRedis
from uuid_extensions import uuid7

from authgate.core.config import Settings
from authgate.core.enums import Environment
from authgate.domain.entities import User
from authgate.domain.enums import UserRole
from authgate.infrastructure.security import BcryptPasswordService

ACCESS_SECRET = "access-secret-for-tests-0123456789abcdef"
REFRESH_SECRET = "refresh-secret-for-tests-0123456789abcdef"


def build_settings(**overrides) -> Settings:
    values = {
        "environment": Environment.TESTING,
        "access_token_secret": ACCESS_SECRET,
        "refresh_token_secret": REFRESH_SECRET,
        "bcrypt_rounds": 4,
        "log_json": True,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return build_settings()


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double satisfying LoggerProtocol."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def fake_redis() -> AsyncIterator[FakeRedis]:
    client = FakeRedis()
    yield client
    await client.flushall()
    await client.aclose()


def make_user(
    password_service: BcryptPasswordService,
    *,
    email: str = "a@x.com",
    password: str = "p",
    role: UserRole = UserRole.USER,
    name: str = "Test User",
) -> User:
    """Build a User whose stored hash matches password."""
    return User(
        id=uuid7(),
        name=name,
        email=email,
        password_hash=password_service.hash_password(password).value,
        role=role,
    )
