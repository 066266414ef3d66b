"""API test fixtures: the real app factory over fakeredis and an in-memory user store."""

from collections.abc import Iterator

import pytest
from fakeredis.aioredis import FakeRedis
from fastapi import FastAPI
from fastapi.testclient import TestClient

from authgate.container import Container, build_container
from authgate.domain.entities import User
from authgate.domain.enums import UserRole
from authgate.infrastructure.persistence import InMemoryUserRepository
from authgate.main import create_app
from tests.conftest import make_user


@pytest.fixture
def alice(password_service) -> User:
    return make_user(password_service, email="a@x.com", password="p")


@pytest.fixture
def admin(password_service) -> User:
    return make_user(
        password_service, email="admin@x.com", password="admin-pass", role=UserRole.ADMIN
    )


@pytest.fixture
def moderator(password_service) -> User:
    return make_user(
        password_service, email="mod@x.com", password="mod-pass", role=UserRole.MODERATOR
    )


@pytest.fixture
def container(settings, mock_logger, alice, admin, moderator) -> Container:
    return build_container(
        settings,
        redis_client=FakeRedis(),
        users=InMemoryUserRepository([alice, admin, moderator]),
        logger=mock_logger,
    )


@pytest.fixture
def app(container) -> FastAPI:
    return create_app(container=container)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


def sign_in(client: TestClient, email: str, password: str) -> dict:
    response = client.post("/sign-in", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
