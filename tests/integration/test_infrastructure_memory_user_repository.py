"""Integration tests for InMemoryUserRepository."""

import pytest
from uuid_extensions import uuid7

from authgate.domain.entities import User
from authgate.infrastructure.persistence import InMemoryUserRepository


def _user(email: str) -> User:
    return User(id=uuid7(), name=email.split("@")[0], email=email, password_hash="h")


@pytest.mark.integration
class TestInMemoryUserRepository:
    async def test_find_by_id_and_email(self):
        user = _user("ada@example.com")
        repo = InMemoryUserRepository([user])

        assert await repo.find_by_id(user.id) is user
        assert await repo.find_by_email("ADA@example.com ") is user
        assert await repo.find_by_email("nobody@example.com") is None
        assert await repo.find_by_id(uuid7()) is None

    async def test_add_rejects_duplicate_email(self):
        repo = InMemoryUserRepository()
        await repo.add(_user("ada@example.com"))

        with pytest.raises(ValueError, match="already exists"):
            await repo.add(_user("Ada@Example.com"))

    async def test_list_page_is_insertion_ordered(self):
        users = [_user(f"u{i}@example.com") for i in range(5)]
        repo = InMemoryUserRepository(users)

        assert await repo.list_page(0, 2) == users[:2]
        assert await repo.list_page(2, 2) == users[2:4]
        assert await repo.list_page(4, 2) == users[4:]
        assert await repo.list_page(10, 2) == []
        assert await repo.count() == 5

    async def test_list_page_invalid_bounds(self):
        repo = InMemoryUserRepository([_user("a@example.com")])

        assert await repo.list_page(-1, 2) == []
        assert await repo.list_page(0, 0) == []
