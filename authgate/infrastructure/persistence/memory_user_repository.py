"""In-memory implementation of the UserRepository protocol.

Used for development, tests and the bootstrap admin account. State lives for
the lifetime of the process only.
"""

import asyncio
from uuid import UUID

from authgate.domain.entities import User


class InMemoryUserRepository:
    """Process-local user store.

    Users are kept in insertion order so paging is stable. Emails are
    matched case-insensitively.

    Note: Does NOT inherit from UserRepository (uses structural typing).
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._by_id: dict[UUID, User] = {}
        self._id_by_email: dict[str, UUID] = {}
        self._lock = asyncio.Lock()
        for user in users or []:
            self._insert(user)

    async def find_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def find_by_email(self, email: str) -> User | None:
        user_id = self._id_by_email.get(email.strip().lower())
        if user_id is None:
            return None
        return self._by_id.get(user_id)

    async def list_page(self, offset: int, limit: int) -> list[User]:
        if offset < 0 or limit <= 0:
            return []
        return list(self._by_id.values())[offset : offset + limit]

    async def add(self, user: User) -> None:
        """Add a new user.

        Raises:
            ValueError: If the email or id is already taken.
        """
        async with self._lock:
            self._insert(user)

    async def count(self) -> int:
        return len(self._by_id)

    def _insert(self, user: User) -> None:
        email = user.email.strip().lower()
        if email in self._id_by_email:
            raise ValueError(f"User with email {email} already exists")
        if user.id in self._by_id:
            raise ValueError(f"User with id {user.id} already exists")
        self._by_id[user.id] = user
        self._id_by_email[email] = user.id
