"""UserRepository protocol for the user store collaborator.

The session engine reads users through this port only. Listing and adding
are used by the user directory (sign-up and admin listing).
"""

from typing import Protocol
from uuid import UUID

from authgate.domain.entities import User


class UserRepository(Protocol):
    """User store interface.

    Example:
        >>> class InMemoryUserRepository:
        ...     async def find_by_email(self, email: str) -> User | None:
        ...         ...
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID. Returns None if not found."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by login key (email, case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def list_page(self, offset: int, limit: int) -> list[User]:
        """Return up to `limit` users starting at `offset`, oldest first."""
        ...

    async def add(self, user: User) -> None:
        """Add a new user.

        Raises:
            ValueError: If the email is already taken.
        """
        ...
