"""User domain entity.

Owned by the user store collaborator. The session engine and access guard
only read `id`, `role` and `password_hash`; they never persist or mutate a
User.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from authgate.domain.enums import UserRole


@dataclass
class User:
    """User account.

    Attributes:
        id: Unique user identifier (UUIDv7).
        name: Display name.
        email: Login key, stored lowercased.
        password_hash: bcrypt digest (never plaintext).
        role: Role used by the access guard.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     name="Ada",
        ...     email="ada@example.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.has_role({UserRole.ADMIN})
        False
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    role: UserRole = UserRole.USER
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def has_role(self, allowed: set[UserRole] | frozenset[UserRole]) -> bool:
        """Return True if this user's role is in the allowed set."""
        return self.role in allowed
