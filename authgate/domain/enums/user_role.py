"""User roles for role-based access checks.

Roles are a flat set (no inheritance): the Access Guard performs a plain
membership test against the roles an operation allows.

Usage:
    from authgate.domain.enums import UserRole

    guard.authorize(user, {UserRole.ADMIN, UserRole.MODERATOR})
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str so values serialize directly into JSON responses.
    """

    USER = "user"
    """Default role for self-registered accounts."""

    MODERATOR = "moderator"
    """May list other users."""

    ADMIN = "admin"
    """Full access, including user listing."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['user', 'moderator', 'admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role."""
        return value in cls.values()
