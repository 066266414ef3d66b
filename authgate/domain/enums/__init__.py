"""Domain enums."""

from authgate.domain.enums.user_role import UserRole

__all__ = ["UserRole"]
