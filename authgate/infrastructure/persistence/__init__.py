"""User store adapters."""

from authgate.infrastructure.persistence.memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
