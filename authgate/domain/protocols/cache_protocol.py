"""Cache protocol for domain layer.

This module defines the key-value cache interface the credential store needs,
without knowing about any specific implementation. Infrastructure adapters
implement this protocol to provide caching functionality.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types
- Absence of a key is a normal outcome (Success(None)), never an error
"""

from typing import Protocol

from authgate.core.errors import DomainError
from authgate.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the credential store needs from a cache."""

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Returns:
            Result with value if found, None if not found, or CacheError.

        Example:
            result = await cache.get("auth:refresh_session:abc")
            match result:
                case Success(value=value) if value:
                    # Key found
                    data = json.loads(value)
                case Success(value=None):
                    # Key not found (cache miss)
                    pass
                case Failure(error=error):
                    ...
        """
        ...

    async def set(
        self, key: str, value: str, ttl: int | None = None
    ) -> Result[None, DomainError]:
        """Set value in cache, overwriting any existing value.

        Args:
            key: Cache key.
            value: Value to store.
            ttl: Time to live in seconds (None = no expiration).
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key. Returns True if a key was removed, False if absent."""
        ...

    async def get_and_delete(self, key: str) -> Result[str | None, DomainError]:
        """Atomically read and remove a key.

        At most one of any number of concurrent callers observes the value.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity."""
        ...
