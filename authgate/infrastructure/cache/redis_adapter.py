"""Redis adapter implementing CacheProtocol.

This adapter provides Redis-specific implementation of the cache protocol
defined in the domain layer. It wraps the Redis client and handles all
Redis-specific operations and error mapping.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Every call is bounded by a timeout; expiry is reported as CacheError
- Maps Redis exceptions to CacheError with ErrorCode.STORE_ERROR
- Returns Result types for all operations
"""

import asyncio
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from authgate.core.enums import ErrorCode, InfrastructureErrorCode
from authgate.core.errors import CacheError
from authgate.core.result import Failure, Result, Success


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    key: str | None,
    error: BaseException,
) -> CacheError:
    details: dict[str, Any] = {"error": str(error), "type": type(error).__name__}
    if key is not None:
        details["key"] = key
    return CacheError(
        code=ErrorCode.STORE_ERROR,
        infrastructure_code=infrastructure_code,
        message=message,
        details=details,
    )


def _decode(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _timeout: Seconds allowed for any single operation.
    """

    def __init__(self, redis_client: Redis, timeout_seconds: float = 2.0) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
            timeout_seconds: Upper bound for each Redis call.
        """
        self._redis = redis_client
        self._timeout = timeout_seconds

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            async with asyncio.timeout(self._timeout):
                value = await self._redis.get(key)
        except TimeoutError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_TIMEOUT,
                    "Cache get timed out",
                    key,
                    e,
                )
            )
        except RedisConnectionError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Cache is unreachable",
                    key,
                    e,
                )
            )
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_GET_ERROR,
                    "Failed to get key from cache",
                    key,
                    e,
                )
            )
        if value is None:
            return Success(value=None)
        return Success(value=_decode(value))

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis.

        Uses a single SET ... EX command so the value and its expiry are
        written atomically.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).
        """
        try:
            async with asyncio.timeout(self._timeout):
                await self._redis.set(key, value, ex=ttl)
        except TimeoutError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_TIMEOUT,
                    "Cache set timed out",
                    key,
                    e,
                )
            )
        except RedisConnectionError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Cache is unreachable",
                    key,
                    e,
                )
            )
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_SET_ERROR,
                    "Failed to set key in cache",
                    key,
                    e,
                )
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if key was deleted, False if it did not exist.
        """
        try:
            async with asyncio.timeout(self._timeout):
                deleted = await self._redis.delete(key)
        except TimeoutError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_TIMEOUT,
                    "Cache delete timed out",
                    key,
                    e,
                )
            )
        except RedisConnectionError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Cache is unreachable",
                    key,
                    e,
                )
            )
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    "Failed to delete key from cache",
                    key,
                    e,
                )
            )
        return Success(value=bool(deleted))

    async def get_and_delete(self, key: str) -> Result[str | None, CacheError]:
        """Atomically get and remove a key (Redis GETDEL).

        Returns:
            Result with the value the key held, None if absent, or CacheError.
        """
        try:
            async with asyncio.timeout(self._timeout):
                value = await self._redis.getdel(key)
        except TimeoutError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_TIMEOUT,
                    "Cache get-and-delete timed out",
                    key,
                    e,
                )
            )
        except RedisConnectionError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Cache is unreachable",
                    key,
                    e,
                )
            )
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR,
                    "Failed to get-and-delete key from cache",
                    key,
                    e,
                )
            )
        if value is None:
            return Success(value=None)
        return Success(value=_decode(value))

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity.

        Returns:
            Result with True if connected, or CacheError.
        """
        try:
            async with asyncio.timeout(self._timeout):
                await self._redis.ping()
        except TimeoutError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_TIMEOUT,
                    "Cache ping timed out",
                    None,
                    e,
                )
            )
        except RedisError as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                    "Cache is unreachable",
                    None,
                    e,
                )
            )
        return Success(value=True)
