"""Cache infrastructure: Redis adapter and credential store."""

from authgate.infrastructure.cache.cache_keys import CacheKeys
from authgate.infrastructure.cache.credential_store import RedisCredentialStore
from authgate.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["CacheKeys", "RedisAdapter", "RedisCredentialStore"]
