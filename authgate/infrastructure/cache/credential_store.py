"""Redis implementation of CredentialStoreProtocol.

Key Patterns:
    - {prefix}:refresh_session:{session_id} -> JSON serialized SessionRecord

Architecture:
    - Implements CredentialStoreProtocol (structural typing)
    - Uses RedisAdapter (CacheProtocol) for low-level operations
    - Expiry is delegated to Redis TTLs; nothing polls for stale records
    - Store failures propagate as CacheError (fail closed, never fail open)
"""

import json
from datetime import timedelta
from typing import Any

from authgate.core.errors import DomainError
from authgate.core.result import Failure, Result, Success
from authgate.domain.entities import SessionRecord
from authgate.domain.protocols import CacheProtocol, LoggerProtocol
from authgate.infrastructure.cache.cache_keys import CacheKeys


class RedisCredentialStore:
    """Session record store on top of a key-value cache.

    Note: Does NOT inherit from CredentialStoreProtocol (uses structural typing).

    Attributes:
        _cache: Cache adapter for Redis operations.
        _keys: Key builder.
        _logger: Structured logger.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        keys: CacheKeys,
        logger: LoggerProtocol,
    ) -> None:
        self._cache = cache
        self._keys = keys
        self._logger = logger

    async def save(
        self, record: SessionRecord, ttl: timedelta
    ) -> Result[None, DomainError]:
        """Upsert a record, expiring after ttl.

        Args:
            record: Session record to store under record.session_id.
            ttl: Lifetime of the entry (the refresh token lifetime).

        Returns:
            Success(None), or Failure(CacheError).
        """
        ttl_seconds = max(1, int(ttl.total_seconds()))
        result = await self._cache.set(
            self._keys.refresh_session(record.session_id),
            json.dumps(record.to_dict()),
            ttl=ttl_seconds,
        )
        if isinstance(result, Failure):
            self._log_store_failure("save", result.error)
        return result

    async def get(self, session_id: str) -> Result[SessionRecord | None, DomainError]:
        """Look up a record.

        Returns:
            Success(record), Success(None) on a miss, or Failure(CacheError).
        """
        key = self._keys.refresh_session(session_id)
        result = await self._cache.get(key)

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                record = self._parse(raw)
                if record is None:
                    # Unreadable entries can never be used; drop them.
                    await self._cache.delete(key)
                return Success(value=record)
            case Failure(error=error):
                self._log_store_failure("get", error)
                return Failure(error=error)

    async def delete(self, session_id: str) -> Result[None, DomainError]:
        """Remove a record. Missing identifiers are not an error."""
        result = await self._cache.delete(self._keys.refresh_session(session_id))

        match result:
            case Success():
                return Success(value=None)
            case Failure(error=error):
                self._log_store_failure("delete", error)
                return Failure(error=error)

    async def take(self, session_id: str) -> Result[SessionRecord | None, DomainError]:
        """Atomically fetch and remove a record (GETDEL).

        Concurrent callers presenting the same identifier race on a single
        Redis command, so exactly one of them sees the record.
        """
        result = await self._cache.get_and_delete(
            self._keys.refresh_session(session_id)
        )

        match result:
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                return Success(value=self._parse(raw))
            case Failure(error=error):
                self._log_store_failure("take", error)
                return Failure(error=error)

    def _parse(self, raw: str) -> SessionRecord | None:
        try:
            data: Any = json.loads(raw)
            return SessionRecord.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "session_record_unreadable",
                key_prefix=self._keys.prefix,
                error_type=type(e).__name__,
            )
            return None

    def _log_store_failure(self, operation: str, error: DomainError) -> None:
        infrastructure_code = getattr(error, "infrastructure_code", None)
        self._logger.warning(
            "credential_store_failed",
            operation=operation,
            key_prefix=self._keys.prefix,
            infrastructure_code=(
                infrastructure_code.value if infrastructure_code else None
            ),
        )
