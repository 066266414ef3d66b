"""Credential store protocol.

Maps a session identifier to its SessionRecord with a per-entry TTL. This is
a cache used for refresh-replay prevention, not a system of record: entries
disappear when their TTL elapses and may not survive a restart.
"""

from datetime import timedelta
from typing import Protocol

from authgate.core.errors import DomainError
from authgate.core.result import Result
from authgate.domain.entities import SessionRecord


class CredentialStoreProtocol(Protocol):
    """Session record storage keyed by session identifier.

    Implementations:
        - RedisCredentialStore: Redis SET EX / GET / DEL / GETDEL
    """

    async def save(
        self, record: SessionRecord, ttl: timedelta
    ) -> Result[None, DomainError]:
        """Upsert a record under record.session_id, expiring after ttl."""
        ...

    async def get(self, session_id: str) -> Result[SessionRecord | None, DomainError]:
        """Point lookup. A miss is Success(None), not an error."""
        ...

    async def delete(self, session_id: str) -> Result[None, DomainError]:
        """Remove a record. Deleting a missing identifier succeeds."""
        ...

    async def take(self, session_id: str) -> Result[SessionRecord | None, DomainError]:
        """Atomically look up and remove a record (compare-and-delete).

        Of several concurrent callers presenting the same identifier, exactly
        one receives the record; the others receive Success(None).
        """
        ...
