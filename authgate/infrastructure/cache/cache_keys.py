"""Cache key construction utilities.

All credential store keys follow the pattern: {prefix}:{resource}:{id}

Usage:
    keys = CacheKeys(prefix=settings.cache_key_prefix)
    keys.refresh_session(session_id)  # "auth:refresh_session:{session_id}"
"""

from dataclasses import dataclass


@dataclass
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Cache key prefix (typically "auth").
    """

    prefix: str

    def refresh_session(self, session_id: str) -> str:
        """Refresh session record key.

        Pattern: {prefix}:refresh_session:{session_id}
        """
        return f"{self.prefix}:refresh_session:{session_id}"
