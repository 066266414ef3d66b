"""Token codec protocol.

Creates and verifies signed, expiring tokens carrying a subject identifier.
One codec instance exists per token class (access, refresh), each with its
own secret and lifetime, so a token of one class never verifies as the other.
"""

from datetime import timedelta
from typing import Protocol

from authgate.core.errors import DomainError
from authgate.core.result import Result


class TokenCodecProtocol(Protocol):
    """Sign and verify subject-bearing tokens."""

    @property
    def lifetime(self) -> timedelta:
        """Lifetime applied to every token this codec issues."""
        ...

    def issue(self, subject: str) -> Result[str, DomainError]:
        """Encode {subject, issued-at, expires-at} and sign it.

        Returns:
            Success with the encoded token, or Failure(IssueError).
        """
        ...

    def verify(self, token: str) -> Result[str, DomainError]:
        """Verify signature and expiry, returning the subject.

        Returns:
            Success with the subject, or Failure(TokenError) whose code is
            TOKEN_EXPIRED, TOKEN_INVALID_SIGNATURE or TOKEN_MALFORMED.
        """
        ...
