"""Base error class for railway-oriented error handling.

DomainError is the base class for ALL errors the service produces. Errors
flow through the system as data inside Failure results, never as raised
exceptions, so wire formatting stays decoupled from classification.

Usage:
    from authgate.core.errors import SessionError
    from authgate.core.enums import ErrorCode

    return Failure(
        error=SessionError(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found, please sign in again",
        )
    )
"""

from dataclasses import dataclass
from typing import Any

from authgate.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error kind.
        message: Human-readable message, safe to show to callers.
        details: Optional context for logs (never contains secrets).
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    @property
    def is_internal(self) -> bool:
        """True when the failure belongs to a collaborator, not the caller."""
        return self.code.is_internal

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
