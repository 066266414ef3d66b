"""Error kinds (machine-readable) for every credential lifecycle failure.

Categories:
- Caller faults: validation, credentials, authentication, authorization,
  session lookups, token verification, conflicts.
- Infrastructure faults: store, hashing, token issuance. These are the only
  kinds that `is_internal` reports, so transports can choose retry-safe
  status codes without inspecting messages.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error kinds carried by every DomainError."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"

    # Authorization errors
    FORBIDDEN = "forbidden"

    # Session errors
    MISSING_SESSION = "missing_session"
    SESSION_NOT_FOUND = "session_not_found"

    # Token verification errors
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID_SIGNATURE = "token_invalid_signature"
    TOKEN_MALFORMED = "token_malformed"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"

    # Infrastructure errors
    STORE_ERROR = "store_error"
    HASHING_ERROR = "hashing_error"
    ISSUE_ERROR = "issue_error"

    @property
    def is_internal(self) -> bool:
        """Whether this kind reports a collaborator failure, not a caller fault."""
        return self in _INTERNAL_CODES


_INTERNAL_CODES = frozenset(
    {ErrorCode.STORE_ERROR, ErrorCode.HASHING_ERROR, ErrorCode.ISSUE_ERROR}
)
