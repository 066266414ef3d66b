"""Infrastructure-specific error codes.

Internal codes for tracking collaborator failures. They travel alongside the
domain ErrorCode on InfrastructureError and are only ever logged, never sent
to API consumers.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Low-level cause of an infrastructure failure."""

    # Cache errors
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_TIMEOUT = "cache_timeout"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"

    # Password hashing errors
    PASSWORD_HASH_FAILED = "password_hash_failed"
    PASSWORD_HASH_MALFORMED = "password_hash_malformed"

    # Token signing errors
    TOKEN_SIGNING_FAILED = "token_signing_failed"
