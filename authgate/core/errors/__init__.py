"""Core errors package.

Usage:
    from authgate.core.errors import DomainError, SessionError, CacheError
"""

from authgate.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    CacheError,
    ConflictError,
    HashingError,
    InfrastructureError,
    IssueError,
    SessionError,
    TokenError,
    ValidationError,
)
from authgate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "SessionError",
    "TokenError",
    "ConflictError",
    "InfrastructureError",
    "CacheError",
    "HashingError",
    "IssueError",
]
