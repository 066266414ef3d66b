"""Error classes used across all layers.

Caller-fault errors:
- ValidationError: malformed input, no state change
- AuthenticationError: invalid credentials or missing/invalid access token
- AuthorizationError: authenticated but role not allowed
- SessionError: refresh/logout without a matching session
- TokenError: token verification failure (expired, bad signature, malformed)
- ConflictError: resource already exists

Infrastructure errors (ErrorCode.is_internal is True):
- InfrastructureError and its subclasses CacheError, HashingError, IssueError
"""

from dataclasses import dataclass

from authgate.core.enums import InfrastructureErrorCode
from authgate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Sign-in or access token authentication failure."""


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authenticated caller lacks an allowed role.

    Attributes:
        required_roles: Roles that would have been accepted.
    """

    required_roles: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionError(DomainError):
    """Refresh or logout presented no usable session identifier."""


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Signed token could not be verified."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate email on sign-up).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Failure in an external collaborator.

    Attributes:
        infrastructure_code: Low-level cause, for logs only.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Credential store (Redis) failure or timeout."""


@dataclass(frozen=True, slots=True, kw_only=True)
class HashingError(InfrastructureError):
    """Password hashing failure or malformed stored digest."""


@dataclass(frozen=True, slots=True, kw_only=True)
class IssueError(InfrastructureError):
    """Token signing failure."""
