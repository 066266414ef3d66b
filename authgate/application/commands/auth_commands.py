"""Authentication commands (write operations) and their results.

Commands represent caller intent to change credential state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- The session engine and user directory execute them and return Result types
"""

from dataclasses import dataclass
from uuid import UUID

from authgate.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class SignIn:
    """Authenticate a password and open a refresh session.

    Attributes:
        login: Login key (email).
        password: Plaintext password (never logged).

    Example:
        >>> command = SignIn(login="a@x.com", password="p")
        >>> result = await engine.sign_in(command)
    """

    login: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshSession:
    """Rotate a refresh session.

    Attributes:
        session_id: Identifier echoed back by the caller (None if absent).
        subject: User id the access guard authenticated.
    """

    session_id: str | None
    subject: UUID


@dataclass(frozen=True, kw_only=True)
class LogOut:
    """End a refresh session. Missing or unknown identifiers are fine."""

    session_id: str | None


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Create a user account.

    Attributes:
        name: Display name.
        email: Login key.
        password: Plaintext password, hashed before storage.
        role: Role to assign (self sign-up is restricted to USER).
    """

    name: str
    email: str
    password: str
    role: UserRole = UserRole.USER


@dataclass(frozen=True, kw_only=True)
class IssuedTokens:
    """Credentials handed to the transport after sign-in or refresh.

    Attributes:
        access_token: Short-lived JWT.
        refresh_token: Long-lived JWT, bound to session_id in the store.
        session_id: Opaque identifier the caller must echo back.
        user_id: Subject of both tokens.
        access_expires_in: Access token lifetime in seconds.
        refresh_expires_in: Refresh token and session lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    session_id: str
    user_id: UUID
    access_expires_in: int
    refresh_expires_in: int
