"""Access guard: authenticate an access token, then authorize by role.

Every protected operation runs `authenticate` first and, when the operation
is role-restricted, `authorize` with the resolved User. The User is returned
to the caller, which passes it on explicitly.
"""

from collections.abc import Collection
from uuid import UUID

from authgate.core.enums import ErrorCode
from authgate.core.errors import AuthenticationError, AuthorizationError, DomainError
from authgate.core.result import Failure, Result, Success
from authgate.domain.entities import User
from authgate.domain.enums import UserRole
from authgate.domain.protocols import LoggerProtocol, TokenCodecProtocol, UserRepository


class AccessGuard:
    """Authenticate callers and enforce role membership."""

    def __init__(
        self,
        *,
        access_codec: TokenCodecProtocol,
        users: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._access_codec = access_codec
        self._users = users
        self._logger = logger

    async def authenticate(self, access_token: str | None) -> Result[User, DomainError]:
        """Resolve the user behind an access token.

        Returns:
            Success(User), or Failure(AuthenticationError) with code
            UNAUTHENTICATED. The token failure kind (expired, bad signature,
            malformed) is kept in details for logs.
        """
        if not access_token:
            return Failure(error=_unauthenticated("Not authenticated"))

        verified = self._access_codec.verify(access_token)
        if isinstance(verified, Failure):
            reason = verified.error.code.value
            self._logger.info("access_token_rejected", reason=reason)
            return Failure(
                error=_unauthenticated("Invalid or expired access token", reason=reason)
            )

        subject = verified.value

        try:
            user_id = UUID(subject)
        except ValueError:
            return Failure(
                error=_unauthenticated(
                    "Invalid or expired access token",
                    reason=ErrorCode.TOKEN_MALFORMED.value,
                )
            )

        user = await self._users.find_by_id(user_id)
        if user is None:
            self._logger.info("access_token_subject_unknown", user_id=subject)
            return Failure(
                error=_unauthenticated("The user belonging to this token no longer exists")
            )
        return Success(value=user)

    def authorize(
        self, user: User, allowed_roles: Collection[UserRole]
    ) -> Result[None, AuthorizationError]:
        """Membership test of the user's role against allowed_roles."""
        if user.role in allowed_roles:
            return Success(value=None)

        required = tuple(sorted(role.value for role in allowed_roles))
        self._logger.warning(
            "forbidden",
            user_id=str(user.id),
            role=user.role.value,
            required_roles=list(required),
        )
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.FORBIDDEN,
                message="You are not allowed to access this resource",
                required_roles=required,
            )
        )


def _unauthenticated(message: str, reason: str | None = None) -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.UNAUTHENTICATED,
        message=message,
        details={"reason": reason} if reason else None,
    )
