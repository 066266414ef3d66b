"""User directory: sign-up and read access to the user store.

Sits beside the session engine, not inside it: the engine never writes users.
"""

from email_validator import EmailNotValidError, validate_email
from uuid_extensions import uuid7

from authgate.application.commands import RegisterUser
from authgate.core.enums import ErrorCode
from authgate.core.errors import ConflictError, DomainError, ValidationError
from authgate.core.result import Failure, Result, Success
from authgate.domain.entities import User
from authgate.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt ignores anything beyond this
MAX_PAGE_SIZE = 100


class UserDirectory:
    """Registers and lists users."""

    def __init__(
        self,
        *,
        users: UserRepository,
        passwords: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._users = users
        self._passwords = passwords
        self._logger = logger

    async def register(self, cmd: RegisterUser) -> Result[User, DomainError]:
        """Create a user.

        Flow:
        1. Validate name, email and password
        2. Reject a taken email (USER_ALREADY_EXISTS)
        3. Hash the password
        4. Add the user to the store

        Returns:
            Success(User), or Failure with VALIDATION_FAILED,
            USER_ALREADY_EXISTS or HASHING_ERROR.
        """
        # Step 1: Validate
        name = cmd.name.strip()
        if not name:
            return Failure(error=_invalid("name", "Name is required"))
        try:
            email = validate_email(cmd.email, check_deliverability=False).normalized
        except EmailNotValidError as e:
            return Failure(error=_invalid("email", str(e)))
        email = email.lower()
        if len(cmd.password) < MIN_PASSWORD_LENGTH:
            return Failure(
                error=_invalid(
                    "password",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                )
            )
        if len(cmd.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return Failure(
                error=_invalid(
                    "password",
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
                )
            )

        # Step 2: Uniqueness
        if await self._users.find_by_email(email) is not None:
            return Failure(error=_already_exists())

        # Step 3: Hash
        hashed = self._passwords.hash_password(cmd.password)
        if isinstance(hashed, Failure):
            self._logger.error("user_registration_failed", reason="hashing_failed")
            return Failure(error=hashed.error)

        # Step 4: Store
        user = User(
            id=uuid7(),
            name=name,
            email=email,
            password_hash=hashed.value,
            role=cmd.role,
        )
        try:
            await self._users.add(user)
        except ValueError:
            # Lost a race with a concurrent sign-up for the same email.
            return Failure(error=_already_exists())

        self._logger.info("user_registered", user_id=str(user.id), role=user.role.value)
        return Success(value=user)

    async def list_page(self, page: int, limit: int) -> Result[list[User], DomainError]:
        """Return one page of users (1-based page, 1 <= limit <= 100)."""
        if page < 1:
            return Failure(error=_invalid("page", "page must be >= 1"))
        if not 1 <= limit <= MAX_PAGE_SIZE:
            return Failure(
                error=_invalid("limit", f"limit must be between 1 and {MAX_PAGE_SIZE}")
            )
        users = await self._users.list_page((page - 1) * limit, limit)
        return Success(value=users)


def _invalid(field: str, message: str) -> ValidationError:
    return ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message=message,
        field=field,
    )


def _already_exists() -> ConflictError:
    return ConflictError(
        code=ErrorCode.USER_ALREADY_EXISTS,
        message="User with that email already exists",
        resource_type="user",
        conflicting_field="email",
    )
