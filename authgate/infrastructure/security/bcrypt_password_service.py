"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Built by the container from Settings.bcrypt_rounds

Security:
    - Adaptive algorithm (cost factor can increase over time)
    - Random salt per hash
    - Constant-time verification

Performance:
    - Cost factor 12 = 2^12 iterations, ~250ms per hash/verify
    - Tests use the minimum cost (4) to stay fast
"""

import bcrypt

from authgate.core.enums import ErrorCode, InfrastructureErrorCode
from authgate.core.errors import HashingError
from authgate.core.result import Failure, Result, Success

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 31

# bcrypt only reads the first 72 bytes of a password; bcrypt 5 rejects longer input.
MAX_PASSWORD_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)

        match password_service.hash_password("SecurePass123!"):
            case Success(value=digest):
                ...
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Higher values = more secure but slower.

        Raises:
            ValueError: If cost_factor is outside what bcrypt accepts.

        Note:
            Cost factor is logarithmic: each +1 doubles computation time.
            - 10 = ~60ms
            - 12 = ~250ms (current recommendation)
            - 14 = ~1000ms
        """
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = f"Cost factor must be between {MIN_COST_FACTOR} and {MAX_COST_FACTOR}"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> Result[str, HashingError]:
        """Hash a plaintext password using bcrypt.

        Returns:
            Success with the digest (bcrypt format: $2b$<cost>$..., 60 chars),
            or Failure(HashingError) if bcrypt rejects the input.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> first = service.hash_password("SecurePass123!")
            >>> second = service.hash_password("SecurePass123!")
            >>> first.value != second.value  # Different salts
            True
        """
        try:
            salt = bcrypt.gensalt(rounds=self._cost_factor)
            password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        except (ValueError, TypeError) as e:
            return Failure(
                error=HashingError(
                    code=ErrorCode.HASHING_ERROR,
                    infrastructure_code=InfrastructureErrorCode.PASSWORD_HASH_FAILED,
                    message="Password hashing failed",
                    details={"type": type(e).__name__},
                )
            )

        # bcrypt returns bytes
        return Success(value=password_hash.decode("utf-8"))

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, HashingError]:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            Success(True) if the password matches, Success(False) on a
            legitimate mismatch, Failure(HashingError) if the stored digest
            is not a bcrypt hash.

        Note:
            - bcrypt.checkpw does constant-time comparison
            - A malformed digest is a data problem, not a wrong password
        """
        secret = password.encode("utf-8")
        if len(secret) > MAX_PASSWORD_BYTES:
            # No stored password can be this long, so it cannot match
            return Success(value=False)

        try:
            matches = bcrypt.checkpw(secret, password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError) as e:
            return Failure(
                error=HashingError(
                    code=ErrorCode.HASHING_ERROR,
                    infrastructure_code=InfrastructureErrorCode.PASSWORD_HASH_MALFORMED,
                    message="Stored password hash is malformed",
                    details={"type": type(e).__name__},
                )
            )
        return Success(value=matches)
