"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure layer provides concrete implementations (bcrypt).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol

from authgate.core.errors import DomainError
from authgate.core.result import Result


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        match password_service.verify_password("p", user.password_hash):
            case Success(value=True):
                ...  # matches
            case Success(value=False):
                ...  # legitimate mismatch
            case Failure(error=error):
                ...  # stored digest is malformed
    """

    def hash_password(self, password: str) -> Result[str, DomainError]:
        """Hash a plaintext password.

        Returns:
            Success with the digest ($2b$...), or Failure(HashingError).

        Note:
            - Same password produces different hashes (random salt)
        """
        ...

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, DomainError]:
        """Verify a plaintext password against a hash.

        Returns:
            Success(True) on match, Success(False) on mismatch,
            Failure(HashingError) only when the digest is malformed.

        Note:
            - Constant-time comparison (prevents timing attacks)
        """
        ...
