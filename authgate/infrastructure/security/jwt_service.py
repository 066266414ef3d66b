"""JWT token service (adapter).

This service implements the TokenCodecProtocol using PyJWT with HMAC-SHA256.
One instance is built per token class: the access codec and the refresh codec
hold different secrets and lifetimes and stamp a distinct `typ` claim, so a
token minted by one never verifies with the other.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token

Performance:
    - Stateless validation (no store lookup)
    - Replay protection for refresh tokens lives in the session engine
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import (
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
    PyJWTError,
)
from uuid_extensions import uuid7

from authgate.core.enums import ErrorCode, InfrastructureErrorCode
from authgate.core.errors import DomainError, IssueError, TokenError
from authgate.core.result import Failure, Result, Success

MIN_SECRET_BYTES = 32


class JWTService:
    """JWT token generation and validation service.

    Usage:
        access_codec = JWTService(
            secret_key=settings.access_token_secret,
            lifetime=settings.access_token_ttl,
            token_type="access",
        )

        match access_codec.issue(str(user.id)):
            case Success(value=token):
                ...

        match access_codec.verify(token):
            case Success(value=subject):
                ...
            case Failure(error=error):
                # error.code: TOKEN_EXPIRED | TOKEN_INVALID_SIGNATURE | TOKEN_MALFORMED
                ...
    """

    def __init__(
        self,
        secret_key: str,
        lifetime: timedelta,
        token_type: str = "access",
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            lifetime: Token lifetime applied at issue time.
            token_type: Value of the `typ` claim ("access" or "refresh").
            algorithm: JWS algorithm (default HS256).

        Raises:
            ValueError: If secret_key is too short or lifetime is not positive.
        """
        if len(secret_key) < MIN_SECRET_BYTES:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if lifetime <= timedelta(0):
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = lifetime
        self._token_type = token_type
        self._algorithm = algorithm

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    @property
    def token_type(self) -> str:
        return self._token_type

    def issue(self, subject: str) -> Result[str, IssueError]:
        """Generate a signed token for subject.

        Returns:
            Success with the JWT (header.payload.signature), or
            Failure(IssueError) if signing fails.

        Note:
            - Each call creates a unique jti, so two tokens minted in the
              same second still differ
        """
        now = datetime.now(UTC)
        expires_at = now + self._lifetime

        payload = {
            "sub": subject,  # Subject (user ID)
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expires_at.timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
            "typ": self._token_type,
        }

        try:
            token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except (PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            return Failure(
                error=IssueError(
                    code=ErrorCode.ISSUE_ERROR,
                    infrastructure_code=InfrastructureErrorCode.TOKEN_SIGNING_FAILED,
                    message="Failed to sign token",
                    details={"type": type(e).__name__, "token_type": self._token_type},
                )
            )
        return Success(value=token)

    def verify(self, token: str) -> Result[str, DomainError]:
        """Validate a token and extract its subject.

        Returns:
            Success with the subject, or Failure(TokenError).

        Note:
            - PyJWT validates signature and exp; sub/exp/iat are required
            - A token of the other class (wrong typ) is reported as malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token has expired",
                )
            )
        except InvalidSignatureError:
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_INVALID_SIGNATURE,
                    message="Token signature is invalid",
                )
            )
        except InvalidTokenError:
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_MALFORMED,
                    message="Token is malformed",
                )
            )

        if payload.get("typ") != self._token_type:
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_MALFORMED,
                    message="Token is malformed",
                    details={"reason": "unexpected token type"},
                )
            )

        return Success(value=str(payload["sub"]))
