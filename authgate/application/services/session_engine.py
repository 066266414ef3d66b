"""Session engine: sign-in, refresh rotation and logout.

Session identifier lifecycle:
    absent -> active -> (rotated | revoked | expired) -> absent

Flow (sign-in):
1. Look up user by login key
2. Verify password (unknown user and wrong password look the same)
3. Mint access and refresh tokens
4. Generate a new session identifier
5. Save {session_id -> subject, refresh token} with TTL = refresh lifetime
6. Return tokens and session identifier

Flow (refresh):
1. Reject a request with no session identifier (MISSING_SESSION)
2-3. Atomically fetch-and-delete the record; a miss is SESSION_NOT_FOUND
4. Mint new tokens for the subject
5. Save the new record under a new identifier
6. Return new tokens and identifier

Architecture:
- Application layer ONLY imports from domain and core
- Collaborators are injected as protocols
- Never retries; every failure is returned as a typed Result
"""

import secrets
from collections.abc import Callable
from uuid import UUID

from authgate.application.commands import IssuedTokens, LogOut, RefreshSession, SignIn
from authgate.core.enums import ErrorCode
from authgate.core.errors import (
    AuthenticationError,
    DomainError,
    SessionError,
    ValidationError,
)
from authgate.core.result import Failure, Result, Success
from authgate.domain.entities import SessionRecord
from authgate.domain.protocols import (
    CredentialStoreProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenCodecProtocol,
    UserRepository,
)

SESSION_ID_BYTES = 32


def new_session_id() -> str:
    """Return an opaque, unguessable session identifier (256 bits)."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class SessionEngine:
    """Orchestrates the credential lifecycle.

    Dependencies:
        users: User store (read-only here).
        passwords: Password verifier.
        access_codec: Token codec for access tokens.
        refresh_codec: Token codec for refresh tokens (distinct secret).
        store: Credential store holding live session records.
        logger: Structured logger.
        session_id_factory: Identifier generator (overridable in tests).
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        passwords: PasswordHashingProtocol,
        access_codec: TokenCodecProtocol,
        refresh_codec: TokenCodecProtocol,
        store: CredentialStoreProtocol,
        logger: LoggerProtocol,
        session_id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        self._users = users
        self._passwords = passwords
        self._access_codec = access_codec
        self._refresh_codec = refresh_codec
        self._store = store
        self._logger = logger
        self._new_session_id = session_id_factory
        self._decoy_digest: str | None = None

    async def sign_in(self, cmd: SignIn) -> Result[IssuedTokens, DomainError]:
        """Authenticate a password and open a new session.

        Returns:
            Success(IssuedTokens), or Failure with VALIDATION_FAILED,
            INVALID_CREDENTIALS or an infrastructure kind.

        Side Effects:
            - Saves one SessionRecord on success; none on any failure.
        """
        if not cmd.login.strip() or not cmd.password:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Login and password are required",
                    field="login" if not cmd.login.strip() else "password",
                )
            )

        # Step 1: Look up user
        user = await self._users.find_by_email(cmd.login)
        if user is None:
            # Spend the same bcrypt work as a real password mismatch
            decoy = self._decoy_password_hash()
            if decoy is not None:
                self._passwords.verify_password(cmd.password, decoy)
            self._logger.info("sign_in_failed", reason="unknown_login")
            return Failure(error=self._invalid_credentials())

        # Step 2: Verify password
        match self._passwords.verify_password(cmd.password, user.password_hash):
            case Failure(error=error):
                self._logger.error(
                    "sign_in_failed",
                    reason="password_hash_unusable",
                    user_id=str(user.id),
                )
                return Failure(error=error)
            case Success(value=False):
                self._logger.info(
                    "sign_in_failed", reason="password_mismatch", user_id=str(user.id)
                )
                return Failure(error=self._invalid_credentials())
            case _:
                pass

        # Steps 3-6: Mint, persist, return
        result = await self._open_session(user.id)
        if isinstance(result, Success):
            self._logger.info("sign_in_succeeded", user_id=str(user.id))
        return result

    async def refresh(self, cmd: RefreshSession) -> Result[IssuedTokens, DomainError]:
        """Rotate the presented session identifier.

        The old record is removed before new tokens are minted. Removal and
        lookup are one atomic store operation, so of two concurrent refreshes
        with the same identifier exactly one succeeds; the other sees
        SESSION_NOT_FOUND and must not retry.

        Returns:
            Success(IssuedTokens) with a new session identifier, or Failure
            with MISSING_SESSION, SESSION_NOT_FOUND or an infrastructure kind.
        """
        # Step 1: Session identifier presented?
        if not cmd.session_id:
            return Failure(
                error=SessionError(
                    code=ErrorCode.MISSING_SESSION,
                    message="Session identifier is missing",
                )
            )

        # Steps 2-3: Look up and invalidate in one step
        match await self._store.take(cmd.session_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                self._logger.info("session_not_found", user_id=str(cmd.subject))
                return Failure(error=self._session_not_found())
            case Success(value=record) if record.user_id != cmd.subject:
                self._logger.warning(
                    "session_subject_mismatch",
                    user_id=str(cmd.subject),
                    session_user_id=str(record.user_id),
                )
                return Failure(error=self._session_not_found())
            case _:
                pass

        # Steps 4-6: Mint, persist under a new identifier, return
        result = await self._open_session(cmd.subject)
        if isinstance(result, Success):
            self._logger.info("session_rotated", user_id=str(cmd.subject))
        return result

    async def log_out(self, cmd: LogOut) -> Result[None, DomainError]:
        """Remove the session record, if any.

        Always succeeds from the caller's perspective: an absent identifier
        and an unknown one both leave the desired end state. A store failure
        is logged and swallowed for the same reason; the record still
        expires with its TTL.
        """
        if not cmd.session_id:
            return Success(value=None)

        result = await self._store.delete(cmd.session_id)
        if isinstance(result, Failure):
            self._logger.warning(
                "logout_store_delete_failed", error_code=result.error.code.value
            )
        else:
            self._logger.info("logged_out")
        return Success(value=None)

    async def _open_session(self, user_id: UUID) -> Result[IssuedTokens, DomainError]:
        subject = str(user_id)

        access = self._access_codec.issue(subject)
        if isinstance(access, Failure):
            self._logger.error("token_issue_failed", token_type="access")
            return Failure(error=access.error)

        refresh = self._refresh_codec.issue(subject)
        if isinstance(refresh, Failure):
            self._logger.error("token_issue_failed", token_type="refresh")
            return Failure(error=refresh.error)

        access_token = access.value
        refresh_token = refresh.value

        record = SessionRecord(
            session_id=self._new_session_id(),
            user_id=user_id,
            refresh_token=refresh_token,
        )
        refresh_lifetime = self._refresh_codec.lifetime
        saved = await self._store.save(record, refresh_lifetime)
        if isinstance(saved, Failure):
            return Failure(error=saved.error)

        return Success(
            value=IssuedTokens(
                access_token=access_token,
                refresh_token=refresh_token,
                session_id=record.session_id,
                user_id=user_id,
                access_expires_in=int(self._access_codec.lifetime.total_seconds()),
                refresh_expires_in=int(refresh_lifetime.total_seconds()),
            )
        )

    def _decoy_password_hash(self) -> str | None:
        """Digest of a random password, hashed once and reused for unknown logins."""
        if self._decoy_digest is None:
            result = self._passwords.hash_password(secrets.token_urlsafe(16))
            if isinstance(result, Success):
                self._decoy_digest = result.value
        return self._decoy_digest

    @staticmethod
    def _invalid_credentials() -> AuthenticationError:
        # Same error for unknown login and wrong password (no enumeration).
        return AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid login or password",
        )

    @staticmethod
    def _session_not_found() -> SessionError:
        return SessionError(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found, please sign in again",
        )
