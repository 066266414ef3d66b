"""Unit tests for AccessGuard."""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from authgate.application.services import AccessGuard
from authgate.core.enums import ErrorCode
from authgate.core.errors import TokenError
from authgate.core.result import Failure, Success
from authgate.domain.entities import User
from authgate.domain.enums import UserRole


def _user(role: UserRole) -> User:
    return User(id=uuid7(), name="U", email="u@x.com", password_hash="h", role=role)


@pytest.fixture
def user() -> User:
    return _user(UserRole.USER)


@pytest.fixture
def codec(user):
    mock = Mock()
    mock.verify.return_value = Success(value=str(user.id))
    return mock


@pytest.fixture
def users(user):
    repo = AsyncMock()
    repo.find_by_id.return_value = user
    return repo


@pytest.fixture
def guard(codec, users, mock_logger) -> AccessGuard:
    return AccessGuard(access_codec=codec, users=users, logger=mock_logger)


@pytest.mark.unit
class TestAuthenticate:
    async def test_valid_token_returns_user(self, guard, user, users):
        result = await guard.authenticate("token")

        assert result == Success(value=user)
        users.find_by_id.assert_awaited_once_with(user.id)

    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, guard, codec, token):
        result = await guard.authenticate(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHENTICATED
        codec.verify.assert_not_called()

    @pytest.mark.parametrize(
        "token_code",
        [
            ErrorCode.TOKEN_EXPIRED,
            ErrorCode.TOKEN_INVALID_SIGNATURE,
            ErrorCode.TOKEN_MALFORMED,
        ],
    )
    async def test_any_verification_failure_is_unauthenticated(
        self, guard, codec, token_code
    ):
        codec.verify.return_value = Failure(
            error=TokenError(code=token_code, message="bad")
        )

        result = await guard.authenticate("token")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHENTICATED
        assert result.error.details == {"reason": token_code.value}

    async def test_subject_not_a_user_id(self, guard, codec):
        codec.verify.return_value = Success(value="not-a-uuid")

        result = await guard.authenticate("token")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHENTICATED

    async def test_deleted_user(self, guard, users):
        users.find_by_id.return_value = None

        result = await guard.authenticate("token")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHENTICATED


@pytest.mark.unit
class TestAuthorize:
    def test_user_role_forbidden_for_admin_operation(self, guard):
        result = guard.authorize(
            _user(UserRole.USER), {UserRole.ADMIN, UserRole.MODERATOR}
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FORBIDDEN
        assert result.error.required_roles == ("admin", "moderator")

    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.MODERATOR])
    def test_allowed_roles_pass(self, guard, role):
        result = guard.authorize(_user(role), {UserRole.ADMIN, UserRole.MODERATOR})

        assert result == Success(value=None)

    def test_empty_allowed_set_forbids_everyone(self, guard):
        result = guard.authorize(_user(UserRole.ADMIN), set())

        assert isinstance(result, Failure)
