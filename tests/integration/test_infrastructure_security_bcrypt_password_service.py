"""Integration tests for bcrypt password service (real bcrypt, minimum cost)."""

import pytest

from authgate.core.enums import ErrorCode, InfrastructureErrorCode
from authgate.core.result import Failure, Success
from authgate.infrastructure.security import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordService:
    @pytest.mark.parametrize("cost", [3, 32])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError, match="Cost factor"):
            BcryptPasswordService(cost_factor=cost)

    def test_hash_has_bcrypt_format(self, password_service):
        result = password_service.hash_password("SecurePass123!")

        assert isinstance(result, Success)
        assert result.value.startswith("$2b$04$")
        assert len(result.value) == 60

    def test_same_password_different_hashes(self, password_service):
        first = password_service.hash_password("SecurePass123!").value
        second = password_service.hash_password("SecurePass123!").value

        assert first != second

    def test_verify_match(self, password_service):
        digest = password_service.hash_password("p").value

        assert password_service.verify_password("p", digest) == Success(value=True)

    def test_verify_mismatch_is_false_not_error(self, password_service):
        digest = password_service.hash_password("p").value

        assert password_service.verify_password("q", digest) == Success(value=False)

    @pytest.mark.parametrize("digest", ["", "invalid_hash", "$2b$04$short"])
    def test_malformed_digest_is_error(self, password_service, digest):
        result = password_service.verify_password("p", digest)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HASHING_ERROR
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.PASSWORD_HASH_MALFORMED
        )

    def test_hash_verifies_across_cost_factors(self, password_service):
        digest = BcryptPasswordService(cost_factor=5).hash_password("p").value

        assert password_service.verify_password("p", digest) == Success(value=True)

    @pytest.mark.parametrize("password", ["x" * 100, "é" * 40])
    def test_verify_overlong_password_is_false_not_error(self, password_service, password):
        digest = password_service.hash_password("p").value

        assert password_service.verify_password(password, digest) == Success(value=False)
