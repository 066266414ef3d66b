"""API tests for health, tracing and generic error rendering."""

from unittest.mock import AsyncMock

import pytest

from authgate.core.enums import ErrorCode, InfrastructureErrorCode
from authgate.core.errors import CacheError
from authgate.core.result import Failure


@pytest.mark.api
class TestHealth:
    def test_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "cache": "ok"}

    def test_unhealthy_when_cache_fails(self, client, container):
        container.cache.ping = AsyncMock(
            return_value=Failure(
                error=CacheError(
                    code=ErrorCode.STORE_ERROR,
                    message="down",
                    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                )
            )
        )

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


@pytest.mark.api
class TestTracing:
    def test_generates_trace_id(self, client):
        response = client.get("/health")

        assert response.headers["X-Trace-Id"]

    def test_echoes_inbound_trace_id(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"

    def test_problem_details_carry_trace_id(self, client):
        response = client.get("/users/me", headers={"X-Trace-Id": "trace-456"})

        assert response.json()["trace_id"] == "trace-456"


@pytest.mark.api
class TestStoreFailures:
    def test_sign_in_store_failure_is_503_without_leaking(self, client, container):
        container.store.save = AsyncMock(
            return_value=Failure(
                error=CacheError(
                    code=ErrorCode.STORE_ERROR,
                    message="redis exploded at 10.0.0.1",
                    infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                )
            )
        )

        response = client.post("/sign-in", json={"email": "a@x.com", "password": "p"})

        assert response.status_code == 503
        body = response.json()
        assert body["code"] == "store_error"
        assert "10.0.0.1" not in body["detail"]
        assert "set-cookie" not in response.headers


@pytest.mark.api
def test_unknown_route_is_problem_json(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["status"] == 404
    assert response.json()["title"] == "Resource Not Found"
