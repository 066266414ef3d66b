"""API tests for the current-user and user listing routes."""

import pytest

from tests.api.conftest import bearer, sign_in


@pytest.mark.api
class TestMe:
    def test_returns_authenticated_user(self, client, alice):
        tokens = sign_in(client, "a@x.com", "p")

        response = client.get("/users/me", headers=bearer(tokens["access_token"]))

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"] == str(alice.id)
        assert user["email"] == "a@x.com"
        assert user["role"] == "user"
        assert "password_hash" not in user

    def test_cookie_only(self, client):
        sign_in(client, "a@x.com", "p")

        assert client.get("/users/me").status_code == 200

    def test_unauthenticated(self, client):
        response = client.get("/users/me")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["code"] == "unauthenticated"


@pytest.mark.api
class TestListUsers:
    def test_plain_user_is_forbidden(self, client):
        tokens = sign_in(client, "a@x.com", "p")

        response = client.get("/users/", headers=bearer(tokens["access_token"]))

        assert response.status_code == 403
        body = response.json()
        assert body["code"] == "forbidden"
        assert body["title"] == "Access Denied"

    @pytest.mark.parametrize(
        ("email", "password"),
        [("admin@x.com", "admin-pass"), ("mod@x.com", "mod-pass")],
    )
    def test_privileged_roles_can_list(self, client, email, password):
        tokens = sign_in(client, email, password)

        response = client.get("/users/", headers=bearer(tokens["access_token"]))

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["results"] == 3
        assert {u["email"] for u in body["users"]} == {
            "a@x.com",
            "admin@x.com",
            "mod@x.com",
        }

    def test_pagination(self, client):
        tokens = sign_in(client, "admin@x.com", "admin-pass")
        headers = bearer(tokens["access_token"])

        first = client.get("/users/", params={"page": 1, "limit": 2}, headers=headers)
        second = client.get("/users/", params={"page": 2, "limit": 2}, headers=headers)
        beyond = client.get("/users/", params={"page": 5, "limit": 2}, headers=headers)

        assert first.json()["results"] == 2
        assert second.json()["results"] == 1
        assert beyond.json()["results"] == 0
        emails = {u["email"] for u in first.json()["users"] + second.json()["users"]}
        assert len(emails) == 3

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"limit": 0}, {"limit": 101}, {"page": "x"}],
    )
    def test_bounds_are_validated(self, client, params):
        tokens = sign_in(client, "admin@x.com", "admin-pass")

        response = client.get(
            "/users/", params=params, headers=bearer(tokens["access_token"])
        )

        assert response.status_code == 422
        assert response.json()["code"] == "validation_failed"

    def test_unauthenticated(self, client):
        assert client.get("/users/").status_code == 401
