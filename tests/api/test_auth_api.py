"""API tests for sign-up, sign-in, refresh and logout."""

import pytest

from tests.api.conftest import bearer, sign_in


def _set_cookie_headers(response) -> list[str]:
    return response.headers.get_list("set-cookie")


def _cookie_header(response, name: str) -> str:
    return next(h for h in _set_cookie_headers(response) if h.startswith(f"{name}="))


@pytest.mark.api
class TestSignIn:
    def test_sign_in_returns_tokens_and_sets_cookies(self, client, settings):
        response = client.post("/sign-in", json={"login": "a@x.com", "password": "p"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["access_token"]
        assert body["refresh_token"]
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == settings.access_token_expire_minutes * 60

        access_cookie = _cookie_header(response, "access_token").lower()
        session_cookie = _cookie_header(response, "session_id").lower()
        assert f"max-age={settings.access_token_expire_minutes * 60}" in access_cookie
        assert f"max-age={settings.refresh_token_expire_minutes * 60}" in session_cookie
        for cookie in (access_cookie, session_cookie):
            assert "httponly" in cookie
            assert "path=/" in cookie
            assert "samesite=lax" in cookie

    def test_wrong_password(self, client):
        response = client.post("/sign-in", json={"email": "a@x.com", "password": "q"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        body = response.json()
        assert body["code"] == "invalid_credentials"
        assert body["status"] == 401
        assert body["instance"] == "/sign-in"
        assert body["trace_id"] == response.headers["X-Trace-Id"]
        assert "set-cookie" not in response.headers

    def test_unknown_user_gets_same_response(self, client):
        unknown = client.post("/sign-in", json={"email": "ghost@x.com", "password": "p"})
        wrong = client.post("/sign-in", json={"email": "a@x.com", "password": "q"})

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json()["detail"] == wrong.json()["detail"]

    def test_overlong_password_is_invalid_credentials(self, client):
        password = "x" * 100
        known = client.post("/sign-in", json={"email": "a@x.com", "password": password})
        unknown = client.post(
            "/sign-in", json={"email": "ghost@x.com", "password": password}
        )

        assert known.status_code == unknown.status_code == 401
        assert known.json()["code"] == unknown.json()["code"] == "invalid_credentials"
        assert known.json()["detail"] == unknown.json()["detail"]

    def test_missing_fields_is_422(self, client):
        response = client.post("/sign-in", json={"email": "a@x.com"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "validation_failed"
        assert body["errors"][0]["field"] == "password"


@pytest.mark.api
class TestRefresh:
    def test_end_to_end_rotation(self, client):
        first = sign_in(client, "a@x.com", "p")
        old_sid = client.cookies.get("session_id")
        assert old_sid

        response = client.post("/refresh", headers=bearer(first["access_token"]))

        assert response.status_code == 200
        body = response.json()
        assert body["refresh_token"] != first["refresh_token"]
        new_sid = client.cookies.get("session_id")
        assert new_sid and new_sid != old_sid

        # Replaying the rotated identifier fails
        client.cookies.clear()
        client.cookies.set("session_id", old_sid)
        replay = client.post("/refresh", headers=bearer(body["access_token"]))
        assert replay.status_code == 401
        assert replay.json()["code"] == "session_not_found"

        # The new identifier still works
        client.cookies.clear()
        client.cookies.set("session_id", new_sid)
        again = client.post("/refresh", headers=bearer(body["access_token"]))
        assert again.status_code == 200

    def test_access_cookie_authenticates_without_header(self, client):
        sign_in(client, "a@x.com", "p")

        response = client.post("/refresh")

        assert response.status_code == 200

    def test_requires_authentication(self, client):
        response = client.post("/refresh")

        assert response.status_code == 401
        assert response.json()["code"] == "unauthenticated"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_access_token(self, client):
        response = client.post("/refresh", headers=bearer("not-a-token"))

        assert response.status_code == 401
        assert response.json()["code"] == "unauthenticated"

    def test_refresh_token_cannot_be_used_as_access_token(self, client):
        tokens = sign_in(client, "a@x.com", "p")
        client.cookies.clear()

        response = client.post("/refresh", headers=bearer(tokens["refresh_token"]))

        assert response.status_code == 401

    def test_missing_session_cookie(self, client):
        tokens = sign_in(client, "a@x.com", "p")
        client.cookies.clear()

        response = client.post("/refresh", headers=bearer(tokens["access_token"]))

        assert response.status_code == 400
        assert response.json()["code"] == "missing_session"

    def test_session_of_another_user_is_rejected(self, client):
        sign_in(client, "admin@x.com", "admin-pass")
        admin_sid = client.cookies.get("session_id")
        alice_tokens = sign_in(client, "a@x.com", "p")

        client.cookies.clear()
        client.cookies.set("session_id", admin_sid)
        response = client.post("/refresh", headers=bearer(alice_tokens["access_token"]))

        assert response.status_code == 401
        assert response.json()["code"] == "session_not_found"


@pytest.mark.api
class TestLogOut:
    def test_logout_clears_cookies_and_session(self, client, container):
        tokens = sign_in(client, "a@x.com", "p")
        sid = client.cookies.get("session_id")

        response = client.get("/logout", headers=bearer(tokens["access_token"]))

        assert response.status_code == 200
        assert response.json() == {"status": "success"}
        for name in ("access_token", "session_id"):
            assert "max-age=0" in _cookie_header(response, name).lower()
        assert client.cookies.get("session_id") is None

        # The session identifier no longer refreshes
        client.cookies.set("session_id", sid)
        replay = client.post("/refresh", headers=bearer(tokens["access_token"]))
        assert replay.json()["code"] == "session_not_found"

    def test_logout_is_idempotent(self, client):
        tokens = sign_in(client, "a@x.com", "p")
        sid = client.cookies.get("session_id")

        first = client.post("/logout", headers=bearer(tokens["access_token"]))
        client.cookies.set("session_id", sid)
        second = client.post("/logout", headers=bearer(tokens["access_token"]))

        assert first.status_code == second.status_code == 200

    def test_logout_without_session_cookie(self, client):
        tokens = sign_in(client, "a@x.com", "p")
        client.cookies.clear()

        response = client.get("/logout", headers=bearer(tokens["access_token"]))

        assert response.status_code == 200

    def test_logout_requires_authentication(self, client):
        assert client.get("/logout").status_code == 401


@pytest.mark.api
class TestSignUp:
    def _payload(self, **overrides) -> dict:
        payload = {
            "name": "New User",
            "email": "new@x.com",
            "password": "SecurePass123!",
            "passwordConfirm": "SecurePass123!",
        }
        payload.update(overrides)
        return payload

    def test_sign_up_then_sign_in(self, client):
        response = client.post("/sign-up", json=self._payload())

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["email"] == "new@x.com"
        assert user["role"] == "user"
        assert "password_hash" not in user
        assert "password" not in user

        sign_in(client, "new@x.com", "SecurePass123!")

    def test_duplicate_email(self, client):
        response = client.post("/sign-up", json=self._payload(email="a@x.com"))

        assert response.status_code == 409
        assert response.json()["code"] == "user_already_exists"

    def test_password_mismatch(self, client):
        response = client.post(
            "/sign-up", json=self._payload(passwordConfirm="Different123!")
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password_confirm"

    def test_self_registration_cannot_request_admin(self, client):
        response = client.post("/sign-up", json=self._payload(role="admin"))

        assert response.status_code == 400
        assert response.json()["code"] == "validation_failed"

    def test_invalid_email_is_422(self, client):
        response = client.post("/sign-up", json=self._payload(email="nope"))

        assert response.status_code == 422
