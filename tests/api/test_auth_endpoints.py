"""
API tests for /signup, /signin and /profile.
"""

import pytest
from sqlalchemy.exc import OperationalError

from bloghub.db.repositories.user import UserRepository


def signup(client, username="alice", email="a@x.com", password="pw1"):
    return client.post("/signup", json={"username": username, "email": email, "password": password})


def signin(client, email="a@x.com", password="pw1"):
    return client.post("/signin", json={"email": email, "password": password})


# ======================================================================
# /signup
# ======================================================================


class TestSignup:

    def test_created(self, client):
        response = signup(client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert isinstance(body["userId"], int)

    def test_duplicate_email(self, client):
        signup(client)
        response = signup(client, username="someone")

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    @pytest.mark.parametrize("payload", [
        {"email": "a@x.com", "password": "pw1"},
        {"username": "alice", "password": "pw1"},
        {"username": "alice", "email": "a@x.com"},
        {"username": "alice", "email": "not-an-email", "password": "pw1"},
        {"username": "", "email": "a@x.com", "password": "pw1"},
    ])
    def test_invalid_body(self, client, payload):
        response = client.post("/signup", json=payload)

        assert response.status_code == 400
        assert "error" in response.json()


# ======================================================================
# /signin
# ======================================================================


class TestSignin:

    def test_signup_then_signin(self, client, token_service):
        user_id = signup(client).json()["userId"]
        response = signin(client)

        assert response.status_code == 200
        body = response.json()
        assert body["user"] == {"id": user_id, "username": "alice", "email": "a@x.com"}
        assert token_service.verify(body["token"]).id == user_id

    def test_email_case_ignored(self, client):
        user_id = signup(client, email="Alice@Example.COM").json()["userId"]
        response = signin(client, email="alice@example.com")

        assert response.status_code == 200
        assert response.json()["user"] == {"id": user_id, "username": "alice", "email": "alice@example.com"}

    def test_wrong_password(self, client):
        signup(client)
        response = signin(client, password="wrong")

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid password"}

    def test_unknown_email(self, client):
        response = signin(client, email="nobody@x.com")

        assert response.status_code == 401
        assert response.json() == {"error": "User not found"}

    def test_missing_password(self, client):
        response = client.post("/signin", json={"email": "a@x.com"})
        assert response.status_code == 400


# ======================================================================
# /profile
# ======================================================================


class TestProfile:

    def test_no_header(self, client):
        response = client.get("/profile")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_non_bearer_scheme(self, client):
        response = client.get("/profile", headers={"Authorization": "Basic YWxpY2U6cHcx"})
        assert response.status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/profile", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_fresh_token(self, client):
        user_id = signup(client).json()["userId"]
        token = signin(client).json()["token"]

        response = client.get("/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == {"message": "Access granted!", "userId": user_id}

    def test_expired_token(self, client, clock):
        signup(client)
        token = signin(client).json()["token"]
        clock.advance(seconds=3601)

        response = client.get("/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_token_outlives_password_change(self, client):
        """No revocation: a token issued before a password change keeps working."""
        user_id = signup(client).json()["userId"]
        token = signin(client).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        client.put(f"/user/{user_id}", headers=headers,
                   json={"username": "alice", "email": "a@x.com", "currentPassword": "pw1", "newPassword": "pw2"})

        assert client.get("/profile", headers=headers).status_code == 200


# ======================================================================
# Database failures
# ======================================================================


class TestDatabaseErrors:

    @pytest.fixture
    def broken_lookup(self, monkeypatch):
        def get_by_email(self, email):
            raise OperationalError("SELECT users.id FROM users", {}, Exception("database is locked"))

        monkeypatch.setattr(UserRepository, "get_by_email", get_by_email)

    def test_signup_reports_server_error(self, client, broken_lookup):
        response = signup(client)

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    def test_signin_reports_server_error(self, client, broken_lookup):
        response = signin(client)

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}
