"""
API tests for /user/{id}.
"""

import pytest


@pytest.fixture
def alice(client):
    user_id = client.post("/signup", json={"username": "alice", "email": "a@x.com", "password": "pw1"}).json()[
        "userId"]
    token = client.post("/signin", json={"email": "a@x.com", "password": "pw1"}).json()["token"]
    return user_id, {"Authorization": f"Bearer {token}"}


class TestGetUser:

    def test_public_profile(self, client, alice):
        user_id, _ = alice
        body = client.get(f"/user/{user_id}").json()

        assert body["id"] == user_id
        assert body["username"] == "alice"
        assert body["email"] == "a@x.com"
        assert "created_at" in body
        assert "password" not in body

    def test_missing(self, client):
        response = client.get("/user/999")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestUpdateUser:

    def test_update(self, client, alice):
        user_id, headers = alice
        response = client.put(f"/user/{user_id}", headers=headers, json={"username": "alicia", "email": "a@x.com"})

        assert response.status_code == 200
        assert response.json() == {"message": "Profile updated successfully"}
        assert client.get(f"/user/{user_id}").json()["username"] == "alicia"

    def test_password_change_then_signin(self, client, alice):
        user_id, headers = alice
        client.put(f"/user/{user_id}", headers=headers,
                   json={"username": "alice", "email": "a@x.com", "currentPassword": "pw1", "newPassword": "pw2"})

        assert client.post("/signin", json={"email": "a@x.com", "password": "pw2"}).status_code == 200
        assert client.post("/signin", json={"email": "a@x.com", "password": "pw1"}).status_code == 401

    def test_wrong_current_password(self, client, alice):
        user_id, headers = alice
        response = client.put(f"/user/{user_id}", headers=headers,
                              json={"username": "alice", "email": "a@x.com", "currentPassword": "x",
                                    "newPassword": "pw2"})

        assert response.status_code == 401
        assert response.json() == {"error": "Current password is incorrect"}

    def test_email_in_use(self, client, alice):
        user_id, headers = alice
        client.post("/signup", json={"username": "bob", "email": "b@x.com", "password": "pw"})

        response = client.put(f"/user/{user_id}", headers=headers, json={"username": "alice", "email": "b@x.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Email already in use by another user"}

    def test_requires_token(self, client, alice):
        user_id, _ = alice
        response = client.put(f"/user/{user_id}", json={"username": "x", "email": "a@x.com"})
        assert response.status_code == 401

    def test_cannot_update_other_user(self, client, alice):
        _, headers = alice
        bob_id = client.post("/signup", json={"username": "bob", "email": "b@x.com", "password": "pw"}).json()[
            "userId"]

        response = client.put(f"/user/{bob_id}", headers=headers, json={"username": "x", "email": "b@x.com"})
        assert response.status_code == 403

    def test_missing_username(self, client, alice):
        user_id, headers = alice
        response = client.put(f"/user/{user_id}", headers=headers, json={"email": "a@x.com"})
        assert response.status_code == 400
