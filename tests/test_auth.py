"""Tests for registration, login and token handling."""

from datetime import timedelta

from oms.models.user import User
from oms.security import create_access_token, decode_access_token, hash_password, verify_password


def register(client, email="admin@example.com", password="admin123", name="Admin"):
    return client.post("/auth/register", json={"name": name, "email": email, "password": password})


class TestRegisterAndLogin:
    def test_register_returns_token_and_user(self, client):
        response = register(client)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["token"]
        assert data["user"]["email"] == "admin@example.com"
        assert "hashedPassword" not in data["user"]

    def test_register_duplicate_email(self, client):
        register(client)
        response = register(client)
        assert response.status_code == 400
        assert response.json()["error"] == "User already exists"

    def test_register_requires_all_fields(self, client):
        response = client.post("/auth/register", json={"email": "a@example.com"})
        assert response.status_code == 400

    def test_login(self, client):
        register(client)
        response = client.post("/auth/login", json={"email": "admin@example.com", "password": "admin123"})
        assert response.status_code == 200
        assert response.json()["data"]["token"]

    def test_login_wrong_password(self, client):
        register(client)
        response = client.post("/auth/login", json={"email": "admin@example.com", "password": "nope"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid credentials"

    def test_login_unknown_user(self, client):
        response = client.post("/auth/login", json={"email": "ghost@example.com", "password": "x"})
        assert response.status_code == 400


class TestProtectedRoutes:
    def test_profile(self, auth_client):
        response = auth_client.get("/auth/profile")
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Tester"

    def test_missing_token(self, client):
        response = client.get("/products")
        assert response.status_code == 401
        assert response.json()["code"] == "Unauthorized"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_garbage_token(self, client):
        response = client.get("/products", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["code"] == "Unauthorized"

    def test_expired_token(self, client, db):
        user = User(name="Old", email="old@example.com", hashed_password=hash_password("x"))
        db.add(user)
        db.commit()
        token = create_access_token(user, expires_delta=timedelta(minutes=-1))

        response = client.get("/products", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["code"] == "SessionExpired"

    def test_token_for_deleted_user(self, client, db):
        user = User(name="Gone", email="gone@example.com", hashed_password=hash_password("x"))
        db.add(user)
        db.commit()
        token = create_access_token(user)
        db.delete(user)
        db.commit()

        response = client.get("/products", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"] == "User not found"


class TestSecurityHelpers:
    def test_password_hash_round_trip(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_token_carries_user_id(self, db):
        user = User(name="A", email="a@example.com", hashed_password="x")
        db.add(user)
        db.commit()
        payload = decode_access_token(create_access_token(user))
        assert payload["sub"] == str(user.id)
