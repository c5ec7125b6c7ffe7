from app.models import User
from app.core.security import create_access_token

from conftest import TEST_PASSWORD


def test_register_creates_plain_user(client, db):
    response = client.post(
        "/api/auth/register",
        json={"username": "bob", "email": "Bob@Example.com", "password": "hunter22"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "bob"
    assert body["email"] == "bob@example.com"
    assert body["role"] == "user"
    assert "password" not in body
    assert "hashed_password" not in body
    assert db.query(User).filter(User.username == "bob").count() == 1


def test_register_rejects_taken_username(client, user):
    response = client.post(
        "/api/auth/register",
        json={"username": user.username, "email": "other@example.com", "password": "hunter22"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Username or email already registered"


def test_register_validates_email(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "bob", "email": "not-an-email", "password": "hunter22"},
    )

    assert response.status_code == 422


def test_login_returns_token_and_records_last_login(client, db, user):
    assert user.last_login is None

    response = client.post(
        "/api/auth/login",
        data={"username": user.email, "password": TEST_PASSWORD},
    )

    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == user.id

    db.expire_all()
    assert db.get(User, user.id).last_login is not None


def test_login_accepts_username(client, user):
    response = client.post(
        "/api/auth/login",
        data={"username": user.username, "password": TEST_PASSWORD},
    )

    assert response.status_code == 200


def test_login_rejects_bad_password(client, user):
    response = client.post(
        "/api/auth/login",
        data={"username": user.email, "password": "wrong-password"},
    )

    assert response.status_code == 401


def test_protected_route_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/user/dashboard").status_code == 401
    assert client.get("/api/career/assessments").status_code == 401


def test_token_for_missing_user_is_rejected(client):
    headers = {"Authorization": f"Bearer {create_access_token(9999)}"}

    assert client.get("/api/auth/me", headers=headers).status_code == 401


def test_garbage_token_is_rejected(client):
    headers = {"Authorization": "Bearer not.a.jwt"}

    assert client.get("/api/auth/me", headers=headers).status_code == 401
