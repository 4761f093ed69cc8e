from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core import security
from app.core.config import settings

from conftest import login


def test_login_returns_token_and_role(client):
    r = client.post("/api/auth/login", json={"email": "admin@sofi.local", "password": "Admin123!"})
    assert r.status_code == 200
    body = r.json()
    assert body["role"] == "Admin"
    claims = jwt.decode(body["token"], settings.jwt_secret, algorithms=["HS256"])
    assert claims["email"] == "admin@sofi.local"
    assert claims["role"] == "Admin"
    assert claims["exp"] - claims["iat"] == settings.jwt_expiry_minutes * 60


def test_login_email_is_case_insensitive(client):
    r = client.post("/api/auth/login", json={"email": "Viewer@SOFI.local", "password": "Viewer123!"})
    assert r.status_code == 200
    assert r.json()["role"] == "Viewer"


@pytest.mark.parametrize(
    "email, password",
    [
        ("admin@sofi.local", "wrong-password"),
        ("nobody@sofi.local", "Admin123!"),
    ],
)
def test_login_rejects_bad_credentials_identically(client, email, password):
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"
    assert r.headers["www-authenticate"] == "Bearer"


def test_me_requires_token(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401


def test_me_returns_user_without_hash(client, headers_for):
    r = client.get("/api/auth/me", headers=headers_for("Analyst"))
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "analyst@sofi.local"
    assert body["role"] == "Analyst"
    assert "password_hash" not in body


def test_expired_token_rejected(client):
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {login(client, 'Admin')}"}).json()
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = security.create_access_token(me["id"], me["email"], me["role"], expires_minutes=60, now=past)
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token has expired."


def test_tampered_token_rejected(client):
    forged = jwt.encode({"sub": "1", "email": "x", "role": "Admin"}, "not-the-real-secret-but-long-enough-for-hs256", algorithm="HS256")
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401


def test_token_for_unknown_user_rejected(client):
    token = security.create_access_token(9999, "ghost@sofi.local", "Admin")
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_register_admin_only(client, headers_for):
    payload = {"email": "new@sofi.local", "password": "Secret123!", "role": "Analyst"}
    r = client.post("/api/auth/register", json=payload, headers=headers_for("Manager"))
    assert r.status_code == 403

    r = client.post("/api/auth/register", json=payload, headers=headers_for("Admin"))
    assert r.status_code == 201
    assert r.json()["role"] == "Analyst"

    r = client.post("/api/auth/login", json={"email": "new@sofi.local", "password": "Secret123!"})
    assert r.status_code == 200
    assert r.json()["role"] == "Analyst"


def test_register_duplicate_email_conflicts(client, headers_for):
    payload = {"email": "ADMIN@sofi.local", "password": "Secret123!", "role": "Viewer"}
    r = client.post("/api/auth/register", json=payload, headers=headers_for("Admin"))
    assert r.status_code == 409


def test_register_unknown_role_rejected(client, headers_for):
    payload = {"email": "odd@sofi.local", "password": "Secret123!", "role": "Superuser"}
    r = client.post("/api/auth/register", json=payload, headers=headers_for("Admin"))
    assert r.status_code == 422


def test_register_password_over_bcrypt_byte_limit_rejected(client, headers_for):
    # 30 characters, 90 bytes
    payload = {"email": "euro@sofi.local", "password": "€" * 30, "role": "Viewer"}
    r = client.post("/api/auth/register", json=payload, headers=headers_for("Admin"))
    assert r.status_code == 422


def test_register_multibyte_password_within_limit(client, headers_for):
    # 24 characters, 72 bytes
    payload = {"email": "euro@sofi.local", "password": "€" * 24, "role": "Viewer"}
    r = client.post("/api/auth/register", json=payload, headers=headers_for("Admin"))
    assert r.status_code == 201
    r = client.post("/api/auth/login", json={"email": "euro@sofi.local", "password": "€" * 24})
    assert r.status_code == 200


def test_hashing_handlers_run_in_threadpool():
    import inspect

    from app.api.routes import auth as auth_routes

    assert not inspect.iscoroutinefunction(auth_routes.login)
    assert not inspect.iscoroutinefunction(auth_routes.register)
