import os

# Cheap hashes and a fixed secret for the test run; must be set before app import
os.environ.setdefault("SOFI_BCRYPT_ROUNDS", "4")
os.environ.setdefault("SOFI_JWT_SECRET", "sofi-test-secret-for-pytest-runs-only")
os.environ["SOFI_SEED_DEMO"] = "true"

import pytest
from fastapi.testclient import TestClient

from app.demo.seed_data import DEMO_USERS
from app.main import app
from app.models import database as db

PASSWORDS = {u["role"]: (u["email"], u["password"]) for u in DEMO_USERS}


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "sofi_test.db")
    db.configure(path)
    yield path
    db.close()


@pytest.fixture
def client(db_path):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_db(db_path):
    """Initialised and seeded database without going through the HTTP app."""
    from app.demo.seed_data import seed_demo_data

    db.init_db()
    seed_demo_data()
    return db_path


def login(client, role):
    email, password = PASSWORDS[role]
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["token"]


@pytest.fixture
def headers_for(client):
    cache = {}

    def _headers(role):
        if role not in cache:
            cache[role] = {"Authorization": f"Bearer {login(client, role)}"}
        return cache[role]

    return _headers
