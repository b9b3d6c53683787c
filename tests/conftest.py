"""Shared fixtures: a throwaway database, a client, and helpers to populate it."""

import os
import tempfile

# Setup environment for testing (before the app is imported)
os.environ["SNACKBOARD_DATA_DIR"] = tempfile.mkdtemp()
os.environ["SNACKBOARD_DB_PATH"] = os.path.join(os.environ["SNACKBOARD_DATA_DIR"], "test.db")
os.environ["SNACKBOARD_ADMIN_NAME"] = "ADMIN"
os.environ["SNACKBOARD_ADMIN_ACCESS_CODE"] = "admin-code"
os.environ["SNACKBOARD_ACCESS_CODE_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from snackboard.database import engine  # noqa: E402
from snackboard.main import app  # noqa: E402

ADMIN = {"name": "ADMIN", "accessCode": "admin-code"}


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def client():
    """Fresh schema per test; startup recreates tables and the admin account."""
    SQLModel.metadata.drop_all(engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def session(client):
    with Session(engine) as s:
        yield s


@pytest.fixture()
def admin_headers(client):
    r = client.post("/api/login", json=ADMIN)
    assert r.status_code == 200, r.text
    return bearer(r.json()["accessToken"])


@pytest.fixture()
def make_category(client, admin_headers):
    def _make(name: str) -> dict:
        r = client.post("/api/categories", json={"name": name}, headers=admin_headers)
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture()
def make_snack(client, admin_headers):
    def _make(name: str, points: int = 0, **fields) -> dict:
        r = client.post(
            "/api/snacks",
            json={"name": name, "points": points, **fields},
            headers=admin_headers,
        )
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture()
def make_family(client, admin_headers):
    def _make(name: str, points_allowed: int = 0, access_code: str = "secret") -> dict:
        r = client.post(
            "/api/families",
            json={"name": name, "pointsAllowed": points_allowed, "accessCode": access_code},
            headers=admin_headers,
        )
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture()
def login(client):
    def _login(name: str, access_code: str = "secret") -> dict:
        r = client.post("/api/login", json={"name": name, "accessCode": access_code})
        assert r.status_code == 200, r.text
        return bearer(r.json()["accessToken"])
    return _login


@pytest.fixture()
def select(client, admin_headers):
    """Set a family's quantity for a snack (as admin)."""
    def _select(family_id: int, snack_id: int, quantity: int) -> dict:
        r = client.post(
            "/api/selections",
            json={"familyId": family_id, "snackId": snack_id, "quantity": quantity},
            headers=admin_headers,
        )
        assert r.status_code == 200, r.text
        return r.json()
    return _select
