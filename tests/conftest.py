import os
import sys
import pytest

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

from fastapi.testclient import TestClient
from activity_service.infrastructure.db import Store
from activity_service.main import create_app


@pytest.fixture
def store():
    """Fresh in-memory store for every test"""
    s = Store("sqlite://")
    yield s
    s.drop_all()
    s.engine.dispose()


@pytest.fixture
def client(store):
    """Test client over an app bound to the test store"""
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture
def login_as(client):
    """Registers a user and returns Authorization headers for them"""
    def _login_as(username: str, role: str, password: str = "secret") -> dict:
        r = client.post("/register", json={"username": username, "password": password, "role": role})
        assert r.status_code == 201, r.text
        r = client.post("/login", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}
    return _login_as


@pytest.fixture
def admin_headers(login_as):
    return login_as("admin", "admin")


@pytest.fixture
def student_headers(login_as):
    return login_as("budi", "student")
