import pytest
from fastapi.testclient import TestClient

from club_site_api.app.core.config import Settings
from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-secret"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings():
    return Settings(
        secret_key="test-secret-key",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        admin_static_token="",
        allow_registration=True,
        seed_demo_data=False,
    )


@pytest.fixture
def storage():
    return ClubStorage()


@pytest.fixture
def client(settings, storage):
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    r = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return bearer(r.json()["access_token"])


@pytest.fixture
def user_headers(client):
    r = client.post("/api/register", json={"username": "fan", "password": "supporter1"})
    assert r.status_code == 201, r.text
    return bearer(r.json()["access_token"])


@pytest.fixture
def player_payload():
    return {"name": "Ivan Petrov", "position": "Forward", "number": 9, "age": 24}
