import pytest
from fastapi.testclient import TestClient

from club_site_api.app.core.config import Settings
from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.main import create_app

from .conftest import ADMIN_PASSWORD, ADMIN_USERNAME, bearer


def test_admin_login_returns_token(client):
    r = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["is_admin"] is True
    assert "password_hash" not in body["user"]


@pytest.mark.parametrize(
    "username,password",
    [(ADMIN_USERNAME, "wrong-password"), ("nobody", ADMIN_PASSWORD)],
)
def test_login_with_bad_credentials(client, username, password):
    r = client.post("/api/login", json={"username": username, "password": password})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"


def test_current_user_requires_token(client, admin_headers):
    assert client.get("/api/user").status_code == 401
    assert client.get("/api/user", headers=bearer("garbage")).status_code == 401

    r = client.get("/api/user", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["username"] == ADMIN_USERNAME


def test_registered_user_is_not_admin(client, user_headers):
    me = client.get("/api/user", headers=user_headers).json()
    assert me["username"] == "fan"
    assert me["is_admin"] is False


def test_register_duplicate_username(client, user_headers):
    r = client.post("/api/register", json={"username": "fan", "password": "another1"})
    assert r.status_code == 409


def test_register_short_password(client):
    r = client.post("/api/register", json={"username": "newbie", "password": "123"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "password"


def test_registered_user_can_log_in(client, user_headers):
    r = client.post("/api/login", json={"username": "fan", "password": "supporter1"})
    assert r.status_code == 200
    assert r.json()["user"]["is_admin"] is False


def test_user_profile_lookup(client, user_headers):
    me = client.get("/api/user", headers=user_headers).json()
    assert client.get(f"/api/users/{me['id']}").json() == me
    r = client.get("/api/users/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "User not found"


def _app_client(**overrides):
    options = dict(secret_key="other-secret", admin_username="boss", admin_password="boss-pass")
    options.update(overrides)
    return TestClient(create_app(settings=Settings(**options), storage=ClubStorage()))


def test_registration_can_be_disabled():
    with _app_client(allow_registration=False) as client:
        r = client.post("/api/register", json={"username": "fan", "password": "supporter1"})
        assert r.status_code == 403


def test_static_admin_token():
    with _app_client(admin_static_token="let-me-in") as client:
        payload = {"name": "Ivan", "position": "Forward", "number": 9, "age": 24}
        assert client.post("/api/players", json=payload, headers=bearer("let-me-in")).status_code == 201
        assert client.post("/api/players", json=payload, headers=bearer("let-me-out")).status_code == 403
        assert client.get("/api/user", headers=bearer("let-me-in")).json()["username"] == "boss"


def test_token_from_another_secret_is_rejected(admin_headers):
    with _app_client() as other:
        assert other.get("/api/user", headers=admin_headers).status_code == 401


def test_root_describes_service(client, settings):
    body = client.get("/").json()
    assert body["name"] == settings.project_name
    assert body["docs"] == "/docs"
