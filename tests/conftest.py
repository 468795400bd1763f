import pytest
from fastapi.testclient import TestClient

from minimal_api.app.core.config import Settings
from minimal_api.app.main import create_app

SECRET = "test-secret-with-enough-length-for-hs256"
ADMIN_EMAIL = "adm@example.com"
ADMIN_PASSWORD = "123456"


@pytest.fixture
def settings():
    return Settings(
        jwt_secret=SECRET,
        database_url="sqlite://",
        page_size=2,
        bootstrap_admin_email=ADMIN_EMAIL,
        bootstrap_admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def login(client, email, password):
    return client.post("/administrators/login", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    resp = login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    assert resp.status_code == 200
    return bearer(resp.json()["token"])


@pytest.fixture
def editor_headers(client, admin_headers):
    resp = client.post(
        "/administrators",
        json={"email": "editor@example.com", "password": "pw", "profile": "Editor"},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    resp = login(client, "editor@example.com", "pw")
    assert resp.status_code == 200
    return bearer(resp.json()["token"])
