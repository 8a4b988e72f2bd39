"""
Tests for the application factory: root, health, CORS, startup
"""
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from pymongo.errors import ConnectionFailure

from app.core.config import Settings
from app.main import create_app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["docs"] == "/docs"
    assert data["version"] == "1.0.0"


def test_client_is_kept_on_app_state(app, mongo_client):
    assert app.state.mongo_client is mongo_client


def test_health_up():
    client = TestClient(create_app(Settings(), MagicMock()))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "up"}


def test_health_down():
    mongo_client = MagicMock()
    mongo_client.admin.command.side_effect = ConnectionFailure("refused")
    client = TestClient(create_app(Settings(), mongo_client))

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "degraded", "database": "down"}


def test_startup_pings_database_without_failing():
    mongo_client = MagicMock()
    mongo_client.admin.command.side_effect = ConnectionFailure("refused")

    with TestClient(create_app(Settings(), mongo_client)) as client:
        assert client.get("/").status_code == 200

    mongo_client.admin.command.assert_called_with("ping")


def test_startup_ping_uses_short_timeout(mongo_client):
    with patch("app.main.init_db") as mock_init:
        with TestClient(create_app(Settings(MONGO_PING_TIMEOUT_MS=750), mongo_client)):
            pass

    mock_init.assert_called_once_with(mongo_client, 750)


def test_cors_preflight_from_any_origin(client):
    response = client.options(
        "/students",
        headers={
            "Origin": "http://somewhere.example",
            "Access-Control-Request-Method": "PUT",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_header_on_simple_request(client):
    response = client.get("/students", headers={"Origin": "http://somewhere.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/courses")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_ERROR"


def test_api_prefix(mongo_client):
    client = TestClient(create_app(Settings(API_PREFIX="/api/v1"), mongo_client))

    assert client.get("/api/v1/students").status_code == 200
    assert client.get("/students").status_code == 404
