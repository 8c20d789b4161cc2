"""Tests for settings parsing and settings-driven app construction."""

from fastapi.testclient import TestClient

from tasklist.config import Settings
from tasklist.main import create_app


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.PORT == 3000
    assert settings.LOG_LEVEL == "INFO"
    assert settings.CORS_ENABLED is False


def test_log_level_is_normalized() -> None:
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_cors_origins_from_string() -> None:
    settings = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_port_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).PORT == 8080


def test_app_uses_settings() -> None:
    app = create_app(
        Settings(
            _env_file=None,
            API_NAME="Mis tareas",
            API_VERSION="2.0.0",
            CORS_ENABLED=True,
            CORS_ORIGINS=["http://front.test"],
        )
    )
    client = TestClient(app)

    assert app.title == "Mis tareas"
    assert client.get("/health").json()["version"] == "2.0.0"

    response = client.get("/tareas", headers={"Origin": "http://front.test"})
    assert response.headers["access-control-allow-origin"] == "http://front.test"
