"""Tests for routing fallbacks and unexpected errors."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/"),
        ("GET", "/tasks"),
        ("GET", "/tareas/1/extra"),
        ("DELETE", "/tareas"),
        ("PATCH", "/tareas/1"),
        ("POST", "/estadisticas"),
    ],
)
def test_unknown_route(client: TestClient, method: str, path: str) -> None:
    response = client.request(method, path)
    assert response.status_code == 404
    assert response.json() == {"message": "Ruta no encontrada"}


def test_unexpected_error(app: FastAPI) -> None:
    @app.get("/falla")
    def fail() -> None:
        raise RuntimeError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/falla")
    assert response.status_code == 500
    assert response.json() == {"message": "Error inesperado"}
