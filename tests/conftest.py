"""Pytest fixtures for the Tareas API tests."""

from collections.abc import Callable
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tasklist.main import create_app
from tasklist.store import TaskStore


@pytest.fixture
def app() -> FastAPI:
    """Create an application with its own empty store."""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def store(app: FastAPI) -> TaskStore:
    """The store behind the app fixture."""
    return app.state.task_store


@pytest.fixture
def create(client: TestClient) -> Callable[..., list[dict[str, Any]]]:
    """Create one task per title through the API and return the response body."""

    def _create(*titles: str) -> list[dict[str, Any]]:
        body = [{"titulo": title, "descripcion": f"desc {title}"} for title in titles]
        response = client.post("/tareas", json=body)
        assert response.status_code == 201
        return response.json()

    return _create
