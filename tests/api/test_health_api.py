"""Tests for the health endpoints"""
import pytest
from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api import health


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(health.router, prefix="/api")
    return TestClient(app)


class TestHealthApi:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_liveness(self, client):
        response = client.get("/api/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    @patch("app.api.health.get_database", new_callable=AsyncMock)
    def test_ready_when_database_answers(self, mock_get_database, client):
        mock_get_database.return_value.command = AsyncMock(return_value={"ok": 1})

        response = client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"][0]["status"] == "healthy"

    @patch("app.api.health.get_database", new_callable=AsyncMock)
    def test_not_ready_when_database_fails(self, mock_get_database, client):
        mock_get_database.side_effect = Exception("connection refused")

        response = client.get("/api/health/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not ready"
        assert body["errors"] == ["database: connection refused"]
