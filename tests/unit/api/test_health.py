"""Tests for health endpoints and cross-cutting response headers."""

from fastapi import FastAPI
from fastapi.testclient import TestClient


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_ready(self, client: TestClient):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    def test_not_ready_when_database_down(
        self, api_app: FastAPI, client: TestClient, monkeypatch
    ):
        db_service = api_app.state.app_dependencies.database_service
        monkeypatch.setattr(db_service, "health_check", lambda: False)

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not_ready"}


class TestResponseHeaders:
    def test_request_id_generated(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["x-request-id"]

    def test_request_id_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["x-request-id"] == "req-123"

    def test_security_headers(self, client: TestClient):
        response = client.get("/api/students")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"
        assert response.headers["referrer-policy"] == "strict-origin-when-cross-origin"

    def test_headers_on_error_responses(self, client: TestClient):
        response = client.get("/api/employees")

        assert response.status_code == 401
        assert response.headers["x-request-id"]
        assert response.headers["x-frame-options"] == "DENY"
