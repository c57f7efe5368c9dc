"""Tests for the /health endpoint."""

from fastapi.testclient import TestClient


def test_health_returns_ok(client: TestClient) -> None:
    """GET /health should return 200 with status 'ok'."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_health_reports_registry_sizes(client: TestClient) -> None:
    """GET /health reports the seeded type count and no species."""
    data = client.get("/health").json()
    assert data["types"] == 18
    assert data["species"] == 0
