"""Unit tests for health check and root endpoints."""

from unittest.mock import AsyncMock

from redis.exceptions import ConnectionError


def test_health_check_success(client):
    """Test health check returns 200 when the store is reachable."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "fake-braspag"
    assert response.json()["environment"] == "test"


def test_health_check_store_failure(client):
    """Test health check returns 503 when the store cannot be reached."""
    client.app.state.store.ping = AsyncMock(side_effect=ConnectionError("Connection refused"))

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert "Connection refused" in response.json()["error"]


def test_root_endpoint(client):
    response = client.get("/")

    assert response.json() == {"service": "Fake Braspag", "version": "0.1.0", "status": "running"}
