"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from catalog_api.catalog.repository import InMemoryProductRepository


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "catalog-api"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """Test readiness endpoint returns ready status."""
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_readiness_check_store_down(
    client: TestClient, repository: InMemoryProductRepository
) -> None:
    """Test readiness endpoint reports an unreachable store."""
    repository.available = False

    response = client.get("/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "not_ready"}


def test_health_ignores_store_state(
    client: TestClient, repository: InMemoryProductRepository
) -> None:
    """Liveness does not depend on the store."""
    repository.available = False

    assert client.get("/health").status_code == 200


def test_unknown_route(client: TestClient) -> None:
    """Test unknown paths answer with the JSON error shape."""
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
