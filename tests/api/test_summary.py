"""Tests for the service root endpoint."""

from fastapi.testclient import TestClient

from catalog_api.catalog.repository import InMemoryProductRepository


class TestCatalogSummary:
    """Tests for GET /."""

    def test_summary_shape(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "E-commerce Catalog System is running!"
        assert data["status"] == "Server is active"
        assert data["database"] == "Connected"
        assert "GET /products" in data["featuredEndpoints"]
        assert set(data["examplePayload"]) == {"createProduct", "addVariant"}

    def test_empty_store_reports_sample_count(self, client: TestClient):
        response = client.get("/")

        assert response.json()["totalProducts"] == 4

    def test_live_count(
        self, client: TestClient, repository: InMemoryProductRepository
    ):
        for name in ("Desk Lamp", "Floor Lamp"):
            client.post("/products", json={"name": name, "price": 30, "category": "Home"})

        response = client.get("/")

        assert response.json()["totalProducts"] == 2

    def test_store_down(
        self, client: TestClient, repository: InMemoryProductRepository
    ):
        repository.available = False

        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["database"] == "Disconnected"
        assert data["totalProducts"] == 4
