"""Shared fixtures for catalog API tests."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.cards.store import reset_card_store
from catalog_api.catalog.repository import InMemoryProductRepository
from catalog_api.catalog.samples import SAMPLE_PRODUCTS
from catalog_api.catalog.service import reset_product_repository
from catalog_api.infrastructure.config import settings


@pytest.fixture
def repository() -> InMemoryProductRepository:
    """Create an empty in-memory product repository."""
    return InMemoryProductRepository()


@pytest.fixture(autouse=True)
def reset_stores(repository: InMemoryProductRepository):
    """Install a fresh product repository and card store for each test."""
    reset_product_repository(repository)
    reset_card_store()
    yield
    reset_product_repository()
    reset_card_store()


@pytest.fixture
def seeded_repository(repository: InMemoryProductRepository) -> InMemoryProductRepository:
    """Repository holding the sample products as live data."""
    for product in SAMPLE_PRODUCTS:
        repository._products[product.id] = product.model_copy(deep=True)
    return repository


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    from catalog_api.main import app

    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Get bearer token headers for the protected demo route."""
    return {"Authorization": f"Bearer {settings.bearer_token}"}
