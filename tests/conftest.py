"""Shared fixtures for the Product Catalog API tests."""

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.services.product_store import ProductStore


@pytest.fixture
def store():
    """A store holding the three seed products."""
    return ProductStore()


@pytest.fixture
def empty_store():
    return ProductStore(seed=[])


@pytest.fixture
def settings():
    return Settings(api_prefix="/api/v1", seed_products=True, log_level="INFO", log_file=None)


@pytest.fixture
def client(settings, store):
    """Test client bound to a fresh app serving ``store``."""
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
