"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides product store, product and client fixtures.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from product_api.catalog import Product, ProductStore
from product_api.config import Settings
from product_api.main import create_app


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def store() -> ProductStore:
    """Create a store holding the two sample products."""
    product_store = ProductStore()
    product_store.seed_sample_products()
    return product_store


@pytest.fixture
def empty_store() -> ProductStore:
    """Create a store with no products."""
    return ProductStore()


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def valid_product() -> Product:
    """A product that passes every field rule."""
    return Product(
        name="Mocha",
        description="Chocolate and coffee",
        price=3.10,
        sku="abc-def-ghi"
    )


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client(store: ProductStore) -> Generator[TestClient, None, None]:
    """Create test client serving a fresh seeded store."""
    app = create_app(Settings(debug=False), store)

    with TestClient(app) as test_client:
        yield test_client
