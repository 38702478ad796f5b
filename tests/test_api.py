"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

import pytest
from fastapi.testclient import TestClient

from product_api.catalog import ProductStore


NEW_PRODUCT = {
    "name": "Mocha",
    "description": "Chocolate and coffee",
    "price": 3.1,
    "sku": "abc-def-ghi",
}


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check reports loaded products."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 2

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestReadEndpoints:
    """Tests for listing and fetching products."""

    def test_list_products(self, client: TestClient):
        """Test listing returns the seeded products without timestamps."""
        response = client.get("/api/v1/products")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert [p["name"] for p in data] == ["Latte", "Espresso"]
        assert set(data[0]) == {"id", "name", "description", "price", "sku"}

    def test_get_product(self, client: TestClient):
        """Test fetching id 2."""
        response = client.get("/api/v1/products/2")
        assert response.status_code == 200
        assert response.json()["name"] == "Espresso"

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_non_numeric_id(self, client: TestClient, method: str):
        """Test a non-numeric id does not match a product route."""
        response = client.request(method.upper(), "/api/v1/products/abc")
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "NOT_FOUND"

    def test_get_missing_product(self, client: TestClient):
        """Test unknown id returns 404 with error envelope."""
        response = client.get("/api/v1/products/42")
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "PRODUCT_NOT_FOUND"
        assert data["error"]["details"]["product_id"] == 42


class TestCreateEndpoint:
    """Tests for creating products."""

    def test_create_product(self, client: TestClient, store: ProductStore):
        """Test a valid product is added with the next id."""
        response = client.post("/api/v1/products", json=NEW_PRODUCT)
        assert response.status_code == 201
        assert response.json() == {"id": 3, **NEW_PRODUCT}
        assert store.get_product_by_id(3).name == "Mocha"

    def test_create_ignores_client_id(self, client: TestClient):
        """Test a client-supplied id is replaced."""
        response = client.post("/api/v1/products", json={**NEW_PRODUCT, "id": 50})
        assert response.json()["id"] == 3

    def test_create_invalid_product(self, client: TestClient, store: ProductStore):
        """Test constraint violations return 422 listing every field."""
        response = client.post(
            "/api/v1/products",
            json={"name": "", "price": 0, "sku": "AB-CD-EF"}
        )
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        fields = [v["field"] for v in error["details"]["violations"]]
        assert fields == ["name", "price", "sku"]
        assert len(store) == 2

    @pytest.mark.parametrize("body", [b"{bad json", b"", b'{"price": "free"}'])
    def test_create_malformed_body(self, client: TestClient, body: bytes):
        """Test undecodable bodies return 400."""
        response = client.post(
            "/api/v1/products",
            content=body,
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PAYLOAD"

    @pytest.mark.parametrize("price", [b"NaN", b"Infinity", b"-Infinity"])
    def test_create_non_finite_price(self, client: TestClient, store: ProductStore, price: bytes):
        """Test non-finite prices are rejected before reaching the store."""
        body = b'{"name": "Tea", "price": ' + price + b', "sku": "abc-def-ghi"}'
        response = client.post(
            "/api/v1/products",
            content=body,
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PAYLOAD"
        assert len(store) == 2


class TestUpdateEndpoint:
    """Tests for replacing products."""

    def test_update_product(self, client: TestClient, store: ProductStore):
        """Test update keeps the id and replaces the fields."""
        response = client.put("/api/v1/products/1", json=NEW_PRODUCT)
        assert response.status_code == 204

        updated = client.get("/api/v1/products/1").json()
        assert updated == {"id": 1, **NEW_PRODUCT}
        assert [p.id for p in store.get_products()] == [1, 2]

    def test_update_missing_product(self, client: TestClient):
        """Test updating an unknown id returns 404."""
        response = client.put("/api/v1/products/999", json=NEW_PRODUCT)
        assert response.status_code == 404

    def test_update_invalid_product(self, client: TestClient):
        """Test validation runs before the store is touched."""
        response = client.put("/api/v1/products/1", json={**NEW_PRODUCT, "sku": "abc123"})
        assert response.status_code == 422
        assert client.get("/api/v1/products/1").json()["name"] == "Latte"


class TestDeleteEndpoint:
    """Tests for deleting products."""

    def test_delete_product(self, client: TestClient):
        """Test delete removes the product."""
        response = client.delete("/api/v1/products/1")
        assert response.status_code == 204

        remaining = client.get("/api/v1/products").json()
        assert [p["id"] for p in remaining] == [2]

    def test_delete_missing_product(self, client: TestClient):
        """Test deleting an unknown id returns 404."""
        response = client.delete("/api/v1/products/999")
        assert response.status_code == 404


class TestAppIsolation:
    """Tests for per-application stores."""

    def test_apps_do_not_share_stores(self, client: TestClient):
        """Test a second app starts from its own seeded store."""
        from product_api.config import Settings
        from product_api.main import create_app

        client.delete("/api/v1/products/1")

        with TestClient(create_app(Settings(debug=False))) as other:
            assert len(other.get("/api/v1/products").json()) == 2

    def test_unseeded_app(self):
        """Test seeding can be switched off."""
        from product_api.config import Settings
        from product_api.main import create_app

        app = create_app(Settings(debug=False, seed_sample_products=False))
        with TestClient(app) as test_client:
            assert test_client.get("/api/v1/products").json() == []
